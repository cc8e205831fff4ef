import logging
import os
from dotenv import load_dotenv

load_dotenv()

DB_PATH = os.getenv('FLASHCARDS_DB_PATH') or os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'flashcards.db'
)

# Seconds before a hosted-store call gives up and mock data is used instead
REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', '5'))

# Simulated auth round-trips
AUTH_DELAY = float(os.getenv('AUTH_DELAY', '0.5'))
SESSION_DELAY = float(os.getenv('SESSION_DELAY', '0.3'))

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)

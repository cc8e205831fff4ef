"""Static records served when the hosted store cannot be reached."""

from models.entities import Flashcard, FlashcardSet
from utils.constants import MOCK_USER_ID
from utils.utils import now_iso

_LOADED_AT = now_iso()

MOCK_SETS: tuple[FlashcardSet, ...] = (
    FlashcardSet(
        id='set-1',
        title='Sample Study Set',
        description='This is a sample study set created for demonstration',
        user_id=MOCK_USER_ID,
        created_at=_LOADED_AT,
        updated_at=_LOADED_AT,
    ),
    FlashcardSet(
        id='set-2',
        title='Language Learning',
        description='Basic vocabulary for language learning',
        user_id=MOCK_USER_ID,
        created_at=_LOADED_AT,
        updated_at=_LOADED_AT,
    ),
)

MOCK_CARDS: tuple[Flashcard, ...] = (
    Flashcard(
        id='card-1',
        question='What is a flashcard?',
        answer='A card with a question on one side and the answer on the other',
        set_id='set-1',
        is_remembered=False,
        created_at=_LOADED_AT,
        updated_at=_LOADED_AT,
    ),
    Flashcard(
        id='card-2',
        question='What is spaced repetition?',
        answer='Reviewing material at increasing intervals',
        set_id='set-1',
        is_remembered=True,
        created_at=_LOADED_AT,
        updated_at=_LOADED_AT,
    ),
    Flashcard(
        id='card-3',
        question='Hello',
        answer='Xin chào',
        set_id='set-2',
        is_remembered=False,
        created_at=_LOADED_AT,
        updated_at=_LOADED_AT,
    ),
)

SET_ID_PREFIX = 'set'
CARD_ID_PREFIX = 'card'

SHARE_CODE_PREFIX = 'FL'
IMPORTED_SUFFIX = ' (Imported)'

SET_OFFLINE_ERROR = 'Network error: Offline mode enabled'
CARD_OFFLINE_ERROR = 'Network error: Using offline mode'

# Fabricated account used by the simulated sign-in
MOCK_USER_ID = 'user-1'
MOCK_USER_EMAIL = 'user@example.com'

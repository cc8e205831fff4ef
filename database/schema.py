# ======================= SETS ===========================

set_schema = '''
    CREATE TABLE IF NOT EXISTS flashcard_sets (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        description TEXT NOT NULL DEFAULT '',
        user_id TEXT NOT NULL,

        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
'''

# ======================= CARDS ==========================

card_schema = '''
    CREATE TABLE IF NOT EXISTS flashcards (
        id TEXT PRIMARY KEY,
        set_id TEXT NOT NULL,

        -- Card content
        question TEXT NOT NULL,
        answer TEXT NOT NULL,

        -- Study progress
        is_remembered INTEGER NOT NULL DEFAULT 0,

        -- Metadata
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,

        -- Foreign key relationship
        FOREIGN KEY (set_id) REFERENCES flashcard_sets(id) ON DELETE CASCADE
    )
'''

set_index = 'CREATE INDEX IF NOT EXISTS idx_sets_user ON flashcard_sets (user_id)'
card_index = 'CREATE INDEX IF NOT EXISTS idx_cards_set ON flashcards (set_id)'

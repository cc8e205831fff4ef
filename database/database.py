import logging
import sqlite3
import uuid
from contextlib import contextmanager

from database.schema import set_schema, card_schema, set_index, card_index
from config import DB_PATH, REQUEST_TIMEOUT
from utils.utils import now_iso

# Columns a caller may write; anything else in a payload is ignored
SET_COLUMNS = ('title', 'description', 'user_id')
CARD_COLUMNS = ('question', 'answer', 'set_id', 'is_remembered')


# SET COMMANDS =============================================

def get_sets(user_id):
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(
            'SELECT * FROM flashcard_sets WHERE user_id = ? ORDER BY created_at DESC, rowid DESC',
            (user_id,)
        )
        return [dict(row) for row in cursor.fetchall()]


def get_set(set_id):
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute('SELECT * FROM flashcard_sets WHERE id = ?', (set_id,))
        row = cursor.fetchone()
        if row:
            return dict(row)
        return None


def create_set(fields):
    row = _insert('flashcard_sets', _pick(fields, SET_COLUMNS))
    logging.info(f"Created set {row['id']} for user {row['user_id']}")
    return row


def update_set(set_id, fields):
    return _update('flashcard_sets', set_id, _pick(fields, SET_COLUMNS))


def delete_set(set_id):
    """Delete a set together with its cards. Returns False if the set did not exist."""
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute('DELETE FROM flashcards WHERE set_id = ?', (set_id,))
        removed_cards = cursor.rowcount
        cursor.execute('DELETE FROM flashcard_sets WHERE id = ?', (set_id,))
        deleted = cursor.rowcount > 0

    if deleted:
        logging.info(f"Deleted set {set_id} and {removed_cards} card(s)")
    return deleted


# CARD COMMANDS ============================================

def get_cards(set_id):
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(
            'SELECT * FROM flashcards WHERE set_id = ? ORDER BY created_at ASC, rowid ASC',
            (set_id,)
        )
        return [dict(row) for row in cursor.fetchall()]


def get_card(card_id):
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute('SELECT * FROM flashcards WHERE id = ?', (card_id,))
        row = cursor.fetchone()
        if row:
            return dict(row)
        return None


def create_card(fields):
    values = _pick(fields, CARD_COLUMNS)
    values['is_remembered'] = int(bool(values.get('is_remembered', False)))
    return _insert('flashcards', values)


def update_card(card_id, fields):
    values = _pick(fields, CARD_COLUMNS)
    if 'is_remembered' in values:
        values['is_remembered'] = int(bool(values['is_remembered']))
    return _update('flashcards', card_id, values)


def delete_card(card_id):
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute('DELETE FROM flashcards WHERE id = ?', (card_id,))
        return cursor.rowcount > 0


# HELPERS ==================================================

def _pick(fields, allowed):
    return {key: fields[key] for key in allowed if key in fields}


def _insert(table, values):
    """Insert a row with a server-assigned id and timestamps, return it as a dict."""
    timestamp = now_iso()
    row = {'id': uuid.uuid4().hex, **values, 'created_at': timestamp, 'updated_at': timestamp}

    columns = ', '.join(row)
    placeholders = ', '.join('?' for _ in row)
    with get_db() as conn:
        conn.execute(f'INSERT INTO {table} ({columns}) VALUES ({placeholders})', tuple(row.values()))
        cursor = conn.execute(f'SELECT * FROM {table} WHERE id = ?', (row['id'],))
        return dict(cursor.fetchone())


def _update(table, row_id, values):
    """Apply values and refresh updated_at. Returns the updated row, or None if no such row."""
    values = {**values, 'updated_at': now_iso()}
    assignments = ', '.join(f'{column} = ?' for column in values)

    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(
            f'UPDATE {table} SET {assignments} WHERE id = ?',
            (*values.values(), row_id)
        )
        if cursor.rowcount == 0:
            return None
        cursor.execute(f'SELECT * FROM {table} WHERE id = ?', (row_id,))
        return dict(cursor.fetchone())


# DB CONNECTION ==============================================

@contextmanager
def get_db():
    # Give up on a locked database before the gateway gives up on us
    conn = sqlite3.connect(DB_PATH, timeout=REQUEST_TIMEOUT)
    conn.row_factory = sqlite3.Row

    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db():
    with get_db() as conn:
        conn.execute(set_schema)
        conn.execute(card_schema)
        conn.execute(set_index)
        conn.execute(card_index)

"""
Async adapter over the hosted store.

The gateway only needs these coroutines; anything exposing the same names
(list_sets, get_set, create_set, update_set, delete_set and the card
equivalents) can stand in for SqliteBackend. Rows travel as plain dicts.
"""

import asyncio
import logging
from typing import Any

import database.database as db

logger = logging.getLogger(__name__)

Row = dict[str, Any]


class BackendError(Exception):
    """The hosted store answered, but not with what was asked for."""


class SqliteBackend:
    """Runs the blocking database module in a worker thread."""

    # Sets

    async def list_sets(self, user_id: str) -> list[Row]:
        return await asyncio.to_thread(db.get_sets, user_id)

    async def get_set(self, set_id: str) -> Row:
        row = await asyncio.to_thread(db.get_set, set_id)
        return _require(row, 'flashcard_sets', set_id)

    async def create_set(self, fields: Row) -> Row:
        return await asyncio.to_thread(db.create_set, fields)

    async def update_set(self, set_id: str, fields: Row) -> Row:
        row = await asyncio.to_thread(db.update_set, set_id, fields)
        return _require(row, 'flashcard_sets', set_id)

    async def delete_set(self, set_id: str) -> bool:
        await asyncio.to_thread(db.delete_set, set_id)
        return True

    # Cards

    async def list_cards(self, set_id: str) -> list[Row]:
        return await asyncio.to_thread(db.get_cards, set_id)

    async def get_card(self, card_id: str) -> Row:
        row = await asyncio.to_thread(db.get_card, card_id)
        return _require(row, 'flashcards', card_id)

    async def create_card(self, fields: Row) -> Row:
        return await asyncio.to_thread(db.create_card, fields)

    async def update_card(self, card_id: str, fields: Row) -> Row:
        row = await asyncio.to_thread(db.update_card, card_id, fields)
        return _require(row, 'flashcards', card_id)

    async def delete_card(self, card_id: str) -> bool:
        await asyncio.to_thread(db.delete_card, card_id)
        return True


def _require(row: Row | None, table: str, row_id: str) -> Row:
    if row is None:
        raise BackendError(f"No row {row_id!r} in {table}")
    return row

"""
Safe wrappers for hosted-store calls.

Every store goes through Gateway instead of talking to the backend directly.
Each data call is raced against a timeout; if the backend raises or the
timeout wins, the gateway logs a warning and hands back fallback data instead
of raising:

  - list    -> the mock records belonging to the owner / parent set
  - get     -> the matching mock record, else the first one, else a blank
               record carrying the requested id
  - create  -> the payload with a '<prefix>-<millis>' id and fresh timestamps
  - update  -> the matching mock record (else the first) merged with the patch
  - delete  -> True

Auth calls never touch the backend and always succeed.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, TypeVar

from config import REQUEST_TIMEOUT
from models.entities import (
    CardPatch, Flashcard, FlashcardSet, NewCard, NewSet, SetPatch, User,
    card_from_payload, merge_card, merge_set, set_from_payload,
)
from services.mock_data import MOCK_CARDS, MOCK_SETS
from utils.constants import CARD_ID_PREFIX, MOCK_USER_EMAIL, MOCK_USER_ID, SET_ID_PREFIX
from utils.utils import make_id, now_iso

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Gateway:
    def __init__(
        self,
        backend: Any,
        timeout: float = REQUEST_TIMEOUT,
        mock_sets: tuple[FlashcardSet, ...] = MOCK_SETS,
        mock_cards: tuple[Flashcard, ...] = MOCK_CARDS,
    ) -> None:
        self.backend = backend
        self.timeout = timeout
        self.mock_sets = mock_sets
        self.mock_cards = mock_cards

    async def _safe_call(
        self,
        name: str,
        call: Callable[[], Awaitable[T]],
        fallback: Callable[[], T],
    ) -> T:
        """
        Run call() with a timeout. wait_for cancels the call if time runs out.

        Cancelling stops the coroutine, not a blocking write the backend has
        already handed to a worker thread: such a write can still commit after
        the fallback was returned. SqliteBackend keeps that window small by
        giving each sqlite connection a busy timeout no longer than
        REQUEST_TIMEOUT.
        """
        try:
            return await asyncio.wait_for(call(), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"{name} timed out after {self.timeout}s, using mock data")
        except Exception as e:
            logger.warning(f"{name} failed, using mock data: {e!r}")
        return fallback()

    # ── Sets ─────────────────────────────────────────────────

    async def list_sets(self, user_id: str) -> list[FlashcardSet]:
        async def call():
            rows = await self.backend.list_sets(user_id)
            return [FlashcardSet.from_row(row) for row in rows]

        return await self._safe_call(
            'list_sets', call,
            lambda: [s for s in self.mock_sets if s.user_id == user_id],
        )

    async def get_set(self, set_id: str) -> FlashcardSet:
        async def call():
            return FlashcardSet.from_row(await self.backend.get_set(set_id))

        return await self._safe_call('get_set', call, lambda: self._mock_set(set_id))

    async def create_set(self, payload: NewSet) -> FlashcardSet:
        async def call():
            return FlashcardSet.from_row(await self.backend.create_set(payload.as_row()))

        return await self._safe_call(
            'create_set', call,
            lambda: set_from_payload(payload, make_id(SET_ID_PREFIX), now_iso()),
        )

    async def update_set(self, set_id: str, patch: SetPatch) -> FlashcardSet:
        async def call():
            return FlashcardSet.from_row(await self.backend.update_set(set_id, patch.as_row()))

        return await self._safe_call(
            'update_set', call,
            lambda: merge_set(self._mock_set(set_id), patch, updated_at=now_iso()),
        )

    async def delete_set(self, set_id: str) -> bool:
        async def call():
            await self.backend.delete_set(set_id)
            return True

        return await self._safe_call('delete_set', call, lambda: True)

    # ── Cards ────────────────────────────────────────────────

    async def list_cards(self, set_id: str) -> list[Flashcard]:
        async def call():
            rows = await self.backend.list_cards(set_id)
            return [Flashcard.from_row(row) for row in rows]

        return await self._safe_call(
            'list_cards', call,
            lambda: [c for c in self.mock_cards if c.set_id == set_id],
        )

    async def get_card(self, card_id: str) -> Flashcard:
        async def call():
            return Flashcard.from_row(await self.backend.get_card(card_id))

        return await self._safe_call('get_card', call, lambda: self._mock_card(card_id))

    async def create_card(self, payload: NewCard) -> Flashcard:
        async def call():
            return Flashcard.from_row(await self.backend.create_card(payload.as_row()))

        return await self._safe_call(
            'create_card', call,
            lambda: card_from_payload(payload, make_id(CARD_ID_PREFIX), now_iso()),
        )

    async def update_card(self, card_id: str, patch: CardPatch) -> Flashcard:
        async def call():
            return Flashcard.from_row(await self.backend.update_card(card_id, patch.as_row()))

        return await self._safe_call(
            'update_card', call,
            lambda: merge_card(self._mock_card(card_id), patch, updated_at=now_iso()),
        )

    async def update_card_status(self, card_id: str, is_remembered: bool) -> Flashcard:
        return await self.update_card(card_id, CardPatch(is_remembered=is_remembered))

    async def delete_card(self, card_id: str) -> bool:
        async def call():
            await self.backend.delete_card(card_id)
            return True

        return await self._safe_call('delete_card', call, lambda: True)

    # ── Auth (simulated, no credential check) ────────────────

    async def sign_in(self, email: str, password: str) -> User:
        return User(id=MOCK_USER_ID, email=email, created_at=now_iso())

    async def sign_up(self, email: str, password: str) -> User:
        return User(id=MOCK_USER_ID, email=email, created_at=now_iso())

    async def sign_out(self) -> bool:
        return True

    async def get_current_user(self) -> User:
        return User(id=MOCK_USER_ID, email=MOCK_USER_EMAIL, created_at=now_iso())

    # ── Mock lookups ─────────────────────────────────────────

    def _mock_set(self, set_id: str) -> FlashcardSet:
        """Matching mock set, else the first one, else a blank set carrying set_id."""
        found = next((s for s in self.mock_sets if s.id == set_id), None)
        if found is not None:
            return found
        if self.mock_sets:
            return self.mock_sets[0]
        timestamp = now_iso()
        return FlashcardSet(
            id=set_id, title='', description='', user_id='',
            created_at=timestamp, updated_at=timestamp,
        )

    def _mock_card(self, card_id: str) -> Flashcard:
        """Matching mock card, else the first one, else a blank card carrying card_id."""
        found = next((c for c in self.mock_cards if c.id == card_id), None)
        if found is not None:
            return found
        if self.mock_cards:
            return self.mock_cards[0]
        timestamp = now_iso()
        return Flashcard(
            id=card_id, question='', answer='', set_id='', is_remembered=False,
            created_at=timestamp, updated_at=timestamp,
        )

"""
Cards of the open set, plus the study cursor over them.

The cursor invariant: current_index always points into cards, or is 0 with
current_card None when there are no cards. Every mutating operation ends by
recomputing stats, so stats.total == stats.remembered + stats.not_remembered.
"""

import logging
from dataclasses import dataclass, field

from models.entities import CardPatch, Flashcard, NewCard, SetStats, card_from_payload
from services.gateway import Gateway
from stores.base import Store
from utils.constants import CARD_ID_PREFIX, CARD_OFFLINE_ERROR
from utils.utils import make_local_id, now_iso

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardsState:
    cards: tuple[Flashcard, ...] = ()
    current_card: Flashcard | None = None
    current_index: int = 0
    stats: SetStats = field(default_factory=SetStats)
    is_loading: bool = False
    error: str | None = None


class CardsStore(Store[CardsState]):
    def __init__(self, gateway: Gateway) -> None:
        super().__init__(CardsState())
        self.gateway = gateway

    # ── Remote operations ────────────────────────────────────

    async def fetch_all(self, set_id: str) -> CardsState:
        try:
            self._set(is_loading=True, error=None)
            cards = tuple(await self.gateway.list_cards(set_id) or ())
            self._set(
                cards=cards,
                current_index=0,
                current_card=cards[0] if cards else None,
                is_loading=False,
            )
            return self.calculate_stats()
        except Exception as e:
            return self._set(error=str(e), is_loading=False, stats=SetStats())

    async def fetch_one(self, card_id: str) -> CardsState:
        try:
            self._set(is_loading=True, error=None)
            card = await self.gateway.get_card(card_id)
            return self._set(current_card=card, is_loading=False)
        except Exception as e:
            return self._set(error=str(e), is_loading=False)

    async def create(self, payload: NewCard) -> Flashcard:
        """Append a card. Never raises: offline, a local placeholder is appended instead."""
        try:
            self._set(is_loading=True, error=None)
            new_card = await self.gateway.create_card(payload)
            if not new_card or not new_card.id:
                raise ValueError('Failed to create card')

            self._set(cards=(*self.state.cards, new_card), current_card=new_card, is_loading=False)
        except Exception as e:
            logger.warning(f"Error creating card, keeping it locally: {e!r}")
            new_card = card_from_payload(payload, make_local_id(CARD_ID_PREFIX), now_iso())
            self._set(
                cards=(*self.state.cards, new_card),
                current_card=new_card,
                error=CARD_OFFLINE_ERROR,
                is_loading=False,
            )

        self.calculate_stats()
        return new_card

    async def update(self, card_id: str, patch: CardPatch) -> CardsState:
        try:
            self._set(is_loading=True, error=None)
            updated = await self.gateway.update_card(card_id, patch)
            self._replace_card(card_id, updated)
            return self.calculate_stats()
        except Exception as e:
            return self._set(error=str(e), is_loading=False)

    async def update_status(self, card_id: str, is_remembered: bool) -> CardsState:
        try:
            self._set(is_loading=True, error=None)
            updated = await self.gateway.update_card_status(card_id, is_remembered)
            self._replace_card(card_id, updated)
            return self.calculate_stats()
        except Exception as e:
            return self._set(error=str(e), is_loading=False)

    async def delete(self, card_id: str) -> CardsState:
        try:
            self._set(is_loading=True, error=None)
            await self.gateway.delete_card(card_id)

            remaining = tuple(c for c in self.state.cards if c.id != card_id)
            # The position is kept, not the card: removing a card before the
            # cursor moves selection to the card after the old current one.
            index = max(min(self.state.current_index, len(remaining) - 1), 0)
            self._set(
                cards=remaining,
                current_index=index,
                current_card=remaining[index] if remaining else None,
                is_loading=False,
            )
            return self.calculate_stats()
        except Exception as e:
            return self._set(error=str(e), is_loading=False)

    def _replace_card(self, card_id: str, updated: Flashcard) -> None:
        current = self.state.current_card
        self._set(
            cards=tuple(updated if c.id == card_id else c for c in self.state.cards),
            current_card=updated if current and current.id == card_id else current,
            is_loading=False,
        )

    # ── Study cursor ─────────────────────────────────────────

    def next(self) -> CardsState:
        return self._move(1)

    def previous(self) -> CardsState:
        return self._move(-1)

    def reset(self) -> CardsState:
        """Back to the first card; used when a study session starts or ends."""
        cards = self.state.cards
        return self._set(current_index=0, current_card=cards[0] if cards else None)

    def _move(self, step: int) -> CardsState:
        cards = self.state.cards
        if not cards:
            return self._set(current_index=0, current_card=None)

        index = (self.state.current_index + step) % len(cards)
        return self._set(current_index=index, current_card=cards[index])

    # ── Stats ────────────────────────────────────────────────

    def calculate_stats(self) -> CardsState:
        return self._set(stats=SetStats.from_cards(self.state.cards))

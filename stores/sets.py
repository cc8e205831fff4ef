import logging
from dataclasses import dataclass

from models.entities import FlashcardSet, NewSet, SetPatch, set_from_payload
from services.gateway import Gateway
from stores.base import Store
from utils.constants import SET_ID_PREFIX, SET_OFFLINE_ERROR
from utils.utils import make_local_id, now_iso

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetsState:
    sets: tuple[FlashcardSet, ...] = ()
    current_set: FlashcardSet | None = None
    is_loading: bool = False
    error: str | None = None


class SetsStore(Store[SetsState]):
    def __init__(self, gateway: Gateway) -> None:
        super().__init__(SetsState())
        self.gateway = gateway

    async def fetch_all(self, user_id: str) -> SetsState:
        try:
            self._set(is_loading=True, error=None)
            sets = tuple(await self.gateway.list_sets(user_id))
            return self._set(
                sets=sets,
                current_set=sets[0] if sets else None,
                is_loading=False,
            )
        except Exception as e:
            return self._set(error=str(e), is_loading=False)

    async def fetch_one(self, set_id: str) -> SetsState:
        try:
            self._set(is_loading=True, error=None)
            flashcard_set = await self.gateway.get_set(set_id)
            return self._set(current_set=flashcard_set, is_loading=False)
        except Exception as e:
            return self._set(error=str(e), is_loading=False)

    async def create(self, payload: NewSet) -> FlashcardSet:
        """Create a set. Never raises: offline, a local placeholder is returned instead."""
        try:
            self._set(is_loading=True, error=None)
            new_set = await self.gateway.create_set(payload)
            if not new_set or not new_set.id:
                raise ValueError('Failed to create set')

            self._set(
                sets=(new_set, *self.state.sets),
                current_set=new_set,
                is_loading=False,
            )
            return new_set
        except Exception as e:
            logger.warning(f"Error creating set, keeping it locally: {e!r}")
            local_set = set_from_payload(payload, make_local_id(SET_ID_PREFIX), now_iso())
            self._set(
                sets=(local_set, *self.state.sets),
                current_set=local_set,
                error=SET_OFFLINE_ERROR,
                is_loading=False,
            )
            return local_set

    async def update(self, set_id: str, patch: SetPatch) -> SetsState:
        try:
            self._set(is_loading=True, error=None)
            updated = await self.gateway.update_set(set_id, patch)
            current = self.state.current_set
            return self._set(
                sets=tuple(updated if s.id == set_id else s for s in self.state.sets),
                current_set=updated if current and current.id == set_id else current,
                is_loading=False,
            )
        except Exception as e:
            return self._set(error=str(e), is_loading=False)

    async def delete(self, set_id: str) -> SetsState:
        try:
            self._set(is_loading=True, error=None)
            await self.gateway.delete_set(set_id)
            current = self.state.current_set
            return self._set(
                sets=tuple(s for s in self.state.sets if s.id != set_id),
                current_set=None if current and current.id == set_id else current,
                is_loading=False,
            )
        except Exception as e:
            return self._set(error=str(e), is_loading=False)

import asyncio
import logging
from dataclasses import dataclass

from models.entities import Flashcard, FlashcardSet, NewCard, NewSet
from services.gateway import Gateway
from stores.base import Store
from utils import share_code
from utils.constants import IMPORTED_SUFFIX
from utils.share_code import InvalidCodeError

logger = logging.getLogger(__name__)


class NoSharedSetError(LookupError):
    """Import was asked for before a share code resolved to a set with cards."""


@dataclass(frozen=True)
class ShareState:
    share_code: str | None = None
    shared_set: FlashcardSet | None = None
    shared_cards: tuple[Flashcard, ...] = ()
    is_loading: bool = False
    error: str | None = None


class ShareStore(Store[ShareState]):
    def __init__(self, gateway: Gateway) -> None:
        super().__init__(ShareState())
        self.gateway = gateway

    def generate_share_code(self, set_id: str) -> str:
        code = share_code.encode(set_id)
        self._set(share_code=code)
        return code

    async def resolve_shared(self, code: str) -> ShareState:
        """
        Load the set behind a share code for preview.

        An invalid code is recorded in state and re-raised as InvalidCodeError
        so the caller can tell a typo apart from a network problem.
        """
        try:
            # Drop the previous preview so a failed resolve leaves nothing to import
            self._set(is_loading=True, error=None, shared_set=None, shared_cards=())
            set_id = share_code.decode(code)
            shared_set, shared_cards = await asyncio.gather(
                self.gateway.get_set(set_id),
                self.gateway.list_cards(set_id),
            )
            return self._set(
                shared_set=shared_set,
                shared_cards=tuple(shared_cards),
                is_loading=False,
            )
        except InvalidCodeError as e:
            self._set(error=str(e), is_loading=False)
            raise
        except Exception as e:
            return self._set(error=str(e), is_loading=False)

    async def import_shared(self, target_user_id: str) -> str | None:
        """Copy the resolved set and its cards to target_user_id. Returns the new set id, or None."""
        try:
            shared_set = self.state.shared_set
            shared_cards = self.state.shared_cards
            if shared_set is None or not shared_cards:
                raise NoSharedSetError('No shared set to import')

            self._set(is_loading=True, error=None)
            new_set = await self.gateway.create_set(NewSet(
                title=f"{shared_set.title}{IMPORTED_SUFFIX}",
                description=shared_set.description,
                user_id=target_user_id,
            ))

            await asyncio.gather(*(
                self.gateway.create_card(NewCard(
                    question=card.question,
                    answer=card.answer,
                    set_id=new_set.id,
                    is_remembered=False,
                ))
                for card in shared_cards
            ))

            logger.info(f"Imported {len(shared_cards)} card(s) into set {new_set.id} for {target_user_id}")
            self._set(is_loading=False)
            return new_set.id
        except Exception as e:
            logger.warning(f"Import failed: {e}")
            self._set(error=str(e), is_loading=False)
            return None

"""
Entity types shared by the gateway and the stores.

Entities are frozen: a store never edits a card in place, it swaps in a new
one. Patches carry optional fields where None means "leave unchanged", and
the merge_* functions apply them field by field.
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Iterable


@dataclass(frozen=True)
class User:
    id: str
    email: str
    created_at: str


@dataclass(frozen=True)
class FlashcardSet:
    id: str
    title: str
    description: str
    user_id: str
    created_at: str
    updated_at: str

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> 'FlashcardSet':
        return cls(
            id=str(row['id']),
            title=row['title'],
            description=row.get('description') or '',
            user_id=str(row['user_id']),
            created_at=row['created_at'],
            updated_at=row['updated_at'],
        )


@dataclass(frozen=True)
class Flashcard:
    id: str
    question: str
    answer: str
    set_id: str
    is_remembered: bool
    created_at: str
    updated_at: str

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> 'Flashcard':
        # sqlite hands booleans back as 0/1
        return cls(
            id=str(row['id']),
            question=row['question'],
            answer=row['answer'],
            set_id=str(row['set_id']),
            is_remembered=bool(row.get('is_remembered', False)),
            created_at=row['created_at'],
            updated_at=row['updated_at'],
        )


@dataclass(frozen=True)
class SetStats:
    total: int = 0
    remembered: int = 0
    not_remembered: int = 0

    @classmethod
    def from_cards(cls, cards: Iterable[Flashcard]) -> 'SetStats':
        cards = list(cards)
        total = len(cards)
        remembered = sum(1 for card in cards if card.is_remembered)
        return cls(total=total, remembered=remembered, not_remembered=total - remembered)


# ── Payloads ─────────────────────────────────────────────────

@dataclass(frozen=True)
class NewSet:
    title: str
    description: str = ''
    user_id: str = ''

    def as_row(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class NewCard:
    question: str
    answer: str
    set_id: str
    is_remembered: bool = False

    def as_row(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SetPatch:
    title: str | None = None
    description: str | None = None
    user_id: str | None = None

    def as_row(self) -> dict[str, Any]:
        return _set_fields(self)


@dataclass(frozen=True)
class CardPatch:
    question: str | None = None
    answer: str | None = None
    set_id: str | None = None
    is_remembered: bool | None = None

    def as_row(self) -> dict[str, Any]:
        return _set_fields(self)


def _set_fields(patch) -> dict[str, Any]:
    return {f.name: getattr(patch, f.name) for f in fields(patch) if getattr(patch, f.name) is not None}


# ── Merging ──────────────────────────────────────────────────

def merge_set(flashcard_set: FlashcardSet, patch: SetPatch, updated_at: str | None = None) -> FlashcardSet:
    changes = patch.as_row()
    if updated_at is not None:
        changes['updated_at'] = updated_at
    return replace(flashcard_set, **changes)


def merge_card(card: Flashcard, patch: CardPatch, updated_at: str | None = None) -> Flashcard:
    changes = patch.as_row()
    if updated_at is not None:
        changes['updated_at'] = updated_at
    return replace(card, **changes)


def set_from_payload(payload: NewSet, set_id: str, timestamp: str) -> FlashcardSet:
    return FlashcardSet(
        id=set_id,
        title=payload.title,
        description=payload.description,
        user_id=payload.user_id,
        created_at=timestamp,
        updated_at=timestamp,
    )


def card_from_payload(payload: NewCard, card_id: str, timestamp: str) -> Flashcard:
    """Locally built cards always start out not remembered."""
    return Flashcard(
        id=card_id,
        question=payload.question,
        answer=payload.answer,
        set_id=payload.set_id,
        is_remembered=False,
        created_at=timestamp,
        updated_at=timestamp,
    )

"""
Cache entries for generated content.

Entries are write-once: once a key exists it is served as-is and never
refreshed against the provider.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Generic, TypeVar

from lingodeck.domain.learning.entities.flashcard import FlashcardRecord

T = TypeVar("T")


@dataclass(frozen=True)
class DeckPayload:
    """Cached payload of a flashcard deck. Card order is display order."""

    cards: tuple[FlashcardRecord, ...]

    def __len__(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class AudioPayload:
    """Cached payload of a speech clip."""

    audio_content: str


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """A payload stored under a derived cache key."""

    key: str
    payload: T
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

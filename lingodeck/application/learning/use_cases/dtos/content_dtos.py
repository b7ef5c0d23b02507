"""DTOs for generated content served through the cache."""

from dataclasses import dataclass

from lingodeck.domain.learning.entities.flashcard import FlashcardRecord


@dataclass(frozen=True)
class DeckResult:
    """A deck together with how it was served."""

    cache_key: str
    cards: list[FlashcardRecord]
    cache_hit: bool
    persisted: bool = True


@dataclass(frozen=True)
class AudioResult:
    """A speech clip together with how it was served."""

    cache_key: str
    audio_content: str
    cache_hit: bool
    persisted: bool = True

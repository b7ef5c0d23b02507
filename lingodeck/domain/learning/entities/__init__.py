"""Entities of the learning context."""

from .cache_entry import AudioPayload, CacheEntry, DeckPayload
from .flashcard import NO_IMAGE, CardDescription, FlashcardRecord, GrammaticalType

__all__ = [
    "NO_IMAGE",
    "AudioPayload",
    "CacheEntry",
    "CardDescription",
    "DeckPayload",
    "FlashcardRecord",
    "GrammaticalType",
]

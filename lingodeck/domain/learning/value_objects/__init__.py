"""Value objects of the learning context."""

from .cache_key import AudioKeyScheme, CacheKey
from .deck_request import DeckRequest, Difficulty

__all__ = [
    "AudioKeyScheme",
    "CacheKey",
    "DeckRequest",
    "Difficulty",
]

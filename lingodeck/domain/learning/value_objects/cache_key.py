"""
CacheKey value object.

Cache keys are derived deterministically from the logical request, so the
same deck or the same text always maps to the same stored entry.
"""

import hashlib
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Self

from lingodeck.domain.learning.value_objects.deck_request import DeckRequest, Difficulty

DECK_KEY_PREFIX = "deck"
AUDIO_KEY_PREFIX = "audio"
LEGACY_AUDIO_TEXT_LENGTH = 100

_WHITESPACE_RUN = re.compile(r"\s+")
_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


class AudioKeyScheme(StrEnum):
    """How audio keys are derived from text."""

    # SHA-256 of the full text
    DIGEST = "digest"
    # First 100 alphanumeric-normalized characters; distinct texts sharing
    # that prefix collide and share one clip
    LEGACY = "legacy"


@dataclass(frozen=True)
class CacheKey:
    """Identifier of a cache entry."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("CacheKey cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def for_deck(
        cls,
        source_language_name: str,
        target_language_name: str,
        difficulty: Difficulty | str,
    ) -> Self:
        """
        Derive the key of a deck.

        Parts are joined with underscores and every whitespace run becomes a
        single underscore. Language names are not case-folded.
        """
        raw = "_".join(
            (DECK_KEY_PREFIX, source_language_name, target_language_name, str(difficulty))
        )
        return cls(_WHITESPACE_RUN.sub("_", raw))

    @classmethod
    def for_deck_request(cls, request: DeckRequest) -> Self:
        return cls.for_deck(
            request.source_language_name, request.target_language_name, request.difficulty
        )

    @classmethod
    def for_audio(cls, text: str, scheme: AudioKeyScheme | str = AudioKeyScheme.DIGEST) -> Self:
        """Derive the key of a speech clip for ``text``."""
        if AudioKeyScheme(scheme) is AudioKeyScheme.LEGACY:
            normalized = _NON_ALPHANUMERIC.sub("_", text)[:LEGACY_AUDIO_TEXT_LENGTH]
            return cls(f"{AUDIO_KEY_PREFIX}_{normalized}")

        digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
        return cls(f"{AUDIO_KEY_PREFIX}_{digest}")

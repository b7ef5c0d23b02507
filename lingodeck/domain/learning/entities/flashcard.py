"""
Flashcard records for language-learning decks.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Self

NO_IMAGE = "no-image"


class GrammaticalType(StrEnum):
    """Closed set of grammatical types a card can carry."""

    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    OTHER = "other"

    @classmethod
    def normalize(cls, raw: str | None) -> Self:
        """
        Map a free-form provider string onto the closed set.

        The value is stripped and lower-cased first. Anything that is not
        a known member (including empty input) becomes ``OTHER``.
        """
        candidate = (raw or "").strip().lower()
        try:
            return cls(candidate)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class CardDescription:
    """Text part of a card as produced by deck generation, before images."""

    word: str
    translation: str
    grammatical_type: str
    example_sentence: str


@dataclass(frozen=True)
class FlashcardRecord:
    """
    A complete flashcard.

    Business Rules:
    - Grammatical type is always a member of GrammaticalType
    - Image is a data URL or the NO_IMAGE sentinel
    """

    word: str
    translation: str
    grammatical_type: GrammaticalType
    example_sentence: str
    image: str = NO_IMAGE

    @property
    def has_image(self) -> bool:
        return self.image != NO_IMAGE

    @classmethod
    def from_description(cls, description: CardDescription, image: str | None) -> Self:
        """Combine a generated description with its image (or the placeholder)."""
        return cls(
            word=description.word,
            translation=description.translation,
            grammatical_type=GrammaticalType.normalize(description.grammatical_type),
            example_sentence=description.example_sentence,
            image=image or NO_IMAGE,
        )

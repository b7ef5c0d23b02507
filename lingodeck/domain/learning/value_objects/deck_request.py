"""
DeckRequest value object and difficulty levels.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Self

from lingodeck.domain.common.exceptions import ValidationError


class Difficulty(StrEnum):
    """Learner level a deck is generated for."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    EXPERT = "Expert"

    @classmethod
    def parse(cls, value: str) -> Self:
        try:
            return cls(value)
        except ValueError as err:
            allowed = ", ".join(member.value for member in cls)
            raise ValidationError(
                f"Invalid difficulty '{value}'. Expected one of: {allowed}",
                field="difficulty",
                value=value,
            ) from err


@dataclass(frozen=True)
class DeckRequest:
    """
    Logical request for a deck.

    Language names are identities as given (case-sensitive), not locale codes.
    """

    source_language_name: str
    target_language_name: str
    difficulty: Difficulty

    @classmethod
    def create(
        cls,
        source_language_name: str | None,
        target_language_name: str | None,
        difficulty: str | None,
    ) -> Self:
        """
        Build a request from raw input.

        Raises:
            ValidationError: If a field is absent or blank, or difficulty is unknown
        """
        for field_name, value in (
            ("sourceLang", source_language_name),
            ("targetLang", target_language_name),
            ("difficulty", difficulty),
        ):
            if not value or not value.strip():
                raise ValidationError(f"Missing required parameter '{field_name}'", field=field_name)

        # Guaranteed by the loop above
        assert source_language_name is not None
        assert target_language_name is not None
        assert difficulty is not None
        return cls(
            source_language_name=source_language_name,
            target_language_name=target_language_name,
            difficulty=Difficulty.parse(difficulty),
        )

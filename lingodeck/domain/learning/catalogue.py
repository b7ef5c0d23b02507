"""Languages and difficulty levels offered to clients."""

from dataclasses import dataclass

from lingodeck.domain.learning.value_objects.deck_request import Difficulty


@dataclass(frozen=True)
class Language:
    code: str
    name: str


# Deck keys use the language name, not the code
LANGUAGES: tuple[Language, ...] = (
    Language(code="fr", name="French"),
    Language(code="en", name="English"),
    Language(code="es", name="Spanish"),
    Language(code="de", name="German"),
    Language(code="it", name="Italian"),
)

DIFFICULTIES: tuple[Difficulty, ...] = tuple(Difficulty)

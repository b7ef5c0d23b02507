"""Learning context schemas."""

from lingodeck.infrastructure.learning.schemas.content_schemas import (
    ContentOptionsResponse,
    DeckRequestBody,
    FlashcardSchema,
    LanguageOption,
    SpeechRequestBody,
    SpeechResponse,
)

__all__ = [
    "ContentOptionsResponse",
    "DeckRequestBody",
    "FlashcardSchema",
    "LanguageOption",
    "SpeechRequestBody",
    "SpeechResponse",
]

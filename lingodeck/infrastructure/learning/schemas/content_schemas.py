"""Pydantic schemas for deck and speech request/response validation."""

from pydantic import BaseModel, ConfigDict, Field

from lingodeck.domain.learning.entities.flashcard import FlashcardRecord, GrammaticalType


class DeckRequestBody(BaseModel):
    """Schema for a deck request. Presence is checked by the use case."""

    model_config = ConfigDict(populate_by_name=True)

    source_lang: str | None = Field(None, alias="sourceLang", description="Source language name")
    target_lang: str | None = Field(None, alias="targetLang", description="Target language name")
    difficulty: str | None = Field(None, description="Beginner, Intermediate or Expert")


class FlashcardSchema(BaseModel):
    """Schema for a single flashcard in a deck response."""

    word: str = Field(..., description="Word in the target language")
    translation: str = Field(..., description="Translation in the source language")
    type: GrammaticalType = Field(..., description="Grammatical type")
    sentence: str = Field(..., description="Example sentence in the target language")
    image: str = Field(..., description="Image data URL or 'no-image'")

    @classmethod
    def from_record(cls, record: FlashcardRecord) -> "FlashcardSchema":
        return cls(
            word=record.word,
            translation=record.translation,
            type=record.grammatical_type,
            sentence=record.example_sentence,
            image=record.image,
        )


class SpeechRequestBody(BaseModel):
    """Schema for a speech request."""

    text: str | None = Field(None, description="Text to speak")


class SpeechResponse(BaseModel):
    """Schema for a speech response."""

    model_config = ConfigDict(populate_by_name=True)

    audio_content: str = Field(..., alias="audioContent", description="Base64-encoded audio")


class LanguageOption(BaseModel):
    """Schema for a selectable language."""

    code: str
    name: str


class ContentOptionsResponse(BaseModel):
    """Schema for the languages and difficulties offered to clients."""

    languages: list[LanguageOption] = Field(..., description="Selectable languages")
    difficulties: list[str] = Field(..., description="Difficulty levels in ascending order")

"""Mappers for cache ORM rows ↔ domain cache entries."""

from datetime import UTC, datetime
from typing import Any

from lingodeck.domain.learning.entities.cache_entry import AudioPayload, CacheEntry, DeckPayload
from lingodeck.domain.learning.entities.flashcard import NO_IMAGE, FlashcardRecord, GrammaticalType
from lingodeck.models import FlashcardDeck as FlashcardDeckORM
from lingodeck.models import SpeechAudio as SpeechAudioORM


def card_to_document(card: FlashcardRecord) -> dict[str, Any]:
    """Convert a card to its stored/wire document shape."""
    return {
        "word": card.word,
        "translation": card.translation,
        "type": card.grammatical_type.value,
        "sentence": card.example_sentence,
        "image": card.image,
    }


def card_from_document(document: dict[str, Any]) -> FlashcardRecord:
    """Convert a stored card document back to a card."""
    return FlashcardRecord(
        word=document["word"],
        translation=document["translation"],
        grammatical_type=GrammaticalType.normalize(document.get("type")),
        example_sentence=document["sentence"],
        image=document.get("image") or NO_IMAGE,
    )


def _as_aware(value: datetime | None) -> datetime:
    # SQLite drops tzinfo on read
    if value is None:
        return datetime.now(UTC)
    return value if value.tzinfo else value.replace(tzinfo=UTC)


class FlashcardDeckMapper:
    """Mapper for FlashcardDeck ORM ↔ CacheEntry[DeckPayload] conversion."""

    def to_domain(self, orm_model: FlashcardDeckORM) -> CacheEntry[DeckPayload]:
        """Convert ORM model to domain entry."""
        cards = tuple(card_from_document(document) for document in orm_model.cards)
        return CacheEntry(
            key=orm_model.key,
            payload=DeckPayload(cards=cards),
            created_at=_as_aware(orm_model.created_at),
        )

    def to_orm(self, key: str, payload: DeckPayload, created_at: datetime) -> FlashcardDeckORM:
        """Convert a deck payload to an ORM model."""
        return FlashcardDeckORM(
            key=key,
            cards=[card_to_document(card) for card in payload.cards],
            created_at=created_at,
        )


class SpeechAudioMapper:
    """Mapper for SpeechAudio ORM ↔ CacheEntry[AudioPayload] conversion."""

    def to_domain(self, orm_model: SpeechAudioORM) -> CacheEntry[AudioPayload]:
        """Convert ORM model to domain entry."""
        return CacheEntry(
            key=orm_model.key,
            payload=AudioPayload(audio_content=orm_model.audio_content),
            created_at=_as_aware(orm_model.created_at),
        )

    def to_orm(self, key: str, payload: AudioPayload, created_at: datetime) -> SpeechAudioORM:
        """Convert an audio payload to an ORM model."""
        return SpeechAudioORM(
            key=key,
            audio_content=payload.audio_content,
            created_at=created_at,
        )

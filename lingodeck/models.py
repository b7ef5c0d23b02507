"""Database models for the two cache collections."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from lingodeck.database import Base

CACHE_KEY_MAX_LENGTH = 255


class FlashcardDeck(Base):
    """Cached flashcard deck, keyed by the derived deck key."""

    __tablename__ = "flashcard_decks"

    key: Mapped[str] = mapped_column(String(CACHE_KEY_MAX_LENGTH), primary_key=True)
    cards: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of FlashcardDeck."""
        return f"<FlashcardDeck(key='{self.key}', cards={len(self.cards)})>"


class SpeechAudio(Base):
    """Cached speech clip, keyed by the derived audio key."""

    __tablename__ = "speech_audio"

    key: Mapped[str] = mapped_column(String(CACHE_KEY_MAX_LENGTH), primary_key=True)
    audio_content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of SpeechAudio."""
        return f"<SpeechAudio(key='{self.key}')>"

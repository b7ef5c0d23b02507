"""Learning context repositories."""

from .flashcard_deck_repository import FlashcardDeckRepository
from .speech_audio_repository import SpeechAudioRepository

__all__ = [
    "FlashcardDeckRepository",
    "SpeechAudioRepository",
]

"""DTOs returned by learning use cases."""

from .content_dtos import AudioResult, DeckResult

__all__ = [
    "AudioResult",
    "DeckResult",
]

"""Exceptions for learning use cases."""

from lingodeck.exceptions import ServiceError


class DeckGenerationError(ServiceError):
    """Deck could not be generated on a cache miss."""

    def __init__(self, cache_key: str) -> None:
        self.cache_key = cache_key
        super().__init__("Internal Server Error while generating flashcards.")


class SpeechGenerationError(ServiceError):
    """Speech audio could not be generated on a cache miss."""

    def __init__(self, cache_key: str) -> None:
        self.cache_key = cache_key
        super().__init__("Internal Server Error while generating speech.")

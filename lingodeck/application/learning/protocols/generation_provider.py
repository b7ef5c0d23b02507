"""Protocol for the generative AI provider used to fill cache misses."""

from typing import Protocol

from lingodeck.domain.learning.entities.flashcard import CardDescription
from lingodeck.domain.learning.value_objects.deck_request import DeckRequest


class GenerationProviderProtocol(Protocol):
    """Protocol for deck text, image and speech generation."""

    async def generate_deck_text(self, request: DeckRequest) -> list[CardDescription]:
        """
        Generate the text part of a deck.

        Args:
            request: The deck request (languages and difficulty)

        Returns:
            Card descriptions in display order

        Raises:
            ProviderError: If the provider call fails
        """
        ...

    async def generate_image(self, word: str) -> str:
        """
        Generate an icon image for a word.

        Returns:
            Image as a data URL (or the no-image sentinel)

        Raises:
            ProviderError: If the provider call fails
        """
        ...

    async def generate_speech_audio(self, text: str) -> str:
        """
        Generate spoken audio for a text.

        Returns:
            Base64-encoded audio

        Raises:
            ProviderError: If the provider call fails or returns no audio
        """
        ...

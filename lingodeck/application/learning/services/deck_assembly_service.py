"""Assembles complete decks by fanning out one image request per card."""

import asyncio
from collections.abc import Sequence

import structlog

from lingodeck.application.learning.protocols.generation_provider import (
    GenerationProviderProtocol,
)
from lingodeck.domain.learning.entities.flashcard import (
    NO_IMAGE,
    CardDescription,
    FlashcardRecord,
)

logger = structlog.get_logger(__name__)


class DeckAssemblyService:
    """
    Turns card descriptions into flashcard records with images.

    All image calls run concurrently and are awaited until every one has
    settled. A failed image degrades its card to the no-image placeholder
    and never aborts the deck. Output order is input order.
    """

    def __init__(
        self,
        generation_provider: GenerationProviderProtocol,
        concurrency_limit: int | None = None,
    ) -> None:
        self.generation_provider = generation_provider
        self.concurrency_limit = concurrency_limit

    async def assemble_deck(
        self, descriptions: Sequence[CardDescription]
    ) -> list[FlashcardRecord]:
        """
        Request one image per description and build the final deck.

        Args:
            descriptions: Card descriptions in display order

        Returns:
            One flashcard record per description, same order
        """
        if not descriptions:
            return []

        semaphore = asyncio.Semaphore(self.concurrency_limit) if self.concurrency_limit else None

        async def generate(word: str) -> str:
            if semaphore is None:
                return await self.generation_provider.generate_image(word)
            async with semaphore:
                return await self.generation_provider.generate_image(word)

        results = await asyncio.gather(
            *(generate(description.word) for description in descriptions),
            return_exceptions=True,
        )

        cards: list[FlashcardRecord] = []
        failures = 0
        for index, (description, result) in enumerate(zip(descriptions, results, strict=True)):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    # Cancellation and interpreter exits are not provider failures
                    raise result
                failures += 1
                logger.warning(
                    "image_generation_failed",
                    word=description.word,
                    index=index,
                    error=str(result),
                )
                image = NO_IMAGE
            else:
                image = result
            cards.append(FlashcardRecord.from_description(description, image))

        logger.info(
            "deck_assembled",
            card_count=len(cards),
            image_failures=failures,
        )
        return cards

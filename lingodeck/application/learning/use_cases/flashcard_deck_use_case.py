"""Use case for serving flashcard decks through the cache."""

import structlog

from lingodeck.application.learning.protocols.cache_store import CacheStoreProtocol
from lingodeck.application.learning.protocols.generation_provider import (
    GenerationProviderProtocol,
)
from lingodeck.application.learning.services.deck_assembly_service import DeckAssemblyService
from lingodeck.application.learning.services.single_flight import KeyedLock
from lingodeck.application.learning.use_cases.dtos import DeckResult
from lingodeck.application.learning.use_cases.exceptions import DeckGenerationError
from lingodeck.domain.learning.entities.cache_entry import CacheEntry, DeckPayload
from lingodeck.domain.learning.entities.flashcard import FlashcardRecord
from lingodeck.domain.learning.value_objects.cache_key import CacheKey
from lingodeck.domain.learning.value_objects.deck_request import DeckRequest
from lingodeck.exceptions import CacheStoreError, ProviderError

logger = structlog.get_logger(__name__)


class GetFlashcardDeckUseCase:
    """Cache-aside retrieval of a deck for a (source, target, difficulty) request."""

    def __init__(
        self,
        deck_store: CacheStoreProtocol[DeckPayload],
        generation_provider: GenerationProviderProtocol,
        deck_assembly_service: DeckAssemblyService,
        keyed_lock: KeyedLock,
    ) -> None:
        self.deck_store = deck_store
        self.generation_provider = generation_provider
        self.deck_assembly_service = deck_assembly_service
        self.keyed_lock = keyed_lock

    async def get_deck(
        self,
        source_language_name: str | None,
        target_language_name: str | None,
        difficulty: str | None,
    ) -> DeckResult:
        """
        Get a deck from the cache, generating and storing it on a miss.

        Args:
            source_language_name: Language the learner already knows
            target_language_name: Language being learned
            difficulty: Beginner, Intermediate or Expert

        Returns:
            DeckResult with the cards in display order

        Raises:
            ValidationError: If a parameter is missing or the difficulty is unknown
            DeckGenerationError: If deck text generation fails
        """
        request = DeckRequest.create(source_language_name, target_language_name, difficulty)
        cache_key = CacheKey.for_deck_request(request)
        log = logger.bind(
            cache_key=cache_key.value,
            source_language=request.source_language_name,
            target_language=request.target_language_name,
            difficulty=request.difficulty.value,
        )

        cached = self._lookup(cache_key, log)
        if cached is not None:
            log.info("deck_cache_hit", card_count=len(cached.payload))
            return DeckResult(cache_key.value, list(cached.payload.cards), cache_hit=True)

        async with self.keyed_lock.hold(cache_key.value):
            # Another request may have filled the entry while we waited
            cached = self._lookup(cache_key, log)
            if cached is not None:
                log.info("deck_cache_hit_after_wait", card_count=len(cached.payload))
                return DeckResult(cache_key.value, list(cached.payload.cards), cache_hit=True)

            log.info("deck_cache_miss")
            cards = await self._generate(request, cache_key, log)
            persisted = self._persist(cache_key, cards, log)

        return DeckResult(cache_key.value, cards, cache_hit=False, persisted=persisted)

    def _lookup(
        self, cache_key: CacheKey, log: structlog.stdlib.BoundLogger
    ) -> CacheEntry[DeckPayload] | None:
        try:
            return self.deck_store.get(cache_key.value)
        except CacheStoreError as e:
            # Unreadable cache is a miss, not a failed request
            log.warning("deck_cache_read_failed", error=str(e))
            return None

    async def _generate(
        self, request: DeckRequest, cache_key: CacheKey, log: structlog.stdlib.BoundLogger
    ) -> list[FlashcardRecord]:
        try:
            descriptions = await self.generation_provider.generate_deck_text(request)
        except ProviderError as e:
            log.error("deck_generation_failed", error=str(e), exc_info=True)
            raise DeckGenerationError(cache_key.value) from e

        return await self.deck_assembly_service.assemble_deck(descriptions)

    def _persist(
        self,
        cache_key: CacheKey,
        cards: list[FlashcardRecord],
        log: structlog.stdlib.BoundLogger,
    ) -> bool:
        try:
            self.deck_store.put(cache_key.value, DeckPayload(cards=tuple(cards)))
        except CacheStoreError as e:
            log.error("deck_cache_write_failed", error=str(e), served_uncached=True)
            return False

        log.info("deck_cache_set", card_count=len(cards))
        return True

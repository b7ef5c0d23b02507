"""Use case for serving text-to-speech clips through the cache."""

import structlog

from lingodeck.application.learning.protocols.cache_store import CacheStoreProtocol
from lingodeck.application.learning.protocols.generation_provider import (
    GenerationProviderProtocol,
)
from lingodeck.application.learning.services.single_flight import KeyedLock
from lingodeck.application.learning.use_cases.dtos import AudioResult
from lingodeck.application.learning.use_cases.exceptions import SpeechGenerationError
from lingodeck.domain.common.exceptions import ValidationError
from lingodeck.domain.learning.entities.cache_entry import AudioPayload, CacheEntry
from lingodeck.domain.learning.value_objects.cache_key import AudioKeyScheme, CacheKey
from lingodeck.exceptions import CacheStoreError, ProviderError

logger = structlog.get_logger(__name__)


class GetSpeechAudioUseCase:
    """Cache-aside retrieval of a spoken clip for a piece of text."""

    def __init__(
        self,
        audio_store: CacheStoreProtocol[AudioPayload],
        generation_provider: GenerationProviderProtocol,
        keyed_lock: KeyedLock,
        key_scheme: AudioKeyScheme | str = AudioKeyScheme.DIGEST,
    ) -> None:
        self.audio_store = audio_store
        self.generation_provider = generation_provider
        self.keyed_lock = keyed_lock
        self.key_scheme = AudioKeyScheme(key_scheme)

    async def get_audio(self, text: str | None) -> AudioResult:
        """
        Get base64 audio for ``text``, generating and storing it on a miss.

        Raises:
            ValidationError: If text is missing or blank
            SpeechGenerationError: If speech generation fails
        """
        if not text or not text.strip():
            raise ValidationError("Missing 'text' parameter.", field="text")

        cache_key = CacheKey.for_audio(text, self.key_scheme)
        log = logger.bind(cache_key=cache_key.value, text=text)

        cached = self._lookup(cache_key, log)
        if cached is not None:
            log.info("audio_cache_hit")
            return AudioResult(cache_key.value, cached.payload.audio_content, cache_hit=True)

        async with self.keyed_lock.hold(cache_key.value):
            cached = self._lookup(cache_key, log)
            if cached is not None:
                log.info("audio_cache_hit_after_wait")
                return AudioResult(cache_key.value, cached.payload.audio_content, cache_hit=True)

            log.info("audio_cache_miss")
            try:
                audio_content = await self.generation_provider.generate_speech_audio(text)
            except ProviderError as e:
                log.error("speech_generation_failed", error=str(e), exc_info=True)
                raise SpeechGenerationError(cache_key.value) from e

            persisted = self._persist(cache_key, audio_content, log)

        return AudioResult(cache_key.value, audio_content, cache_hit=False, persisted=persisted)

    def _lookup(
        self, cache_key: CacheKey, log: structlog.stdlib.BoundLogger
    ) -> CacheEntry[AudioPayload] | None:
        try:
            return self.audio_store.get(cache_key.value)
        except CacheStoreError as e:
            log.warning("audio_cache_read_failed", error=str(e))
            return None

    def _persist(
        self, cache_key: CacheKey, audio_content: str, log: structlog.stdlib.BoundLogger
    ) -> bool:
        try:
            self.audio_store.put(cache_key.value, AudioPayload(audio_content=audio_content))
        except CacheStoreError as e:
            log.error("audio_cache_write_failed", error=str(e), served_uncached=True)
            return False

        log.info("audio_cache_set")
        return True

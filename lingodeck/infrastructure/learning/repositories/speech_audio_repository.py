"""Repository for cached speech clips."""

from sqlalchemy.orm import Session

from lingodeck.domain.learning.entities.cache_entry import AudioPayload
from lingodeck.infrastructure.learning.mappers.cache_entry_mapper import SpeechAudioMapper
from lingodeck.infrastructure.learning.repositories.base_cache_repository import (
    SqlCacheRepository,
)
from lingodeck.models import SpeechAudio as SpeechAudioORM


class SpeechAudioRepository(SqlCacheRepository[SpeechAudioORM, AudioPayload]):
    """Cache store for speech clips (the speech_audio collection)."""

    orm_class = SpeechAudioORM

    def __init__(self, db: Session) -> None:
        super().__init__(db, SpeechAudioMapper())

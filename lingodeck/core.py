from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from lingodeck.application.learning.services.deck_assembly_service import DeckAssemblyService
from lingodeck.application.learning.services.single_flight import KeyedLock
from lingodeck.application.learning.use_cases.flashcard_deck_use_case import (
    GetFlashcardDeckUseCase,
)
from lingodeck.application.learning.use_cases.speech_audio_use_case import (
    GetSpeechAudioUseCase,
)
from lingodeck.config import get_settings
from lingodeck.infrastructure.ai.ai_service import AIService
from lingodeck.infrastructure.learning.repositories import (
    FlashcardDeckRepository,
    SpeechAudioRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Callable(get_settings)

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Cache stores
    flashcard_deck_repository = providers.Factory(FlashcardDeckRepository, db=db)
    speech_audio_repository = providers.Factory(SpeechAudioRepository, db=db)

    # Generation provider, shared across requests
    ai_service = providers.Singleton(AIService, settings=settings)

    # Process-wide per-key guard for cache misses
    keyed_lock = providers.Singleton(
        KeyedLock,
        enabled=settings.provided.SINGLE_FLIGHT_ENABLED,
    )

    deck_assembly_service = providers.Factory(
        DeckAssemblyService,
        generation_provider=ai_service,
        concurrency_limit=settings.provided.IMAGE_CONCURRENCY_LIMIT,
    )

    # Learning module use cases
    flashcard_deck_use_case = providers.Factory(
        GetFlashcardDeckUseCase,
        deck_store=flashcard_deck_repository,
        generation_provider=ai_service,
        deck_assembly_service=deck_assembly_service,
        keyed_lock=keyed_lock,
    )

    speech_audio_use_case = providers.Factory(
        GetSpeechAudioUseCase,
        audio_store=speech_audio_repository,
        generation_provider=ai_service,
        keyed_lock=keyed_lock,
        key_scheme=settings.provided.AUDIO_KEY_SCHEME,
    )


# Initialize container
container = Container()

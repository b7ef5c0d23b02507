"""API routes for flashcard decks."""

import structlog
from fastapi import APIRouter, Depends, Request, Response, status

from lingodeck.application.learning.use_cases.flashcard_deck_use_case import (
    GetFlashcardDeckUseCase,
)
from lingodeck.core import container
from lingodeck.domain.common.exceptions import DomainError
from lingodeck.domain.learning.catalogue import DIFFICULTIES, LANGUAGES
from lingodeck.exceptions import LingoDeckError, ServiceError
from lingodeck.infrastructure.common.di import inject_use_case
from lingodeck.infrastructure.common.rate_limit import generation_rate_limit, limiter
from lingodeck.infrastructure.learning.schemas import (
    ContentOptionsResponse,
    DeckRequestBody,
    FlashcardSchema,
    LanguageOption,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


@router.post(
    "/deck",
    response_model=list[FlashcardSchema],
    status_code=status.HTTP_200_OK,
)
@limiter.limit(generation_rate_limit)  # type: ignore[misc]
async def get_flashcard_deck(
    request: Request,
    response: Response,
    body: DeckRequestBody,
    use_case: GetFlashcardDeckUseCase = Depends(
        inject_use_case(container.flashcard_deck_use_case)
    ),
) -> list[FlashcardSchema]:
    """
    Get the deck for a (source language, target language, difficulty) triple.

    Served from the cache when present, generated and cached otherwise.

    Args:
        body: sourceLang, targetLang and difficulty
        use_case: GetFlashcardDeckUseCase injected via dependency container

    Returns:
        Cards in display order

    Raises:
        ValidationError: If a parameter is missing (400)
        DeckGenerationError: If the deck could not be generated (500)
    """
    try:
        result = await use_case.get_deck(
            source_language_name=body.source_lang,
            target_language_name=body.target_lang,
            difficulty=body.difficulty,
        )
    except (LingoDeckError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_get_flashcard_deck",
            source_language=body.source_lang,
            target_language=body.target_lang,
            difficulty=body.difficulty,
            error=str(e),
            exc_info=True,
        )
        raise ServiceError("Internal Server Error while generating flashcards.") from e

    response.headers["X-Cache"] = "HIT" if result.cache_hit else "MISS"
    return [FlashcardSchema.from_record(card) for card in result.cards]


@router.get("/options", response_model=ContentOptionsResponse)
async def get_content_options() -> ContentOptionsResponse:
    """
    Get the languages and difficulty levels offered to clients.

    Deck requests are not limited to these languages.
    """
    return ContentOptionsResponse(
        languages=[LanguageOption(code=lang.code, name=lang.name) for lang in LANGUAGES],
        difficulties=[difficulty.value for difficulty in DIFFICULTIES],
    )

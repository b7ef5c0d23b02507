"""API routes for spoken audio."""

import structlog
from fastapi import APIRouter, Depends, Request, Response, status

from lingodeck.application.learning.use_cases.speech_audio_use_case import (
    GetSpeechAudioUseCase,
)
from lingodeck.core import container
from lingodeck.domain.common.exceptions import DomainError
from lingodeck.exceptions import LingoDeckError, ServiceError
from lingodeck.infrastructure.common.di import inject_use_case
from lingodeck.infrastructure.common.rate_limit import generation_rate_limit, limiter
from lingodeck.infrastructure.learning.schemas import SpeechRequestBody, SpeechResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/speech", tags=["speech"])


@router.post("", response_model=SpeechResponse, status_code=status.HTTP_200_OK)
@limiter.limit(generation_rate_limit)  # type: ignore[misc]
async def get_speech_audio(
    request: Request,
    response: Response,
    body: SpeechRequestBody,
    use_case: GetSpeechAudioUseCase = Depends(inject_use_case(container.speech_audio_use_case)),
) -> SpeechResponse:
    """
    Get base64 audio of ``text`` spoken aloud, from the cache or freshly generated.
    """
    try:
        result = await use_case.get_audio(body.text)
    except (LingoDeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_get_speech_audio", text=body.text, error=str(e), exc_info=True)
        raise ServiceError("Internal Server Error while generating speech.") from e

    response.headers["X-Cache"] = "HIT" if result.cache_hit else "MISS"
    return SpeechResponse(audio_content=result.audio_content)

"""Generation provider backed by pydantic-ai (deck text) and Gemini (images, speech)."""

import asyncio
import base64
from collections.abc import Awaitable
from typing import TypeVar

import structlog
from google import genai
from google.genai import types

from lingodeck.config import Settings
from lingodeck.domain.learning.entities.flashcard import CardDescription
from lingodeck.domain.learning.value_objects.deck_request import DeckRequest
from lingodeck.exceptions import ProviderError
from lingodeck.infrastructure.ai.ai_agents import build_deck_prompt, get_deck_agent

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class AIService:
    """Implements GenerationProviderProtocol. Calls are never retried here."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._genai_client: genai.Client | None = None

    async def generate_deck_text(self, request: DeckRequest) -> list[CardDescription]:
        if not self.settings.ai_enabled:
            raise ProviderError("generate_deck_text", "AI provider is not configured")

        prompt = build_deck_prompt(
            request.source_language_name,
            request.target_language_name,
            request.difficulty.value,
            self.settings.DECK_SIZE,
        )
        agent = get_deck_agent()
        result = await self._call("generate_deck_text", agent.run(prompt))
        return [
            CardDescription(
                word=card.word,
                translation=card.translation,
                grammatical_type=card.type,
                example_sentence=card.sentence,
            )
            for card in result.output
        ]

    async def generate_image(self, word: str) -> str:
        client = self._get_genai_client("generate_image")
        response = await self._call(
            "generate_image",
            client.aio.models.generate_content(
                model=self.settings.IMAGE_MODEL_NAME,
                contents=f"A clean, simple, icon-style image of a {word}",
                config=types.GenerateContentConfig(response_modalities=["IMAGE"]),
            ),
        )
        inline_data = _first_inline_data(response)
        if inline_data is None or not inline_data.data:
            raise ProviderError("generate_image", f"No image data received for '{word}'")

        mime_type = inline_data.mime_type or "image/png"
        encoded = base64.b64encode(inline_data.data).decode("ascii")
        return f"data:{mime_type};base64,{encoded}"

    async def generate_speech_audio(self, text: str) -> str:
        client = self._get_genai_client("generate_speech_audio")
        response = await self._call(
            "generate_speech_audio",
            client.aio.models.generate_content(
                model=self.settings.SPEECH_MODEL_NAME,
                contents=text,
                config=types.GenerateContentConfig(
                    response_modalities=["AUDIO"],
                    speech_config=types.SpeechConfig(
                        voice_config=types.VoiceConfig(
                            prebuilt_voice_config=types.PrebuiltVoiceConfig(
                                voice_name=self.settings.SPEECH_VOICE_NAME,
                            )
                        )
                    ),
                ),
            ),
        )
        inline_data = _first_inline_data(response)
        if inline_data is None or not inline_data.data:
            raise ProviderError("generate_speech_audio", "No audio data received")

        return base64.b64encode(inline_data.data).decode("ascii")

    def _get_genai_client(self, operation: str) -> genai.Client:
        if self._genai_client is None:
            if not self.settings.GEMINI_API_KEY:
                raise ProviderError(operation, "GEMINI_API_KEY is not configured")
            self._genai_client = genai.Client(api_key=self.settings.GEMINI_API_KEY)
        return self._genai_client

    async def _call(self, operation: str, call: Awaitable[T]) -> T:
        """Await a provider call under the configured timeout, mapping failures to ProviderError."""
        try:
            return await asyncio.wait_for(call, timeout=self.settings.PROVIDER_TIMEOUT_SECONDS)
        except TimeoutError as e:
            logger.warning(
                "provider_call_timed_out",
                operation=operation,
                timeout_seconds=self.settings.PROVIDER_TIMEOUT_SECONDS,
            )
            raise ProviderError(operation, "timed out") from e
        except ProviderError:
            raise
        except Exception as e:
            logger.warning("provider_call_failed", operation=operation, error=str(e))
            raise ProviderError(operation, str(e)) from e


def _first_inline_data(response: types.GenerateContentResponse) -> types.Blob | None:
    candidates = response.candidates or []
    if not candidates or candidates[0].content is None:
        return None
    for part in candidates[0].content.parts or []:
        if part.inline_data is not None:
            return part.inline_data
    return None

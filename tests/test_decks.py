"""Tests for the flashcard deck API endpoints."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lingodeck import models
from lingodeck.config import get_settings
from lingodeck.exceptions import ProviderError
from tests.fakes import FakeGenerationProvider, image_for

DECK_URL = "/api/v1/flashcards/deck"
BEGINNER_FRENCH = {"sourceLang": "English", "targetLang": "French", "difficulty": "Beginner"}


class TestGetFlashcardDeck:
    """Test suite for POST /api/v1/flashcards/deck."""

    def test_first_request_generates_and_caches(
        self, client: TestClient, db_session: Session, fake_provider: FakeGenerationProvider
    ) -> None:
        """Test a cache miss generates ten cards and stores them under the derived key."""
        response = client.post(DECK_URL, json=BEGINNER_FRENCH)

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["X-Cache"] == "MISS"
        cards = response.json()
        assert len(cards) == 10
        assert cards[0] == {
            "word": "mot0",
            "translation": "word0",
            "type": "noun",
            "sentence": "Voici le mot0.",
            "image": image_for("mot0"),
        }
        assert len(fake_provider.deck_text_calls) == 1
        assert len(fake_provider.image_calls) == 10

        stored = db_session.get(models.FlashcardDeck, "deck_English_French_Beginner")
        assert stored is not None
        assert [card["word"] for card in stored.cards] == [card["word"] for card in cards]

    def test_second_request_is_served_from_cache(
        self, client: TestClient, fake_provider: FakeGenerationProvider
    ) -> None:
        """Test a repeated request returns the identical deck without calling the provider."""
        first = client.post(DECK_URL, json=BEGINNER_FRENCH)
        calls_after_first = fake_provider.total_calls

        second = client.post(DECK_URL, json=BEGINNER_FRENCH)

        assert second.status_code == status.HTTP_200_OK
        assert second.headers["X-Cache"] == "HIT"
        assert second.json() == first.json()
        assert fake_provider.total_calls == calls_after_first

    def test_cached_deck_from_store_is_returned(
        self, client: TestClient, db_session: Session, fake_provider: FakeGenerationProvider
    ) -> None:
        """Test a pre-existing entry is served as stored."""
        db_session.add(
            models.FlashcardDeck(
                key="deck_Spanish_German_Expert",
                cards=[
                    {
                        "word": "Hund",
                        "translation": "perro",
                        "type": "noun",
                        "sentence": "Der Hund bellt.",
                        "image": "no-image",
                    }
                ],
            )
        )
        db_session.commit()

        response = client.post(
            DECK_URL,
            json={"sourceLang": "Spanish", "targetLang": "German", "difficulty": "Expert"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()[0]["word"] == "Hund"
        assert response.json()[0]["image"] == "no-image"
        assert fake_provider.total_calls == 0

    def test_partial_image_failures_use_placeholder(
        self, client: TestClient, fake_provider: FakeGenerationProvider
    ) -> None:
        """Test failed images become 'no-image' while the deck is still served."""
        fake_provider.failing_words = {"mot3", "mot5"}

        response = client.post(DECK_URL, json=BEGINNER_FRENCH)

        assert response.status_code == status.HTTP_200_OK
        images = [card["image"] for card in response.json()]
        assert images[3] == "no-image"
        assert images[5] == "no-image"
        assert images.count("no-image") == 2

    @pytest.mark.parametrize("missing", ["sourceLang", "targetLang", "difficulty"])
    def test_missing_parameter_returns_400(
        self, client: TestClient, fake_provider: FakeGenerationProvider, missing: str
    ) -> None:
        """Test a missing parameter is rejected before any provider call."""
        body = {k: v for k, v in BEGINNER_FRENCH.items() if k != missing}

        response = client.post(DECK_URL, json=body)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert missing in response.text
        assert fake_provider.total_calls == 0

    def test_blank_parameter_returns_400(
        self, client: TestClient, fake_provider: FakeGenerationProvider
    ) -> None:
        """Test a blank language name counts as missing."""
        response = client.post(DECK_URL, json={**BEGINNER_FRENCH, "targetLang": "  "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert fake_provider.total_calls == 0

    def test_unknown_difficulty_returns_400(
        self, client: TestClient, fake_provider: FakeGenerationProvider
    ) -> None:
        """Test difficulty must be one of the three levels."""
        response = client.post(DECK_URL, json={**BEGINNER_FRENCH, "difficulty": "beginner"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "Invalid difficulty" in response.text
        assert fake_provider.total_calls == 0

    def test_non_json_body_returns_400(
        self, client: TestClient, fake_provider: FakeGenerationProvider
    ) -> None:
        """Test a body that is not JSON is a client error."""
        response = client.post(
            DECK_URL, content="not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.headers["content-type"].startswith("text/plain")
        assert fake_provider.total_calls == 0

    def test_get_method_not_allowed(self, client: TestClient) -> None:
        """Test the deck endpoint only accepts POST."""
        response = client.get(DECK_URL)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED

    def test_generation_failure_returns_500_and_caches_nothing(
        self, client: TestClient, db_session: Session, fake_provider: FakeGenerationProvider
    ) -> None:
        """Test a deck text failure is a generic 500 with nothing stored."""
        fake_provider.text_error = ProviderError("generate_deck_text", "secret upstream detail")

        response = client.post(DECK_URL, json=BEGINNER_FRENCH)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Internal Server Error while generating flashcards."
        assert "secret upstream detail" not in response.text
        assert db_session.query(models.FlashcardDeck).count() == 0

    def test_rate_limit_exceeded_returns_429(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test per-client rate limiting on the generation endpoints."""
        monkeypatch.setattr(get_settings(), "GENERATION_RATE_LIMIT", "2/minute")

        responses = [client.post(DECK_URL, json=BEGINNER_FRENCH) for _ in range(3)]

        assert [r.status_code for r in responses] == [
            status.HTTP_200_OK,
            status.HTTP_200_OK,
            status.HTTP_429_TOO_MANY_REQUESTS,
        ]

"""Tests for the image fan-out in DeckAssemblyService."""

import asyncio

import pytest

from lingodeck.application.learning.services.deck_assembly_service import DeckAssemblyService
from lingodeck.domain.learning.entities.flashcard import NO_IMAGE, GrammaticalType
from lingodeck.exceptions import ProviderError
from tests.fakes import FakeGenerationProvider, image_for, make_descriptions


class TestAssembleDeck:
    """Test suite for DeckAssemblyService.assemble_deck."""

    @pytest.mark.asyncio
    async def test_one_image_call_per_card_in_order(self) -> None:
        provider = FakeGenerationProvider()
        descriptions = make_descriptions(10)

        cards = await DeckAssemblyService(provider).assemble_deck(descriptions)

        assert len(cards) == 10
        assert sorted(provider.image_calls) == sorted(d.word for d in descriptions)
        assert [card.word for card in cards] == [d.word for d in descriptions]
        assert all(card.image == image_for(card.word) for card in cards)

    @pytest.mark.asyncio
    async def test_failed_images_degrade_to_placeholder(self) -> None:
        descriptions = make_descriptions(10)
        failing = {"mot1", "mot4", "mot9"}
        provider = FakeGenerationProvider(failing_words=failing)

        cards = await DeckAssemblyService(provider).assemble_deck(descriptions)

        assert len(cards) == 10
        assert len(provider.image_calls) == 10
        for description, card in zip(descriptions, cards, strict=True):
            assert card.word == description.word
            if description.word in failing:
                assert card.image == NO_IMAGE
            else:
                assert card.image == image_for(description.word)

    @pytest.mark.asyncio
    async def test_all_images_failing_still_returns_deck(self) -> None:
        descriptions = make_descriptions(4)
        provider = FakeGenerationProvider(failing_words={d.word for d in descriptions})

        cards = await DeckAssemblyService(provider).assemble_deck(descriptions)

        assert [card.image for card in cards] == [NO_IMAGE] * 4

    @pytest.mark.asyncio
    async def test_order_is_positional_not_completion_order(self) -> None:
        descriptions = make_descriptions(3)
        delays = {"mot0": 0.03, "mot1": 0.0, "mot2": 0.01}
        completed: list[str] = []

        class SlowFirstProvider(FakeGenerationProvider):
            async def generate_image(self, word: str) -> str:
                await asyncio.sleep(delays[word])
                completed.append(word)
                return image_for(word)

        cards = await DeckAssemblyService(SlowFirstProvider()).assemble_deck(descriptions)

        assert completed == ["mot1", "mot2", "mot0"]
        assert [card.word for card in cards] == ["mot0", "mot1", "mot2"]

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_treated_as_failure(self) -> None:
        class BrokenProvider(FakeGenerationProvider):
            async def generate_image(self, word: str) -> str:
                if word == "mot0":
                    raise RuntimeError("socket closed")
                return image_for(word)

        cards = await DeckAssemblyService(BrokenProvider()).assemble_deck(make_descriptions(2))

        assert cards[0].image == NO_IMAGE
        assert cards[1].image == image_for("mot1")

    @pytest.mark.asyncio
    async def test_normalizes_grammatical_types(self) -> None:
        cards = await DeckAssemblyService(FakeGenerationProvider()).assemble_deck(
            make_descriptions(4)
        )
        assert [card.grammatical_type for card in cards] == [
            GrammaticalType.NOUN,
            GrammaticalType.VERB,
            GrammaticalType.ADJECTIVE,
            GrammaticalType.OTHER,
        ]

    @pytest.mark.asyncio
    async def test_empty_descriptions(self) -> None:
        provider = FakeGenerationProvider()
        assert await DeckAssemblyService(provider).assemble_deck([]) == []
        assert provider.image_calls == []

    @pytest.mark.asyncio
    async def test_concurrency_limit_bounds_in_flight_calls(self) -> None:
        in_flight = 0
        peak = 0

        class CountingProvider(FakeGenerationProvider):
            async def generate_image(self, word: str) -> str:
                nonlocal in_flight, peak
                in_flight += 1
                peak = max(peak, in_flight)
                await asyncio.sleep(0.01)
                in_flight -= 1
                return image_for(word)

        service = DeckAssemblyService(CountingProvider(), concurrency_limit=2)
        cards = await service.assemble_deck(make_descriptions(6))

        assert len(cards) == 6
        assert peak == 2

    @pytest.mark.asyncio
    async def test_unbounded_by_default(self) -> None:
        in_flight = 0
        peak = 0

        class CountingProvider(FakeGenerationProvider):
            async def generate_image(self, word: str) -> str:
                nonlocal in_flight, peak
                in_flight += 1
                peak = max(peak, in_flight)
                await asyncio.sleep(0.01)
                in_flight -= 1
                return image_for(word)

        await DeckAssemblyService(CountingProvider()).assemble_deck(make_descriptions(6))

        assert peak == 6

    @pytest.mark.asyncio
    async def test_provider_error_does_not_propagate(self) -> None:
        provider = FakeGenerationProvider(failing_words={"mot0"})
        try:
            await DeckAssemblyService(provider).assemble_deck(make_descriptions(1))
        except ProviderError:  # pragma: no cover
            pytest.fail("image failure must not abort the deck")

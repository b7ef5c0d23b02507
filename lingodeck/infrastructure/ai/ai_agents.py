from pydantic import BaseModel, Field
from pydantic_ai import Agent

from lingodeck.infrastructure.ai.ai_model import get_ai_model


class DeckCardOutput(BaseModel):
    word: str = Field(description="The word in the target language")
    translation: str = Field(description="The translation of the word in the source language")
    type: str = Field(description='The grammatical type: "noun", "verb", or "adjective"')
    sentence: str = Field(description="A simple example sentence in the target language")


def get_deck_agent() -> Agent[None, list[DeckCardOutput]]:
    return Agent(
        get_ai_model(),
        output_type=list[DeckCardOutput],
        instructions="""
        You create vocabulary flashcards for language learners.
        For each flashcard provide the word in the target language, its translation
        in the source language, its grammatical type (noun, verb, or adjective)
        and a simple example sentence in the target language that uses the word.
        Pick words that fit the requested level. Do not repeat words.
        """,
    )


def build_deck_prompt(
    source_language_name: str, target_language_name: str, difficulty: str, deck_size: int
) -> str:
    return (
        f"Generate {deck_size} flashcards for a user learning {target_language_name} "
        f"from {source_language_name} at a {difficulty} level."
    )

"""Repository for cached flashcard decks."""

from sqlalchemy.orm import Session

from lingodeck.domain.learning.entities.cache_entry import DeckPayload
from lingodeck.infrastructure.learning.mappers.cache_entry_mapper import FlashcardDeckMapper
from lingodeck.infrastructure.learning.repositories.base_cache_repository import (
    SqlCacheRepository,
)
from lingodeck.models import FlashcardDeck as FlashcardDeckORM


class FlashcardDeckRepository(SqlCacheRepository[FlashcardDeckORM, DeckPayload]):
    """Cache store for decks (the flashcard_decks collection)."""

    orm_class = FlashcardDeckORM

    def __init__(self, db: Session) -> None:
        super().__init__(db, FlashcardDeckMapper())

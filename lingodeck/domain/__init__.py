"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: decks, flashcard records and cache entries
- Value Objects: deck requests and cache keys
"""

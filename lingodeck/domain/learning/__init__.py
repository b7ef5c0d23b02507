"""
Learning bounded context - Domain layer.

This context handles language-learning content:
- Flashcard decks for a (source, target, difficulty) request
- Spoken audio clips for a piece of text
- Deterministic cache keys for both
"""

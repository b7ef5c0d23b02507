"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors.

This layer contains:
- Use cases: cache-aside orchestration for decks and audio
- Services: image fan-out and per-key single-flight guarding
- Protocols: ports for the generation provider and the cache store
"""

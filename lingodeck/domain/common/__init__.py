"""Domain common module."""

from .exceptions import DomainError, ValidationError

__all__ = [
    "DomainError",
    "ValidationError",
]

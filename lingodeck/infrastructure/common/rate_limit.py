"""Per-client rate limiting for endpoints that may call the generation provider."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from lingodeck.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def generation_rate_limit() -> str:
    """Limit applied to deck and speech requests, read from settings."""
    return get_settings().GENERATION_RATE_LIMIT

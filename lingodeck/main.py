"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from lingodeck.config import configure_logging, get_settings
from lingodeck.database import create_tables, dispose_engine, initialize_database
from lingodeck.infrastructure.common.error_handlers import register_error_handlers
from lingodeck.infrastructure.common.rate_limit import limiter
from lingodeck.infrastructure.learning.routers import decks, speech

settings = get_settings()
configure_logging(settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown events."""
    initialize_database(settings)
    if settings.DATABASE_URL.startswith("sqlite"):
        # Other databases are migrated with alembic
        create_tables()
    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        ai_enabled=settings.ai_enabled,
        single_flight=settings.SINGLE_FLIGHT_ENABLED,
        audio_key_scheme=settings.AUDIO_KEY_SCHEME,
    )

    yield

    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Cached AI-generated flashcard decks and speech for language learners",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]
register_error_handlers(app)

api_router = APIRouter(prefix=settings.API_V1_PREFIX)
api_router.include_router(decks.router)
api_router.include_router(speech.router)
app.include_router(api_router)


@app.get("/health")
async def health_check() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "healthy", "ai_enabled": settings.ai_enabled}


if __name__ == "__main__":
    uvicorn.run(
        "lingodeck.main:app",
        host="0.0.0.0",  # noqa: S104
        port=8000,
        reload=settings.ENVIRONMENT == "development",
    )

"""DDate Profiles API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DDateError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Profile store hydrated from the database before the first request

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - ProfileService stored on app.state: routes receive it through a dependency,
      tests replace it without touching the lifespan
"""

import logging
from contextlib import asynccontextmanager
from functools import partial

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, profiles
from app.config import get_settings
from app.db.base import Base
from app.infrastructure.database import init_db
from app.infrastructure.id_generator import generate_profile_id
from app.infrastructure.observability import setup_logging
from app.infrastructure.profile_repository import SqlProfileRepository
from app.services.profile_service import ProfileService
from app.models import Profile  # noqa: F401  (populate Base.metadata)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        async with manager.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    service = ProfileService(
        SqlProfileRepository(manager),
        id_generator=partial(
            generate_profile_id, settings.profile_id_entropy_bytes,
        ),
    )
    loaded = await service.load()
    app.state.profile_service = service
    logger.info(f"DDate Profiles API started ({loaded} profile(s) loaded)")
    yield
    logger.info("DDate Profiles API shutting down")
    await manager.dispose()


app = FastAPI(
    title="DDate Profiles API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(profiles.router)

register_error_handlers(app)

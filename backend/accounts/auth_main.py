"""Auth Service — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ServiceError → Error JSON responses
    - CORS configured from settings (not hardcoded)
    - Database pool initialized on startup via lifespan context manager

Run with `uvicorn accounts.auth_main:app --port 8000` or `accounts-auth`.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from accounts.api.error_handlers import register_error_handlers
from accounts.api.routes import auth, health
from accounts.config import get_settings
from accounts.db.base import AuthBase
from accounts.infrastructure.database import init_db
from accounts.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_uri,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_tables(AuthBase.metadata)
    logger.info(f"Auth service listening on {settings.port}")
    yield
    await manager.dispose()
    logger.info("Auth service shutting down")


app = FastAPI(title="Auth Service", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

app.include_router(health.router)
app.include_router(auth.router)

register_error_handlers(app)


def run() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)

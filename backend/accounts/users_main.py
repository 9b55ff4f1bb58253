"""User Directory Service — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every /user request is timed and counted (api/request_metrics.py)
    - Prometheus exposition served on /metrics of the same port
    - Database pool initialized on startup via lifespan context manager

Run with `uvicorn accounts.users_main:app --port 8000` or `accounts-users`.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from accounts.api.error_handlers import register_error_handlers
from accounts.api.request_metrics import register_request_metrics
from accounts.api.routes import health, metrics, users
from accounts.config import get_settings
from accounts.db.base import UserBase
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
        await manager.create_tables(UserBase.metadata)
    logger.info(f"User directory service listening on {settings.port}")
    yield
    await manager.dispose()
    logger.info("User directory service shutting down")


app = FastAPI(title="User Directory Service", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)
register_request_metrics(app)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(metrics.router)

register_error_handlers(app)


def run() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)

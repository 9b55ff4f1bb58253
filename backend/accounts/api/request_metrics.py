"""Request Metrics Middleware — times /user requests and feeds infrastructure/metrics.py.

Invariants:
    - Only /user and /user/{id} are classified; /metrics, /health and the /user/ redirect are not counted
    - The verb is derived from the HTTP method: POST→add, GET→get, PUT→put, DELETE→delete
    - Unhandled exceptions count as errors and are re-raised unchanged
"""

import logging
import time

from fastapi import FastAPI, Request

from accounts.infrastructure import metrics

logger = logging.getLogger(__name__)

_ITEM_VERBS = {"GET": "get", "PUT": "put", "DELETE": "delete"}


def classify_request(method: str, path: str) -> str | None:
    """Map a request onto its metrics verb, or None if it is not tracked."""
    if path == "/user":
        return "add" if method == "POST" else None
    if path.startswith("/user/") and path != "/user/":
        return _ITEM_VERBS.get(method)
    return None


def register_request_metrics(app: FastAPI) -> None:
    """Install the timing middleware on the user directory app."""

    @app.middleware("http")
    async def track_user_requests(request: Request, call_next):
        verb = classify_request(request.method, request.url.path)
        if verb is None:
            return await call_next(request)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            metrics.record_error(verb)
            raise
        elapsed = time.perf_counter() - started

        if response.status_code >= 400:
            metrics.record_error(verb)
        else:
            metrics.record_success(verb, elapsed)
        logger.info(
            f"requestTime {elapsed:.6f}s",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(elapsed * 1000, 3),
            },
        )
        return response

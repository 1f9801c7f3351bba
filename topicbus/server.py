"""Read-only HTTP inspection API for a process embedding a DefaultPublisher.

Endpoints: health, topics, stats. Nothing here publishes or subscribes.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from topicbus.default_publisher import DefaultPublisher
from topicbus.observability import get_logger
from topicbus.protocol import (
    ERROR_UNAUTHORIZED,
    HealthResponse,
    error_response,
    stats_response,
    topics_list_response,
)

API_PREFIX = "/api/v1"


class XAPIKeyMiddleware(BaseHTTPMiddleware):
    """Require a matching X-API-Key header on every request."""

    def __init__(self, app, api_key: str) -> None:
        super().__init__(app)
        self._api_key = api_key

    async def dispatch(self, request: Request, call_next):
        key = (request.headers.get("X-API-Key") or "").strip()
        if key != self._api_key:
            return JSONResponse(
                status_code=401,
                content=error_response(ERROR_UNAUTHORIZED, "invalid or missing X-API-Key"),
            )
        return await call_next(request)


def create_app(publisher: DefaultPublisher, api_key: Optional[str] = None) -> FastAPI:
    """Build the inspection app for publisher.

    api_key defaults to publisher.settings.api_key; when neither is set the API is open.
    """
    logger = get_logger("topicbus.server", publisher.settings.log_level)
    api_key = api_key or publisher.settings.api_key
    started_at = time.time()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("inspection_api_started", extra={"publisher_id": publisher.publisher_id})
        yield
        logger.info("inspection_api_stopped", extra={"publisher_id": publisher.publisher_id})

    router = APIRouter(prefix=API_PREFIX)

    @router.get("/health")
    def health() -> JSONResponse:
        """GET /health → { uptime_sec, topics, subscribers, pending_deliveries, closed }."""
        registry = publisher.registry
        body = HealthResponse(
            uptime_sec=time.time() - started_at,
            topics=registry.topic_count(),
            subscribers=registry.total_subscriber_count(),
            pending_deliveries=publisher.pending_deliveries,
            closed=publisher.closed,
        ).to_dict()
        return JSONResponse(content=body, status_code=200)

    @router.get("/topics")
    def list_topics() -> JSONResponse:
        """GET /topics → { topics: [ { name, subscribers } ] }."""
        return JSONResponse(content=topics_list_response(publisher.list_topics()), status_code=200)

    @router.get("/stats")
    def stats() -> JSONResponse:
        """GET /stats → { topics: { name: { messages, subscribers } }, metrics }."""
        body = stats_response(publisher.topic_stats(), publisher.metrics())
        return JSONResponse(content=body, status_code=200)

    app = FastAPI(title="topicbus inspection API", lifespan=lifespan)
    if api_key:
        app.add_middleware(XAPIKeyMiddleware, api_key=api_key)
    app.include_router(router)
    return app

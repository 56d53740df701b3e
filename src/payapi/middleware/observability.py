"""
HTTP middleware: exchange_id propagation and request metrics.
"""

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match

from paycore.logging import exchange_id_context
from paycore.observability import get_metrics_endpoint, record_http_request

EXCHANGE_ID_HEADER = "X-Exchange-ID"
UNMATCHED_ENDPOINT = "unmatched"


def endpoint_label(request: Request) -> str:
    """Route template serving the request, so metric labels stay bounded."""
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", UNMATCHED_ENDPOINT)
    return UNMATCHED_ENDPOINT


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Tags logs with the caller's exchange_id and records HTTP metrics."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        exchange_id = request.headers.get(EXCHANGE_ID_HEADER) or str(uuid.uuid4())
        started = time.perf_counter()

        with exchange_id_context(exchange_id):
            response = await call_next(request)

        record_http_request(
            method=request.method,
            endpoint=endpoint_label(request),
            status_code=response.status_code,
            duration=time.perf_counter() - started,
        )
        response.headers[EXCHANGE_ID_HEADER] = exchange_id
        return response


def add_observability_middleware(app: FastAPI) -> None:
    app.add_middleware(ObservabilityMiddleware)


def add_metrics_endpoint(app: FastAPI) -> None:
    """Expose the payment and HTTP metrics for Prometheus scraping."""

    @app.get("/metrics", include_in_schema=False)
    async def metrics():
        content, content_type = get_metrics_endpoint()
        return Response(content=content, media_type=content_type)

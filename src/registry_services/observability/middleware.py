"""
registry_services.observability.middleware

HTTP middleware for request-scoped logging context and request metrics.

Responsibilities:
- Generate/propagate request IDs.
- Bind request metadata into structlog contextvars.
- Record request count and latency per matched route template.
"""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from registry_services.observability.metrics import MetricsRecorder


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    - Ensures every request has a request id
    - Binds request-scoped contextvars for structured logs
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        try:
            response: Response = await call_next(request)
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response


class RequestMetricsMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, *, recorder: MetricsRecorder) -> None:
        super().__init__(app)
        self._recorder = recorder

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        response: Response = await call_next(request)
        self._recorder.observe_request(
            method=request.method,
            endpoint=_endpoint_label(request),
            status=response.status_code,
            duration_seconds=time.perf_counter() - started,
        )
        return response


def _endpoint_label(request: Request) -> str:
    # Route templates keep label cardinality bounded ("/orders/{order_id}", not "/orders/17").
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path if isinstance(path, str) else "unmatched"


# --- Module Notes -----------------------------------------------------------
# RequestContextMiddleware is added last so it runs outermost and the request id
# is bound before metrics or handlers log anything.

"""FastAPI middleware for request tracing and metrics"""

import uuid
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from mela_calculator.infrastructure.observability.metrics import request_duration_histogram

UNMATCHED_ROUTE = "unmatched"


def route_template(request: Request) -> str:
    """Path template of the route that handled the request, e.g. /api/calculate"""
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ROUTE)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag each request with a UUID, echoed back as X-Request-ID"""

    async def dispatch(self, request: Request, call_next):
        request.state.request_id = str(uuid.uuid4())

        response = await call_next(request)
        response.headers["X-Request-ID"] = request.state.request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """
    Record request latency per route template.

    Unknown paths share one label so stray 404s cannot grow the series count.
    """

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)

        request_duration_histogram.labels(
            method=request.method,
            endpoint=route_template(request),
            status=response.status_code,
        ).observe(time.perf_counter() - started)

        return response

"""FastAPI middleware for request tracing and metrics"""

import uuid
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from inbank_gateway.infrastructure.observability.metrics import request_duration_histogram


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID, reusing the caller's X-Request-ID if sent"""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record HTTP request latency per route and status"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        request_duration_histogram.labels(
            method=request.method,
            endpoint=request.url.path,
            status=response.status_code,
        ).observe(time.perf_counter() - start_time)

        return response

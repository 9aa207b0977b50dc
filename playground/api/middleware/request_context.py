from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from playground.core.observability.metrics import (
    HTTP_REQUESTS_TOTAL,
    HTTP_REQUEST_DURATION_SECONDS,
    normalize_path,
)

log = logging.getLogger("playground.request")

REQUEST_ID_HEADER = "X-Request-Id"


def _observe(request: Request, status_code: int, elapsed: float) -> None:
    path = normalize_path(request.url.path)
    method = request.method.upper()
    HTTP_REQUESTS_TOTAL.labels(method=method, path=path, status=str(status_code)).inc()
    HTTP_REQUEST_DURATION_SECONDS.labels(method=method, path=path).observe(elapsed)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with an id (taken from X-Request-Id or generated),
    echoes it on the response and records request metrics.

    API calls also get a single-line structured log entry.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = rid

        started = time.perf_counter()
        resp = await call_next(request)
        elapsed = time.perf_counter() - started

        resp.headers[REQUEST_ID_HEADER] = rid
        _observe(request, resp.status_code, elapsed)

        if request.url.path.startswith("/api/"):
            log.info(
                "%s",
                {
                    "event": "request",
                    "request_id": rid,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": resp.status_code,
                    "duration_ms": int(elapsed * 1000),
                },
            )
        return resp

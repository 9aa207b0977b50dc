from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from playground.core.capabilities import CapabilityError

log = logging.getLogger("playground.errors")


def _error_response(request: Request, status_code: int, payload: Dict[str, Any]) -> JSONResponse:
    rid = getattr(request.state, "request_id", None) or request.headers.get("x-request-id")
    if rid:
        payload["request_id"] = rid
    return JSONResponse(status_code=status_code, content=payload)


async def capability_error_handler(request: Request, exc: CapabilityError) -> JSONResponse:
    """A receiver that cannot answer is the caller's mistake: 400."""
    log.info("capability refused: %s path=%s", exc, request.url.path)
    return _error_response(
        request,
        400,
        {"detail": str(exc), "receiver_type": exc.receiver_type, "message": exc.message},
    )


class SafeErrorMiddleware(BaseHTTPMiddleware):
    """Outermost guard: anything unhandled becomes an opaque 500; the traceback stays in the log."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:
            log.exception("Unhandled error path=%s", request.url.path)
            return _error_response(request, 500, {"detail": "Internal Server Error"})

from __future__ import annotations

from fastapi import FastAPI

from playground.api.endpoints import actors, health, metrics_export, sequences, shout, spells
from playground.api.middleware.error_shaping import SafeErrorMiddleware, capability_error_handler
from playground.api.middleware.request_context import RequestContextMiddleware
from playground.core.capabilities import CapabilityError
from playground.core.config import apply_log_level, load_settings

settings = load_settings()
apply_log_level(settings)

app = FastAPI(
    title="Object Conversations Playground API",
    version="0.1.0",
)

# ------------------------------------------------------------
# Middleware stack (ORDER MATTERS)
# Starlette reverses add_middleware order: the LAST call = OUTERMOST wrapper.
#   SafeErrorMiddleware -> RequestContext -> handler
# ------------------------------------------------------------
app.add_middleware(RequestContextMiddleware)
app.add_middleware(SafeErrorMiddleware)

app.add_exception_handler(CapabilityError, capability_error_handler)


# ------------------------------------------------------------
# Versioned (authoritative)
# ------------------------------------------------------------
for r in (shout.router, actors.router, spells.router, sequences.router):
    app.include_router(r, prefix="/api/v1")

app.include_router(health.router)
app.include_router(metrics_export.router)

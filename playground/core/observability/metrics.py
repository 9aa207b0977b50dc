from __future__ import annotations

import re

from prometheus_client import Counter, Histogram


def normalize_path(path: str) -> str:
    """Reduce high-cardinality paths for metrics labels."""
    p = path or "/"

    # ints
    p = re.sub(r"/\d+", "/:id", p)
    # actor names
    p = re.sub(r"^(/api/v1/actors)/[^/]+(/messages)?$", r"\1/:name\2", p)

    return p


HTTP_REQUESTS_TOTAL = Counter(
    "playground_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "playground_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)

MESSAGES_DISPATCHED_TOTAL = Counter(
    "playground_messages_dispatched_total",
    "Messages dispatched to receivers",
    ["receiver", "message", "outcome"],
)


REFUSED_MESSAGE_LABEL = "<refused>"


def record_dispatch(receiver: str, message: str, ok: bool) -> None:
    # Refused names come from callers; only answered ones form a closed set.
    MESSAGES_DISPATCHED_TOTAL.labels(
        receiver=receiver,
        message=message if ok else REFUSED_MESSAGE_LABEL,
        outcome="ok" if ok else "refused",
    ).inc()

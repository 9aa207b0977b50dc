from __future__ import annotations

import logging
from typing import Any

from playground.core.capabilities import CapabilityError
from playground.core.observability.metrics import record_dispatch

log = logging.getLogger("playground.dispatch")


def refuse(receiver: Any, message: Any, detail: str | None = None) -> CapabilityError:
    record_dispatch(type(receiver).__name__, str(message), ok=False)
    return CapabilityError(receiver, str(message), detail)


def _lookup(receiver: Any, message: str):
    if not isinstance(message, str) or not message:
        raise refuse(receiver, message)
    fn = getattr(receiver, message, None)
    if not callable(fn):
        raise refuse(receiver, message)
    return fn


def send(receiver: Any, message: str, *args: Any, **kwargs: Any) -> Any:
    """
    Invoke the method named by `message` on `receiver`.

    Private names (leading underscore) are reachable here; use public_send
    when the name comes from outside the program.
    """
    fn = _lookup(receiver, message)
    log.debug("send receiver=%s message=%s", type(receiver).__name__, message)
    result = fn(*args, **kwargs)
    record_dispatch(type(receiver).__name__, message, ok=True)
    return result


def public_send(receiver: Any, message: str, *args: Any, **kwargs: Any) -> Any:
    if isinstance(message, str) and message.startswith("_"):
        raise refuse(
            receiver,
            message,
            f"refusing to send private message '{message}' to {type(receiver).__name__}",
        )
    return send(receiver, message, *args, **kwargs)

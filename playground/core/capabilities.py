from __future__ import annotations

from typing import Any


class CapabilityError(TypeError):
    """Raised when a receiver cannot respond to the message it was sent."""

    def __init__(self, receiver: Any, message: str, detail: str | None = None):
        self.receiver_type = type(receiver).__name__
        self.message = message
        super().__init__(detail or f"{self.receiver_type} does not respond to '{message}'")


def responds_to(obj: Any, message: str) -> bool:
    """
    Duck typing check: does obj expose a public callable named `message`?

    The class of obj is never consulted, only what it can answer.
    """
    if not isinstance(message, str) or not message or message.startswith("_"):
        return False
    return callable(getattr(obj, message, None))


def ensure_responds_to(obj: Any, message: str) -> None:
    if not responds_to(obj, message):
        raise CapabilityError(obj, message)


def shout(word: Any) -> Any:
    ensure_responds_to(word, "upper")
    return word.upper()

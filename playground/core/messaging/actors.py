from __future__ import annotations

import logging
from typing import Callable, Iterable, List

from .dispatch import refuse, public_send
from .models import ActorScript, Reply

log = logging.getLogger("playground.actors")


class Actor:
    """
    Receiver whose methods come from its script.

    Every scripted message is exposed as a public method, so the generic
    duck typing and dispatch helpers work on actors unchanged.
    """

    def __init__(self, script: ActorScript):
        self._script = script

    @property
    def name(self) -> str:
        return self._script.name

    @property
    def script(self) -> ActorScript:
        return self._script

    def __getattr__(self, message: str) -> Callable[[], str]:
        if message.startswith("_"):
            raise AttributeError(message)
        script = self.__dict__.get("_script")
        if script is None or message not in script.script:
            raise AttributeError(message)
        reply = script.script[message]
        return lambda: reply

    def messages(self) -> List[str]:
        return sorted(self._script.script.keys())

    def __repr__(self) -> str:
        return f"Actor(name={self.name!r}, messages={self.messages()!r})"


def converse(actor: Actor, messages: Iterable[str]) -> List[Reply]:
    """
    Send each message in order.

    Stops at the first message the actor cannot answer by raising
    CapabilityError; replies gathered so far are discarded.
    """
    replies: List[Reply] = []
    for m in messages:
        # Only scripted messages are answered; name, script and messages are
        # Actor attributes, not lines of the script.
        if isinstance(m, str) and not m.startswith("_") and m not in actor.script.script:
            raise refuse(actor, m)
        reply = public_send(actor, m)
        replies.append(Reply(message=m, reply=reply))
    log.info("conversation actor=%s messages=%d", actor.name, len(replies))
    return replies

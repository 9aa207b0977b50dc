from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator


class SpellKind(str, Enum):
    FIRE = "fire"
    ICE = "ice"


# Attributes every Actor already answers; scripts may not redefine them.
RESERVED_MESSAGES = frozenset({"name", "script", "messages"})


class ActorScript(BaseModel):
    name: str
    description: Optional[str] = None

    # message name -> reply text
    script: Dict[str, str] = Field(default_factory=dict)

    @field_validator("script")
    @classmethod
    def _public_messages_only(cls, v: Dict[str, str]) -> Dict[str, str]:
        for message in v:
            if not message.isidentifier() or message.startswith("_"):
                raise ValueError(f"script message names must be public identifiers, got {message!r}")
            if message in RESERVED_MESSAGES:
                raise ValueError(f"script message name {message!r} is reserved")
        return v


class Reply(BaseModel):
    message: str
    reply: str

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from playground.core.config import load_settings
from playground.core.messaging import ActorRegistry, converse

router = APIRouter(prefix="/actors", tags=["actors"])


class ConverseRequest(BaseModel):
    messages: List[str] = Field(default_factory=list)


def _registry() -> ActorRegistry:
    return ActorRegistry(load_settings().actors_dir)


@router.get("")
def list_actors():
    return {"actors": _registry().list_names()}


@router.get("/{name}")
def get_actor(name: str):
    actor = _registry().get(name)
    if actor is None:
        raise HTTPException(status_code=404, detail="Actor not found")
    return actor.script.model_dump()


@router.post("/{name}/messages")
def send_messages(name: str, req: ConverseRequest):
    actor = _registry().get(name)
    if actor is None:
        raise HTTPException(status_code=404, detail="Actor not found")

    replies = converse(actor, req.messages)
    return {
        "actor": actor.name,
        "replies": [r.model_dump() for r in replies],
    }

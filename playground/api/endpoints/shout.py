from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from playground.core.capabilities import shout

router = APIRouter(tags=["duck_typing"])


class ShoutRequest(BaseModel):
    # Any JSON value; the capability check decides, not the schema.
    word: Any = None


@router.post("/shout")
def shout_word(req: ShoutRequest):
    return {"result": shout(req.word)}

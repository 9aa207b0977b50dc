from __future__ import annotations

from typing import List

from fastapi import APIRouter
from pydantic import BaseModel, Field

from playground.core.messaging import Spell, SpellKind, cast

router = APIRouter(prefix="/spells", tags=["spells"])


class CastRequest(BaseModel):
    spells: List[SpellKind] = Field(default_factory=list)


@router.post("/cast")
def cast_spells(req: CastRequest):
    return {"outputs": cast(Spell(), req.spells)}

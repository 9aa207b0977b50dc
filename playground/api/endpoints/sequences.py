from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from playground.core.capabilities import CapabilityError
from playground.core.enumerable import (
    Comparison,
    Transform,
    any_match,
    collect,
    delete_if,
    predicate,
    reject,
    transform,
)

router = APIRouter(prefix="/sequences", tags=["sequences"])


class PredicateSpec(BaseModel):
    op: Comparison
    value: Any = None


class FilterRequest(BaseModel):
    items: List[Any] = Field(default_factory=list)
    predicate: PredicateSpec


class CollectRequest(BaseModel):
    items: List[Any] = Field(default_factory=list)
    transform: Transform


def _compare(spec: PredicateSpec):
    # Mixed-type comparisons (e.g. "a" > 1) are client errors.
    cmp = predicate(spec.op, spec.value)

    def _pred(x: Any) -> bool:
        try:
            return bool(cmp(x))
        except TypeError as exc:
            raise HTTPException(status_code=400, detail=f"cannot compare {x!r} with {spec.value!r}: {exc}") from exc

    return _pred


def _apply(kind: Transform):
    fn = transform(kind)

    def _fn(x: Any) -> Any:
        try:
            return fn(x)
        except CapabilityError:
            raise
        except TypeError as exc:
            raise HTTPException(status_code=400, detail=f"cannot apply {kind.value} to {x!r}: {exc}") from exc

    return _fn


@router.post("/delete-if")
def delete_if_items(req: FilterRequest):
    items = list(req.items)
    delete_if(items, _compare(req.predicate))
    return {"items": items}


@router.post("/reject")
def reject_items(req: FilterRequest):
    return {"items": reject(req.items, _compare(req.predicate))}


@router.post("/any")
def any_items(req: FilterRequest):
    return {"result": any_match(req.items, _compare(req.predicate))}


@router.post("/collect")
def collect_items(req: CollectRequest):
    return {"items": collect(req.items, _apply(req.transform))}

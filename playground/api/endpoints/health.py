from __future__ import annotations

from fastapi import APIRouter

from playground.core.config import load_settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    return {"status": "healthy", "env": load_settings().env}

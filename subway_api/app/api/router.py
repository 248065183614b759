"""
Top‑level route table.

Each resource router is mounted under its own prefix.  When a new
resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import lines, stations

router = APIRouter()

router.include_router(lines.router, prefix="/lines", tags=["lines"])
router.include_router(stations.router, prefix="/stations", tags=["stations"])


@router.get("/health", tags=["health"])
async def health() -> dict:
    return {"status": "ok"}

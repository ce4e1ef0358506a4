# src/meetingbot/domains/meetings/api/__init__.py
"""
Meetings API Router

Combines all meeting-related sub-routers. The stats router is included first
so ``/stats`` is not captured by ``/{meeting_id}``.
"""

from fastapi import APIRouter

from .stats import router as stats_router
from .crud import router as crud_router
from .transcripts import router as transcripts_router

PREFIX = "/api/meetings"

# Sub-routers declare "" for the collection root, so the prefix is applied here
router = APIRouter(tags=["meetings"])

router.include_router(stats_router, prefix=PREFIX)
router.include_router(crud_router, prefix=PREFIX)
router.include_router(transcripts_router, prefix=PREFIX)

__all__ = ["router"]

# src/meetingbot/domains/dashboard/api/__init__.py
"""Dashboard API Router"""

from fastapi import APIRouter

from .stats import router as stats_router

router = APIRouter(tags=["dashboard"])

router.include_router(stats_router, prefix="/api/dashboard")

__all__ = ["router"]

# src/meetingbot/domains/tasks/api/__init__.py
"""Tasks API Router"""

from fastapi import APIRouter

from .crud import router as crud_router

router = APIRouter(tags=["tasks"])

router.include_router(crud_router, prefix="/api/tasks")

__all__ = ["router"]

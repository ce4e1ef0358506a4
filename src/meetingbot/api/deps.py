# src/meetingbot/api/deps.py
"""
FastAPI dependencies.

Services are built from the container stored on ``app.state`` so tests can
swap the store, cache and summarizer without touching module globals.
"""

from fastapi import Depends, Query, Request

from ..core.container import Container
from ..repositories.base import DEFAULT_LIMIT, DEFAULT_PAGE
from ..services import MeetingService, StatsEngine, TaskService


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_meeting_service(container: Container = Depends(get_container)) -> MeetingService:
    return container.meeting_service()


def get_task_service(container: Container = Depends(get_container)) -> TaskService:
    return container.task_service()


def get_stats_engine(container: Container = Depends(get_container)) -> StatsEngine:
    return container.stats_engine()


class Pagination:
    """``limit`` and ``page`` query parameters shared by list endpoints."""
    
    def __init__(
        self,
        limit: int = Query(DEFAULT_LIMIT, ge=1, le=100, description="Max records per page"),
        page: int = Query(DEFAULT_PAGE, ge=1, description="1-indexed page number"),
    ):
        self.limit = limit
        self.page = page

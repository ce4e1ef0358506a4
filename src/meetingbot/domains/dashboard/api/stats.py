# src/meetingbot/domains/dashboard/api/stats.py
"""
Dashboard Stats API

Cached dashboard snapshot for the authenticated user.
"""

import logging

from fastapi import APIRouter, Depends

from ....api.deps import get_stats_engine
from ....auth import current_user_id
from ....errors import InternalError, MeetingBotError
from ....services import StatsEngine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def get_dashboard(
    user_id: str = Depends(current_user_id),
    engine: StatsEngine = Depends(get_stats_engine),
):
    """Totals, task summary, upcoming meetings and overdue tasks."""
    try:
        return await engine.dashboard_stats(user_id)
    except MeetingBotError:
        raise
    except Exception:
        logger.exception(f"Failed to compute dashboard stats for user {user_id}")
        raise InternalError()

# src/meetingbot/domains/meetings/api/stats.py
"""
Meeting Statistics API

Cached per-user meeting statistics. Unexpected failures answer with a generic
500 body.
"""

import logging

from fastapi import APIRouter, Depends

from ....api.deps import get_stats_engine
from ....auth import current_user_id
from ....errors import InternalError, MeetingBotError
from ....services import StatsEngine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stats")
async def get_meeting_stats(
    user_id: str = Depends(current_user_id),
    engine: StatsEngine = Depends(get_stats_engine),
):
    """General stats, top participants and meetings per weekday."""
    try:
        return await engine.meeting_stats(user_id)
    except MeetingBotError:
        raise
    except Exception:
        logger.exception(f"Failed to compute meeting stats for user {user_id}")
        raise InternalError()

# src/meetingbot/domains/meetings/api/crud.py
"""
Meetings CRUD API

List, create and fetch the authenticated user's meetings. Unexpected failures
surface their message in the 500 body.
"""

import logging

from fastapi import APIRouter, Depends

from ....api.deps import Pagination, get_meeting_service
from ....api.models import MeetingCreate
from ....auth import current_user_id
from ....errors import InternalError, MeetingBotError
from ....services import MeetingService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def list_meetings(
    pagination: Pagination = Depends(),
    user_id: str = Depends(current_user_id),
    service: MeetingService = Depends(get_meeting_service),
):
    """List the user's meetings, paginated with limit/page."""
    try:
        result = await service.list_meetings(user_id, limit=pagination.limit, page=pagination.page)
    except MeetingBotError:
        raise
    except Exception as e:
        raise InternalError(str(e))
    return result.to_dict()


@router.post("", status_code=201)
async def create_meeting(
    body: MeetingCreate,
    user_id: str = Depends(current_user_id),
    service: MeetingService = Depends(get_meeting_service),
):
    """Create a meeting owned by the caller."""
    try:
        meeting = await service.create_meeting(
            user_id, title=body.title, date=body.date, participants=body.participants
        )
    except MeetingBotError:
        raise
    except Exception as e:
        raise InternalError(str(e))
    return meeting.to_dict()


@router.get("/{meeting_id}")
async def get_meeting(
    meeting_id: str,
    user_id: str = Depends(current_user_id),
    service: MeetingService = Depends(get_meeting_service),
):
    """Get a meeting and its generated tasks. 404 if missing or not owned."""
    try:
        result = await service.get_meeting(meeting_id, user_id)
    except MeetingBotError:
        raise
    except Exception as e:
        raise InternalError(str(e))
    return {
        "meeting": result["meeting"].to_dict(),
        "tasks": [task.to_dict() for task in result["tasks"]],
    }

# src/meetingbot/domains/meetings/api/transcripts.py
"""
Meeting Transcript API

Record a transcript (with end date) and summarize it into tasks.
"""

import logging

from fastapi import APIRouter, Depends

from ....api.deps import get_meeting_service
from ....api.models import TranscriptUpdate
from ....auth import current_user_id
from ....errors import InternalError, MeetingBotError
from ....services import MeetingService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.put("/{meeting_id}/transcript")
async def update_transcript(
    meeting_id: str,
    body: TranscriptUpdate,
    user_id: str = Depends(current_user_id),
    service: MeetingService = Depends(get_meeting_service),
):
    """Store the transcript and end date; duration is recomputed."""
    try:
        meeting = await service.update_transcript(
            meeting_id, user_id, transcript=body.transcript, end_date=body.end_date
        )
    except MeetingBotError:
        raise
    except Exception as e:
        raise InternalError(str(e))
    return meeting.to_dict()


@router.post("/{meeting_id}/summarize")
async def summarize_meeting(
    meeting_id: str,
    user_id: str = Depends(current_user_id),
    service: MeetingService = Depends(get_meeting_service),
):
    """Summarize the transcript and create one pending task per action item."""
    try:
        result = await service.summarize(meeting_id, user_id)
    except MeetingBotError:
        raise
    except Exception as e:
        raise InternalError(str(e))
    return {
        "summary": result["summary"],
        "actionItems": [item.to_dict() for item in result["actionItems"]],
        "createdTasks": [task.to_dict() for task in result["createdTasks"]],
    }

# src/meetingbot/services/meeting_service.py
"""
Meeting Lifecycle Service

Create, list and fetch meetings, record transcripts, and run the
summarize-and-spawn-tasks workflow.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List

from ..core.dates import duration_minutes, ensure_utc, to_iso
from ..core.models import Meeting, Task, TaskStatus
from ..core.ports import SummarizerProtocol
from ..errors import NotFoundError, ValidationError
from ..repositories import MeetingRepository, Page, TaskRepository

logger = logging.getLogger(__name__)

MEETING_NOT_FOUND = "Meeting not found"
GENERATED_TASK_DESCRIPTION = "Automatically generated task from summary."


class MeetingService:
    """Business logic for a user's meetings."""
    
    def __init__(
        self,
        meetings: MeetingRepository,
        tasks: TaskRepository,
        summarizer: SummarizerProtocol,
    ):
        self._meetings = meetings
        self._tasks = tasks
        self._summarizer = summarizer
    
    async def _get_owned(self, meeting_id: str, user_id: str) -> Meeting:
        meeting = await self._meetings.get_for_user(meeting_id, user_id)
        if meeting is None:
            raise NotFoundError(MEETING_NOT_FOUND)
        return meeting
    
    async def list_meetings(self, user_id: str, limit: int, page: int) -> Page[Meeting]:
        return await self._meetings.list_for_user(user_id, limit=limit, page=page)
    
    async def create_meeting(
        self, user_id: str, title: str, date: datetime, participants: List[str]
    ) -> Meeting:
        """
        Create a meeting owned by ``user_id``.
        
        The owner always comes from the authenticated identity; transcript,
        summary and action items start empty.
        """
        meeting = await self._meetings.create(
            Meeting(user_id=user_id, title=title, date=ensure_utc(date), participants=list(participants))
        )
        logger.info(f"Meeting created successfully: meeting_id={meeting.id} user_id={user_id}")
        return meeting
    
    async def get_meeting(self, meeting_id: str, user_id: str) -> Dict[str, Any]:
        """The meeting plus every task linked back to it."""
        meeting = await self._get_owned(meeting_id, user_id)
        tasks = await self._tasks.for_meeting(meeting.id)
        return {"meeting": meeting, "tasks": tasks}
    
    async def update_transcript(
        self, meeting_id: str, user_id: str, transcript: str, end_date: datetime
    ) -> Meeting:
        """
        Store the transcript and end date, recomputing duration.
        
        Raises:
            NotFoundError: meeting missing or owned by someone else
            ValidationError: end date earlier than the start date
        """
        meeting = await self._get_owned(meeting_id, user_id)
        end_date = ensure_utc(end_date)
        
        if end_date < meeting.date:
            raise ValidationError("end date cannot be before start date")
        
        updated = await self._meetings.update_for_user(
            meeting_id,
            user_id,
            {
                "transcript": transcript,
                "end_date": to_iso(end_date),
                "duration": duration_minutes(meeting.date, end_date),
            },
        )
        if updated is None:
            raise NotFoundError(MEETING_NOT_FOUND)
        
        logger.info(f"Transcript updated: meeting_id={meeting_id} user_id={user_id} "
                    f"duration={updated.duration}")
        return updated
    
    async def summarize(self, meeting_id: str, user_id: str) -> Dict[str, Any]:
        """
        Summarize the transcript and create one pending task per action item.
        
        The summary write and the task insert are separate operations; if the
        insert fails the meeting keeps its summary without tasks.
        """
        meeting = await self._get_owned(meeting_id, user_id)
        
        if not meeting.transcript:
            raise ValidationError("Transcript is required to generate summary")
        
        result = await self._summarizer.summarize(meeting)
        
        await self._meetings.update_for_user(
            meeting_id,
            user_id,
            {
                "summary": result.summary,
                "action_items": [item.title for item in result.action_items],
            },
        )
        
        tasks = [
            Task(
                user_id=meeting.user_id,
                meeting_id=meeting.id,
                title=item.title,
                description=GENERATED_TASK_DESCRIPTION,
                status=TaskStatus.PENDING,
                due_date=item.due_date,
            )
            for item in result.action_items
        ]
        created = await self._tasks.create_many(tasks)
        
        logger.info(f"Summarized meeting: meeting_id={meeting_id} user_id={user_id} "
                    f"tasks_created={len(created)}")
        return {
            "summary": result.summary,
            "actionItems": result.action_items,
            "createdTasks": created,
        }

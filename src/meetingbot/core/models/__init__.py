# src/meetingbot/core/models/__init__.py
"""
Domain models for the application.

These are plain data classes representing the core entities. They convert to
and from store rows (snake_case, ISO strings) and to API payloads (camelCase).
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from ..dates import parse_iso, to_iso


class TaskStatus(str, Enum):
    """Task workflow statuses."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


def _as_list(value: Any) -> List[str]:
    # SQLite hands JSON columns back as text; Supabase returns real arrays
    if value is None or value == "":
        return []
    if isinstance(value, str):
        return list(json.loads(value))
    return list(value)


@dataclass
class Meeting:
    """Meeting entity."""
    user_id: str
    title: str
    date: datetime
    participants: List[str] = field(default_factory=list)
    id: Optional[str] = None
    end_date: Optional[datetime] = None
    duration: Optional[int] = None
    transcript: str = ""
    summary: str = ""
    action_items: List[str] = field(default_factory=list)
    
    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Meeting":
        return cls(
            id=row.get("id"),
            user_id=row["user_id"],
            title=row["title"],
            date=parse_iso(row["date"]),
            end_date=parse_iso(row.get("end_date")),
            duration=row.get("duration"),
            participants=_as_list(row.get("participants")),
            transcript=row.get("transcript") or "",
            summary=row.get("summary") or "",
            action_items=_as_list(row.get("action_items")),
        )
    
    def to_row(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "date": to_iso(self.date),
            "end_date": to_iso(self.end_date),
            "duration": self.duration,
            "participants": list(self.participants),
            "transcript": self.transcript,
            "summary": self.summary,
            "action_items": list(self.action_items),
        }
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "date": to_iso(self.date),
            "endDate": to_iso(self.end_date),
            "duration": self.duration,
            "participants": list(self.participants),
            "transcript": self.transcript,
            "summary": self.summary,
            "actionItems": list(self.action_items),
        }


@dataclass
class Task:
    """Task entity, optionally spawned from a meeting."""
    user_id: str
    title: str
    due_date: datetime
    status: TaskStatus = TaskStatus.PENDING
    id: Optional[str] = None
    description: Optional[str] = None
    meeting_id: Optional[str] = None
    
    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Task":
        return cls(
            id=row.get("id"),
            user_id=row["user_id"],
            title=row["title"],
            description=row.get("description"),
            status=TaskStatus(row.get("status") or TaskStatus.PENDING.value),
            due_date=parse_iso(row["due_date"]),
            meeting_id=row.get("meeting_id"),
        )
    
    def to_row(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "meeting_id": self.meeting_id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "due_date": to_iso(self.due_date),
        }
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "meetingId": self.meeting_id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "dueDate": to_iso(self.due_date),
        }


@dataclass
class ActionItem:
    """An action item produced by the summarizer."""
    title: str
    due_date: datetime
    
    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "dueDate": to_iso(self.due_date)}


@dataclass
class SummaryResult:
    """Output of a summarizer run."""
    summary: str
    action_items: List[ActionItem] = field(default_factory=list)

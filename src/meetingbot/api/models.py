# src/meetingbot/api/models.py
"""
Pydantic models for request validation.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MeetingCreate(BaseModel):
    """Request model for creating a meeting. The owner is never taken from the body."""
    title: str = Field(..., min_length=1)
    date: datetime
    participants: List[str] = Field(..., min_length=1)
    
    @field_validator("participants")
    @classmethod
    def participants_not_blank(cls, value: List[str]) -> List[str]:
        if any(not name for name in value):
            raise ValueError("participants must be non-empty strings")
        return value


class TranscriptUpdate(BaseModel):
    """Request model for recording a transcript and the meeting end date."""
    model_config = ConfigDict(populate_by_name=True)
    
    transcript: str = Field(..., min_length=1)
    end_date: datetime = Field(..., alias="endDate")

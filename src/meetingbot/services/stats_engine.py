# src/meetingbot/services/stats_engine.py
"""
Statistics Engine

Per-user meeting statistics and dashboard rollups behind a read-through cache.

Meeting stats are three facets computed from one read of the user's meetings:

- generalStats: meetings that have both an end date and a duration
- topParticipants: five most frequent participants across all meetings
- meetingsByDayOfWeek: ISO weekday histogram (1=Monday..7=Sunday) over all meetings

Snapshots are cached fully assembled (zero-filled), so a hit is returned as-is
without touching the store. Entries expire by TTL only.
"""

import asyncio
import json
import logging
from collections import Counter
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from ..core.dates import to_iso, utcnow
from ..core.models import Meeting
from ..core.ports import CacheProtocol
from ..repositories import MeetingRepository, TaskRepository

logger = logging.getLogger(__name__)

TOP_PARTICIPANTS_LIMIT = 5
UPCOMING_MEETINGS_LIMIT = 5
ISO_WEEKDAYS = range(1, 8)


def meeting_stats_key(user_id: str) -> str:
    return f"meetingStats:{user_id}"


def dashboard_stats_key(user_id: str) -> str:
    return f"dashboardStats:{user_id}"


# =============================================================================
# FACETS
# =============================================================================

def general_stats(meetings: List[Meeting]) -> Dict[str, Any]:
    """Aggregate numbers over completed meetings; all zeros when there are none."""
    completed = [m for m in meetings if m.end_date is not None and m.duration is not None]
    if not completed:
        return {
            "totalMeetings": 0,
            "averageParticipants": 0,
            "totalParticipants": 0,
            "shortestMeeting": 0,
            "longestMeeting": 0,
            "averageDuration": 0,
        }
    
    participant_counts = [len(m.participants) for m in completed]
    durations = [m.duration for m in completed]
    total = len(completed)
    
    return {
        "totalMeetings": total,
        "averageParticipants": round(sum(participant_counts) / total, 2),
        "totalParticipants": sum(participant_counts),
        "shortestMeeting": min(durations),
        "longestMeeting": max(durations),
        "averageDuration": round(sum(durations) / total, 2),
    }


def top_participants(meetings: List[Meeting], limit: int = TOP_PARTICIPANTS_LIMIT) -> List[Dict[str, Any]]:
    """Most frequent participants, count descending, ties by name."""
    counts = Counter(name for m in meetings for name in m.participants)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [
        {"participant": name, "meetingCount": count}
        for name, count in ranked[:limit]
    ]


def meetings_by_day_of_week(meetings: List[Meeting]) -> List[Dict[str, int]]:
    """Exactly seven buckets, Monday(1) through Sunday(7)."""
    counts = Counter(m.date.isoweekday() for m in meetings)
    return [{"dayOfWeek": day, "count": counts.get(day, 0)} for day in ISO_WEEKDAYS]


# =============================================================================
# ENGINE
# =============================================================================

class StatsEngine:
    """Computes and caches meeting and dashboard statistics for a user."""
    
    def __init__(
        self,
        meetings: MeetingRepository,
        tasks: TaskRepository,
        cache: CacheProtocol,
        meeting_stats_ttl: int = 3600,
        dashboard_stats_ttl: int = 3600,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._meetings = meetings
        self._tasks = tasks
        self._cache = cache
        self._meeting_stats_ttl = meeting_stats_ttl
        self._dashboard_stats_ttl = dashboard_stats_ttl
        self._clock = clock or utcnow
    
    async def _read_through(self, key: str, ttl: int, compute) -> Dict[str, Any]:
        cached = await self._cache.get(key)
        if cached is not None:
            return json.loads(cached)
        
        snapshot = await compute()
        await self._cache.set(key, json.dumps(snapshot), ttl)
        return snapshot
    
    async def meeting_stats(self, user_id: str) -> Dict[str, Any]:
        async def compute() -> Dict[str, Any]:
            meetings = await self._meetings.all_for_user(user_id)
            return {
                "generalStats": general_stats(meetings),
                "topParticipants": top_participants(meetings),
                "meetingsByDayOfWeek": meetings_by_day_of_week(meetings),
            }
        
        return await self._read_through(meeting_stats_key(user_id), self._meeting_stats_ttl, compute)
    
    async def dashboard_stats(self, user_id: str) -> Dict[str, Any]:
        async def compute() -> Dict[str, Any]:
            now = self._clock()
            total_meetings, task_summary, upcoming, overdue = await asyncio.gather(
                self._meetings.count_for_user(user_id),
                self._tasks.status_counts(user_id),
                self._meetings.upcoming_for_user(user_id, now, limit=UPCOMING_MEETINGS_LIMIT),
                self._tasks.overdue_for_user(user_id, now),
            )
            titles = await self._meetings.titles_by_id(t.meeting_id for t in overdue)
            
            return {
                "totalMeetings": total_meetings,
                "taskSummary": task_summary,
                "upcomingMeetings": [
                    {
                        "id": m.id,
                        "title": m.title,
                        "date": to_iso(m.date),
                        "participantCount": len(m.participants),
                    }
                    for m in upcoming
                ],
                "overdueTasks": [
                    {
                        "id": t.id,
                        "title": t.title,
                        "dueDate": to_iso(t.due_date),
                        "meetingId": t.meeting_id,
                        "meetingTitle": titles.get(t.meeting_id, ""),
                    }
                    for t in overdue
                ],
            }
        
        return await self._read_through(dashboard_stats_key(user_id), self._dashboard_stats_ttl, compute)

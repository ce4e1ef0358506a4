# src/meetingbot/repositories/meetings.py
"""
Meeting Repository

Owner-scoped reads and writes of meetings.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from ..core.dates import to_iso
from ..core.models import Meeting
from ..core.ports import MEETINGS
from .base import CREATED_AT, DEFAULT_LIMIT, DEFAULT_PAGE, OwnerScopedRepository, Page

logger = logging.getLogger(__name__)


class MeetingRepository(OwnerScopedRepository):
    collection = MEETINGS
    
    async def list_for_user(
        self, user_id: str, limit: int = DEFAULT_LIMIT, page: int = DEFAULT_PAGE
    ) -> Page[Meeting]:
        """One page of the user's meetings plus the user's total meeting count."""
        rows = await self._store.find(
            self.collection,
            self.scoped(user_id),
            order_by=CREATED_AT,
            limit=limit,
            offset=Page.offset_for(page, limit),
        )
        total = await self.count_for_user(user_id)
        return Page(
            data=[Meeting.from_row(row) for row in rows],
            total=total,
            limit=limit,
            page=page,
        )
    
    async def all_for_user(self, user_id: str) -> List[Meeting]:
        rows = await self._store.find(self.collection, self.scoped(user_id))
        return [Meeting.from_row(row) for row in rows]
    
    async def get_for_user(self, meeting_id: str, user_id: str) -> Optional[Meeting]:
        """Fetch by id AND owner. A foreign meeting is indistinguishable from a missing one."""
        row = await self._store.find_one(self.collection, self.scoped(user_id, id=meeting_id))
        return Meeting.from_row(row) if row else None
    
    async def create(self, meeting: Meeting) -> Meeting:
        row = await self._store.insert(self.collection, meeting.to_row())
        return Meeting.from_row(row)
    
    async def update_for_user(
        self, meeting_id: str, user_id: str, changes: Dict[str, Any]
    ) -> Optional[Meeting]:
        """Apply ``changes`` (store column names) in one write; None if not found/owned."""
        row = await self._store.update(
            self.collection, self.scoped(user_id, id=meeting_id), changes
        )
        return Meeting.from_row(row) if row else None
    
    async def upcoming_for_user(self, user_id: str, now: datetime, limit: int = 5) -> List[Meeting]:
        """Soonest meetings starting at or after ``now``."""
        rows = await self._store.find(
            self.collection,
            self.scoped(user_id, date={"gte": to_iso(now)}),
            order_by="date",
            limit=limit,
        )
        return [Meeting.from_row(row) for row in rows]
    
    async def titles_by_id(self, meeting_ids: Iterable[str]) -> Dict[str, str]:
        """Resolve meeting titles for display. Not owner-scoped: the link is a weak reference."""
        ids = sorted({mid for mid in meeting_ids if mid})
        if not ids:
            return {}
        rows = await self._store.find(self.collection, {"id": {"in": ids}})
        return {row["id"]: row["title"] for row in rows}

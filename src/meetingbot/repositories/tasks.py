# src/meetingbot/repositories/tasks.py
"""
Task Repository

Owner-scoped reads of tasks, bulk creation, and the task queries used by the
dashboard.
"""

import logging
from collections import Counter
from datetime import datetime
from typing import Dict, List

from ..core.dates import to_iso
from ..core.models import Task, TaskStatus
from ..core.ports import TASKS
from .base import CREATED_AT, DEFAULT_LIMIT, DEFAULT_PAGE, OwnerScopedRepository, Page

logger = logging.getLogger(__name__)


class TaskRepository(OwnerScopedRepository):
    collection = TASKS
    
    async def list_for_user(
        self, user_id: str, limit: int = DEFAULT_LIMIT, page: int = DEFAULT_PAGE
    ) -> Page[Task]:
        rows = await self._store.find(
            self.collection,
            self.scoped(user_id),
            order_by=CREATED_AT,
            limit=limit,
            offset=Page.offset_for(page, limit),
        )
        total = await self.count_for_user(user_id)
        return Page(
            data=[Task.from_row(row) for row in rows],
            total=total,
            limit=limit,
            page=page,
        )
    
    async def for_meeting(self, meeting_id: str) -> List[Task]:
        rows = await self._store.find(self.collection, {"meeting_id": meeting_id}, order_by=CREATED_AT)
        return [Task.from_row(row) for row in rows]
    
    async def create_many(self, tasks: List[Task]) -> List[Task]:
        rows = await self._store.insert_many(self.collection, [task.to_row() for task in tasks])
        return [Task.from_row(row) for row in rows]
    
    async def status_counts(self, user_id: str) -> Dict[str, int]:
        """Task count per status, with every known status present (zero-filled)."""
        rows = await self._store.find(self.collection, self.scoped(user_id))
        counts = Counter(row.get("status") for row in rows)
        return {status.value: counts.get(status.value, 0) for status in TaskStatus}
    
    async def overdue_for_user(self, user_id: str, now: datetime) -> List[Task]:
        """Tasks past their due date that are not completed."""
        rows = await self._store.find(
            self.collection,
            self.scoped(
                user_id,
                due_date={"lt": to_iso(now)},
                status={"neq": TaskStatus.COMPLETED.value},
            ),
            order_by="due_date",
        )
        return [Task.from_row(row) for row in rows]

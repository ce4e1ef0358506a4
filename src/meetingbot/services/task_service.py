# src/meetingbot/services/task_service.py
"""Task listing."""

from ..core.models import Task
from ..repositories import Page, TaskRepository


class TaskService:
    def __init__(self, tasks: TaskRepository):
        self._tasks = tasks
    
    async def list_tasks(self, user_id: str, limit: int, page: int) -> Page[Task]:
        return await self._tasks.list_for_user(user_id, limit=limit, page=page)

# src/meetingbot/domains/tasks/api/crud.py
"""Task listing API."""

from fastapi import APIRouter, Depends

from ....api.deps import Pagination, get_task_service
from ....auth import current_user_id
from ....errors import InternalError, MeetingBotError
from ....services import TaskService

router = APIRouter()


@router.get("")
async def list_tasks(
    pagination: Pagination = Depends(),
    user_id: str = Depends(current_user_id),
    service: TaskService = Depends(get_task_service),
):
    """List the user's tasks, paginated with limit/page."""
    try:
        result = await service.list_tasks(user_id, limit=pagination.limit, page=pagination.page)
    except MeetingBotError:
        raise
    except Exception as e:
        raise InternalError(str(e))
    return result.to_dict()

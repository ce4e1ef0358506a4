# src/meetingbot/repositories/base.py
"""
Base Repository

Shared pagination result and the owner-scoping helper used by the meeting and
task repositories.
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, TypeVar

from ..core.ports import StoreProtocol

T = TypeVar("T")

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1

# Insertion-order column used to keep paginated listings stable
CREATED_AT = "created_at"


@dataclass
class Page(Generic[T]):
    """One page of owner-scoped results."""
    data: List[T]
    total: int
    limit: int = DEFAULT_LIMIT
    page: int = DEFAULT_PAGE
    
    @staticmethod
    def offset_for(page: int, limit: int) -> int:
        return (page - 1) * limit
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "limit": self.limit,
            "page": self.page,
            "data": [item.to_dict() for item in self.data],
        }


class OwnerScopedRepository:
    """Repository bound to one collection whose rows carry a ``user_id``."""
    
    collection: str = ""
    
    def __init__(self, store: StoreProtocol):
        self._store = store
    
    @staticmethod
    def scoped(user_id: str, **filters: Any) -> Dict[str, Any]:
        """Filter dict restricted to ``user_id``."""
        return {"user_id": user_id, **filters}
    
    async def count_for_user(self, user_id: str) -> int:
        return await self._store.count(self.collection, self.scoped(user_id))

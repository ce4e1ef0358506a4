# src/meetingbot/core/ports/protocols.py
"""
Protocol-based Interfaces for MeetingBot

Store filters are plain dicts. A scalar value means equality, ``None`` means
"is null", and a dict value holds operators:

    {"user_id": "u1", "date": {"gte": "2024-01-01T00:00:00.000+00:00"}}
    {"status": {"neq": "completed"}, "id": {"in": ["a", "b"]}}

Supported operators: ``gte``, ``gt``, ``lte``, ``lt``, ``neq``, ``in``.
Results are ascending by ``order_by`` (insertion order when omitted).
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from ..models import Meeting, SummaryResult

# Collection names
MEETINGS = "meetings"
TASKS = "tasks"

Filters = Dict[str, Any]


@runtime_checkable
class StoreProtocol(Protocol):
    """
    Protocol for document/table store operations.
    
    Implementations: SQLiteStoreAdapter, SupabaseStoreAdapter
    """
    
    async def init(self) -> None:
        """Prepare the backing store (schema, connections)."""
        ...
    
    async def find(
        self,
        collection: str,
        filters: Optional[Filters] = None,
        order_by: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Get records matching filters."""
        ...
    
    async def find_one(self, collection: str, filters: Filters) -> Optional[Dict[str, Any]]:
        """Get the first record matching filters."""
        ...
    
    async def count(self, collection: str, filters: Optional[Filters] = None) -> int:
        """Count records matching filters."""
        ...
    
    async def insert(self, collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a record and return it with its generated ID."""
        ...
    
    async def insert_many(self, collection: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Insert records in bulk."""
        ...
    
    async def update(
        self, collection: str, filters: Filters, data: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Update the record matching filters and return it, or None if nothing matched."""
        ...
    
    async def close(self) -> None:
        ...


@runtime_checkable
class CacheProtocol(Protocol):
    """
    Best-effort key-value cache with TTL.
    
    Failures never propagate: ``get`` degrades to a miss, ``set`` to a no-op.
    """
    
    async def get(self, key: str) -> Optional[str]:
        ...
    
    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        ...


@runtime_checkable
class SummarizerProtocol(Protocol):
    """Produces a summary and action items for a meeting transcript."""
    
    async def summarize(self, meeting: Meeting) -> SummaryResult:
        ...

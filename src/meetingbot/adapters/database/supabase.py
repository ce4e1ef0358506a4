# src/meetingbot/adapters/database/supabase.py
"""
Supabase Store Adapter

Implements StoreProtocol using Supabase as the backend.
This is the production store adapter.

Expected tables mirror the SQLite schema, with ``participants`` and
``action_items`` as jsonb arrays, ``id`` defaulting to gen_random_uuid() and
``created_at timestamptz default now()``. Listings page in ``created_at`` order.
The supabase client is synchronous, so calls run in a worker thread.
"""

import asyncio
import logging
import os
from typing import Any, Dict, List, Optional

from supabase import create_client, Client

logger = logging.getLogger(__name__)


def apply_filters(query, filters: Optional[Dict[str, Any]]):
    """Apply a StoreProtocol filter dict to a PostgREST query builder."""
    if not filters:
        return query
    
    for key, value in filters.items():
        if value is None:
            query = query.is_(key, "null")
        elif isinstance(value, dict):
            for op, val in value.items():
                if op == "gte":
                    query = query.gte(key, val)
                elif op == "gt":
                    query = query.gt(key, val)
                elif op == "lte":
                    query = query.lte(key, val)
                elif op == "lt":
                    query = query.lt(key, val)
                elif op == "neq":
                    query = query.neq(key, val)
                elif op == "in":
                    query = query.in_(key, list(val))
                else:
                    raise ValueError(f"Unsupported filter operator: {op}")
        else:
            query = query.eq(key, value)
    return query


class SupabaseStoreAdapter:
    """
    Supabase implementation of StoreProtocol.
    
    Uses Supabase's PostgREST API for all store operations.
    """
    
    def __init__(self, url: Optional[str] = None, key: Optional[str] = None):
        """
        Initialize Supabase adapter.
        
        Args:
            url: Supabase project URL (defaults to SUPABASE_URL env var)
            key: Supabase service key (defaults to SUPABASE_KEY env var)
        """
        self._url = url or os.getenv("SUPABASE_URL")
        self._key = key or os.getenv("SUPABASE_KEY")
        
        if not self._url or not self._key:
            raise ValueError("SUPABASE_URL and SUPABASE_KEY must be set")
        
        self._client: Client = create_client(self._url, self._key)
        logger.info("SupabaseStoreAdapter initialized")
    
    # =============================================================================
    # SYNC IMPLEMENTATIONS
    # =============================================================================
    
    def _find_sync(
        self,
        table: str,
        filters: Optional[Dict[str, Any]],
        order_by: Optional[str],
        limit: Optional[int],
        offset: Optional[int],
    ) -> List[Dict[str, Any]]:
        query = apply_filters(self._client.table(table).select("*"), filters)
        
        # id breaks ties (bulk inserts share one created_at)
        if order_by:
            query = query.order(order_by, desc=False)
            if order_by != "id":
                query = query.order("id", desc=False)
        
        if limit is not None:
            start = offset or 0
            query = query.range(start, start + limit - 1)
        elif offset:
            query = query.offset(offset)
        
        result = query.execute()
        return result.data or []
    
    def _count_sync(self, table: str, filters: Optional[Dict[str, Any]]) -> int:
        query = apply_filters(self._client.table(table).select("id", count="exact"), filters)
        result = query.execute()
        return result.count or 0
    
    def _insert_many_sync(self, table: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if not rows:
            return []
        clean_rows = [
            {k: v for k, v in row.items() if v is not None}
            for row in rows
        ]
        result = self._client.table(table).insert(clean_rows).execute()
        return result.data or []
    
    def _update_sync(
        self, table: str, filters: Dict[str, Any], data: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        clean_data = {k: v for k, v in data.items() if k != "id"}
        query = apply_filters(self._client.table(table).update(clean_data), filters)
        result = query.execute()
        return result.data[0] if result.data else None
    
    # =============================================================================
    # STORE PROTOCOL
    # =============================================================================
    
    async def init(self) -> None:
        # Tables are provisioned through Supabase migrations
        logger.info("Supabase store ready")
    
    async def find(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        try:
            return await asyncio.to_thread(
                self._find_sync, collection, filters, order_by, limit, offset
            )
        except Exception as e:
            logger.error(f"Error querying {collection}: {e}")
            raise
    
    async def find_one(self, collection: str, filters: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        rows = await self.find(collection, filters, limit=1)
        return rows[0] if rows else None
    
    async def count(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> int:
        try:
            return await asyncio.to_thread(self._count_sync, collection, filters)
        except Exception as e:
            logger.error(f"Error counting {collection}: {e}")
            raise
    
    async def insert(self, collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
        rows = await self.insert_many(collection, [data])
        if not rows:
            logger.error(f"Insert into {collection} returned no rows")
            raise RuntimeError(f"Insert into {collection} returned no rows")
        return rows[0]
    
    async def insert_many(self, collection: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        try:
            return await asyncio.to_thread(self._insert_many_sync, collection, rows)
        except Exception as e:
            logger.error(f"Error inserting into {collection}: {e}")
            raise
    
    async def update(
        self, collection: str, filters: Dict[str, Any], data: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        try:
            return await asyncio.to_thread(self._update_sync, collection, filters, data)
        except Exception as e:
            logger.error(f"Error updating {collection}: {e}")
            raise
    
    async def close(self) -> None:
        return None

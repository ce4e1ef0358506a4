# src/meetingbot/adapters/database/sqlite.py
"""
SQLite Store Adapter

Implements StoreProtocol using SQLite as the backend.
This adapter is for local development and tests.

sqlite3 is blocking, so every public coroutine hands its work to a thread
with ``asyncio.to_thread``. A new connection is opened per call, which means
the database must be a file path (``:memory:`` would be empty on every call).
"""

import asyncio
import json
import logging
import sqlite3
import uuid
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Tuple

from ...core.ports import MEETINGS, TASKS

logger = logging.getLogger(__name__)

SCHEMA = f"""
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS {MEETINGS} (
  id TEXT PRIMARY KEY,
  user_id TEXT NOT NULL,
  title TEXT NOT NULL,
  date TEXT NOT NULL,
  end_date TEXT,
  duration INTEGER,
  participants TEXT NOT NULL DEFAULT '[]',
  transcript TEXT NOT NULL DEFAULT '',
  summary TEXT NOT NULL DEFAULT '',
  action_items TEXT NOT NULL DEFAULT '[]',
  created_at TEXT DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))
);

CREATE TABLE IF NOT EXISTS {TASKS} (
  id TEXT PRIMARY KEY,
  user_id TEXT NOT NULL,
  meeting_id TEXT,
  title TEXT NOT NULL,
  description TEXT,
  status TEXT NOT NULL DEFAULT 'pending',
  due_date TEXT NOT NULL,
  created_at TEXT DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))
);

CREATE INDEX IF NOT EXISTS idx_meetings_user_date ON {MEETINGS}(user_id, date);
CREATE INDEX IF NOT EXISTS idx_tasks_user_due ON {TASKS}(user_id, due_date);
CREATE INDEX IF NOT EXISTS idx_tasks_meeting ON {TASKS}(meeting_id);
"""

# Columns holding JSON arrays, per table
JSON_COLUMNS = {
    MEETINGS: {"participants", "action_items"},
    TASKS: set(),
}

_OPERATORS = {
    "gte": ">=",
    "gt": ">",
    "lte": "<=",
    "lt": "<",
    "neq": "!=",
}


def build_where(filters: Optional[Dict[str, Any]]) -> Tuple[str, List[Any]]:
    """Translate a filter dict into a WHERE clause and its parameters."""
    if not filters:
        return "", []
    
    conditions = []
    params: List[Any] = []
    for key, value in filters.items():
        if value is None:
            conditions.append(f"{key} IS NULL")
        elif isinstance(value, dict):
            for op, val in value.items():
                if op in _OPERATORS:
                    conditions.append(f"{key} {_OPERATORS[op]} ?")
                    params.append(val)
                elif op == "in":
                    values = list(val)
                    if not values:
                        conditions.append("0")
                        continue
                    placeholders = ", ".join("?" for _ in values)
                    conditions.append(f"{key} IN ({placeholders})")
                    params.extend(values)
                else:
                    raise ValueError(f"Unsupported filter operator: {op}")
        else:
            conditions.append(f"{key} = ?")
            params.append(value)
    
    return " WHERE " + " AND ".join(conditions), params


class SQLiteStoreAdapter:
    """
    SQLite implementation of StoreProtocol.
    
    Uses a local SQLite file for all store operations.
    """
    
    def __init__(self, db_path: str = "meetingbot.db"):
        """
        Initialize SQLite adapter.
        
        Args:
            db_path: Path to the SQLite database file
        """
        self._db_path = db_path
        logger.info(f"SQLiteStoreAdapter initialized with {db_path}")
    
    @contextmanager
    def _get_connection(self):
        """Get a database connection with row_factory set."""
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()
    
    def _row_to_dict(self, table: str, row: sqlite3.Row) -> Dict[str, Any]:
        """Convert a sqlite3.Row to a dictionary, decoding JSON columns."""
        data = dict(row)
        for column in JSON_COLUMNS.get(table, ()):
            if isinstance(data.get(column), str):
                data[column] = json.loads(data[column])
        return data
    
    def _encode(self, table: str, data: Dict[str, Any]) -> Dict[str, Any]:
        encoded = dict(data)
        for column in JSON_COLUMNS.get(table, ()):
            if column in encoded and encoded[column] is not None:
                encoded[column] = json.dumps(list(encoded[column]))
        return encoded
    
    # =============================================================================
    # SYNC IMPLEMENTATIONS
    # =============================================================================
    
    def _init_sync(self) -> None:
        with self._get_connection() as conn:
            conn.executescript(SCHEMA)
            conn.commit()
    
    def _find_sync(
        self,
        table: str,
        filters: Optional[Dict[str, Any]],
        order_by: Optional[str],
        limit: Optional[int],
        offset: Optional[int],
    ) -> List[Dict[str, Any]]:
        where, params = build_where(filters)
        query = f"SELECT * FROM {table}{where}"
        
        # rowid breaks ties between rows sharing a sort value
        if order_by:
            query += f" ORDER BY {order_by} ASC, rowid ASC"
        else:
            query += " ORDER BY rowid ASC"
        
        if limit is not None:
            query += " LIMIT ?"
            params.append(int(limit))
            if offset:
                query += " OFFSET ?"
                params.append(int(offset))
        elif offset:
            query += " LIMIT -1 OFFSET ?"
            params.append(int(offset))
        
        with self._get_connection() as conn:
            cursor = conn.execute(query, params)
            return [self._row_to_dict(table, row) for row in cursor.fetchall()]
    
    def _count_sync(self, table: str, filters: Optional[Dict[str, Any]]) -> int:
        where, params = build_where(filters)
        with self._get_connection() as conn:
            row = conn.execute(f"SELECT COUNT(*) AS count FROM {table}{where}", params).fetchone()
            return row["count"] if row else 0
    
    def _insert_many_sync(self, table: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if not rows:
            return []
        
        ids = []
        with self._get_connection() as conn:
            for data in rows:
                clean_data = {k: v for k, v in self._encode(table, data).items() if v is not None}
                clean_data.setdefault("id", uuid.uuid4().hex)
                ids.append(clean_data["id"])
                
                columns = ", ".join(clean_data.keys())
                placeholders = ", ".join("?" for _ in clean_data)
                conn.execute(
                    f"INSERT INTO {table} ({columns}) VALUES ({placeholders})",
                    list(clean_data.values()),
                )
            conn.commit()
        
        inserted = {row["id"]: row for row in self._find_sync(table, {"id": {"in": ids}}, None, None, None)}
        return [inserted[i] for i in ids if i in inserted]
    
    def _update_sync(
        self, table: str, filters: Dict[str, Any], data: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        where, params = build_where(filters)
        clean_data = {k: v for k, v in self._encode(table, data).items() if k != "id"}
        
        with self._get_connection() as conn:
            row = conn.execute(f"SELECT id FROM {table}{where} LIMIT 1", params).fetchone()
            if row is None:
                return None
            record_id = row["id"]
            
            if clean_data:
                set_clause = ", ".join(f"{k} = ?" for k in clean_data.keys())
                conn.execute(
                    f"UPDATE {table} SET {set_clause} WHERE id = ?",
                    list(clean_data.values()) + [record_id],
                )
                conn.commit()
            
            updated = conn.execute(f"SELECT * FROM {table} WHERE id = ?", (record_id,)).fetchone()
            return self._row_to_dict(table, updated) if updated else None
    
    # =============================================================================
    # STORE PROTOCOL
    # =============================================================================
    
    async def init(self) -> None:
        await asyncio.to_thread(self._init_sync)
        logger.info(f"SQLite schema ready at {self._db_path}")
    
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
        except sqlite3.Error as e:
            logger.error(f"Error querying {collection}: {e}")
            raise
    
    async def find_one(self, collection: str, filters: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        rows = await self.find(collection, filters, limit=1)
        return rows[0] if rows else None
    
    async def count(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> int:
        try:
            return await asyncio.to_thread(self._count_sync, collection, filters)
        except sqlite3.Error as e:
            logger.error(f"Error counting {collection}: {e}")
            raise
    
    async def insert(self, collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
        rows = await self.insert_many(collection, [data])
        return rows[0]
    
    async def insert_many(self, collection: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        try:
            return await asyncio.to_thread(self._insert_many_sync, collection, rows)
        except sqlite3.Error as e:
            logger.error(f"Error inserting into {collection}: {e}")
            raise
    
    async def update(
        self, collection: str, filters: Dict[str, Any], data: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        try:
            return await asyncio.to_thread(self._update_sync, collection, filters, data)
        except sqlite3.Error as e:
            logger.error(f"Error updating {collection}: {e}")
            raise
    
    async def close(self) -> None:
        # Connections are per-call; nothing to release
        return None

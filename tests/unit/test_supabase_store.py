# tests/unit/test_supabase_store.py
"""
Unit tests for the Supabase store adapter.

The PostgREST builder is replaced with MagicMocks; these tests check which
builder calls each store operation produces.
"""

from unittest.mock import MagicMock, call, patch

import pytest

from meetingbot.adapters.database.supabase import SupabaseStoreAdapter, apply_filters
from meetingbot.repositories.meetings import MeetingRepository


class MockSupabaseResponse:
    """Mock response from Supabase operations."""
    def __init__(self, data=None, count=None):
        self.data = data or []
        self.count = count if count is not None else len(self.data)


def _chainable_query(response=None):
    """A query builder whose filter methods return itself."""
    query = MagicMock()
    for method in ("eq", "neq", "gte", "gt", "lte", "lt", "in_", "is_", "order", "range", "offset", "select", "update", "insert"):
        getattr(query, method).return_value = query
    query.execute.return_value = response or MockSupabaseResponse()
    return query


@pytest.fixture
def supabase_client():
    client = MagicMock()
    client.table.return_value = _chainable_query()
    return client


@pytest.fixture
def adapter(supabase_client):
    with patch("meetingbot.adapters.database.supabase.create_client", return_value=supabase_client):
        yield SupabaseStoreAdapter(url="https://test.supabase.co", key="test-key")


class TestApplyFilters:
    """Tests for filter dict -> PostgREST builder calls."""

    def test_operators(self):
        query = _chainable_query()

        apply_filters(query, {
            "user_id": "u1",
            "date": {"gte": "a", "lt": "b"},
            "status": {"neq": "completed"},
            "id": {"in": ("x", "y")},
            "meeting_id": None,
        })

        query.eq.assert_called_once_with("user_id", "u1")
        query.gte.assert_called_once_with("date", "a")
        query.lt.assert_called_once_with("date", "b")
        query.neq.assert_called_once_with("status", "completed")
        query.in_.assert_called_once_with("id", ["x", "y"])
        query.is_.assert_called_once_with("meeting_id", "null")

    def test_unknown_operator_rejected(self):
        with pytest.raises(ValueError):
            apply_filters(_chainable_query(), {"date": {"between": 1}})


class TestSupabaseStoreAdapter:
    """Tests for SupabaseStoreAdapter with a mocked client."""

    def test_requires_credentials(self, monkeypatch):
        monkeypatch.delenv("SUPABASE_URL", raising=False)
        monkeypatch.delenv("SUPABASE_KEY", raising=False)

        with pytest.raises(ValueError):
            SupabaseStoreAdapter()

    @pytest.mark.asyncio
    async def test_find_paginates_with_range(self, adapter, supabase_client):
        query = supabase_client.table.return_value
        query.execute.return_value = MockSupabaseResponse(data=[{"id": "m3"}])

        rows = await adapter.find("meetings", {"user_id": "u1"}, order_by="date", limit=1, offset=2)

        assert rows == [{"id": "m3"}]
        supabase_client.table.assert_called_with("meetings")
        assert query.order.call_args_list == [call("date", desc=False), call("id", desc=False)]
        query.range.assert_called_once_with(2, 2)

    @pytest.mark.asyncio
    async def test_count_uses_exact_count(self, adapter, supabase_client):
        query = supabase_client.table.return_value
        query.execute.return_value = MockSupabaseResponse(data=[], count=7)

        assert await adapter.count("tasks", {"user_id": "u1"}) == 7
        query.select.assert_called_with("id", count="exact")

    @pytest.mark.asyncio
    async def test_insert_many_drops_none_values(self, adapter, supabase_client):
        query = supabase_client.table.return_value
        query.execute.return_value = MockSupabaseResponse(data=[{"id": "t1", "title": "a"}])

        rows = await adapter.insert_many("tasks", [{"id": None, "title": "a"}])

        assert rows == [{"id": "t1", "title": "a"}]
        query.insert.assert_called_once_with([{"title": "a"}])

    @pytest.mark.asyncio
    async def test_update_returns_none_when_nothing_matched(self, adapter, supabase_client):
        query = supabase_client.table.return_value
        query.execute.return_value = MockSupabaseResponse(data=[])

        assert await adapter.update("meetings", {"id": "m1", "user_id": "u2"}, {"summary": "x"}) is None
        query.update.assert_called_once_with({"summary": "x"})

    @pytest.mark.asyncio
    async def test_errors_propagate(self, adapter, supabase_client):
        supabase_client.table.return_value.execute.side_effect = RuntimeError("postgrest down")

        with pytest.raises(RuntimeError):
            await adapter.find("meetings")

    @pytest.mark.asyncio
    async def test_insert_without_returned_row_raises(self, adapter, supabase_client):
        supabase_client.table.return_value.execute.return_value = MockSupabaseResponse(data=[])

        with pytest.raises(RuntimeError, match="returned no rows"):
            await adapter.insert("meetings", {"user_id": "u1", "title": "Standup"})


class TestSupabaseListing:
    """Owner listings page over a stable sort."""

    @pytest.mark.asyncio
    async def test_meeting_listing_orders_before_range(self, adapter, supabase_client):
        query = supabase_client.table.return_value
        query.execute.return_value = MockSupabaseResponse(data=[], count=5)

        await MeetingRepository(adapter).list_for_user("u1", limit=1, page=3)

        calls = [name for name, _, _ in query.method_calls]
        assert query.order.call_args_list[0] == call("created_at", desc=False)
        assert calls.index("order") < calls.index("range")
        query.range.assert_called_once_with(2, 2)

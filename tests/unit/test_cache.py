# tests/unit/test_cache.py
"""
Unit tests for the cache manager.

Tests the three cache modes:
- disabled: always misses, never stores
- memory: in-process dict with TTL expiry
- redis: best-effort, errors become misses/no-ops
"""

from unittest.mock import AsyncMock

import pytest

from meetingbot.infrastructure.cache import CacheEntry, CacheManager


class TestCacheEntry:
    """Tests for CacheEntry expiry."""

    def test_no_ttl_never_expires(self):
        entry = CacheEntry(value="x", created_at=0)

        assert entry.is_expired is False

    def test_expired_after_ttl(self):
        entry = CacheEntry(value="x", created_at=0, ttl=5)

        assert entry.is_expired is True


class TestDisabledMode:
    """Disabled cache never stores and never contacts a backend."""

    @pytest.mark.asyncio
    async def test_get_always_misses(self):
        cache = CacheManager(redis_url="redis://localhost:6379/0", enabled=False)

        assert await cache.set("k", "v", 60) is False
        assert await cache.get("k") is None
        assert cache.mode == "disabled"
        assert cache._redis_client is None


class TestMemoryMode:
    """In-memory fallback when no Redis URL is configured."""

    @pytest.mark.asyncio
    async def test_set_then_get(self):
        cache = CacheManager()

        assert cache.mode == "memory"
        assert await cache.set("meetingStats:u1", '{"a": 1}', 60) is True
        assert await cache.get("meetingStats:u1") == '{"a": 1}'

    @pytest.mark.asyncio
    async def test_expired_entry_is_a_miss(self):
        cache = CacheManager()
        await cache.set("k", "v", 10)
        cache._memory_cache["k"].created_at -= 100

        assert await cache.get("k") is None
        assert "k" not in cache._memory_cache

    @pytest.mark.asyncio
    async def test_set_sweeps_expired_entries(self):
        """Expired keys that are never read again are dropped on the next write."""
        cache = CacheManager()
        await cache.set("old", "v", 10)
        cache._memory_cache["old"].created_at -= 100

        await cache.set("new", "v", 10)

        assert "old" not in cache._memory_cache
        assert "new" in cache._memory_cache

    @pytest.mark.asyncio
    async def test_default_ttl_used(self):
        cache = CacheManager(default_ttl=42)
        await cache.set("k", "v")

        assert cache._memory_cache["k"].ttl == 42

    @pytest.mark.asyncio
    async def test_namespace_prefixes_keys(self):
        cache = CacheManager(namespace="mb")
        await cache.set("k", "v", 60)

        assert "mb:k" in cache._memory_cache
        assert await cache.get("k") == "v"

    @pytest.mark.asyncio
    async def test_stats_track_hits_and_misses(self):
        cache = CacheManager()
        await cache.get("missing")
        await cache.set("k", "v", 60)
        await cache.get("k")

        stats = cache.get_stats()

        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["sets"] == 1
        assert stats["hit_rate"] == 0.5
        assert stats["mode"] == "memory"


class TestRedisMode:
    """Redis-backed cache with a mocked client."""

    @pytest.fixture
    def redis_cache(self):
        cache = CacheManager(redis_url="redis://localhost:6379/0")
        cache._redis_client = AsyncMock()
        return cache

    @pytest.mark.asyncio
    async def test_set_uses_setex_with_ttl(self, redis_cache):
        assert redis_cache.mode == "redis"
        assert await redis_cache.set("k", "v", 30) is True

        redis_cache._redis_client.setex.assert_awaited_once_with("k", 30, "v")

    @pytest.mark.asyncio
    async def test_get_returns_raw_value(self, redis_cache):
        redis_cache._redis_client.get.return_value = '{"cached": true}'

        assert await redis_cache.get("k") == '{"cached": true}'

    @pytest.mark.asyncio
    async def test_errors_are_swallowed(self, redis_cache):
        redis_cache._redis_client.get.side_effect = ConnectionError("refused")
        redis_cache._redis_client.setex.side_effect = ConnectionError("refused")

        assert await redis_cache.get("k") is None
        assert await redis_cache.set("k", "v", 30) is False
        assert redis_cache.get_stats()["errors"] == 2

    @pytest.mark.asyncio
    async def test_close_releases_client(self, redis_cache):
        client = redis_cache._redis_client

        await redis_cache.close()

        client.aclose.assert_awaited_once()
        assert redis_cache.mode == "memory"

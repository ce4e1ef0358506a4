# src/meetingbot/infrastructure/cache.py
"""
Redis Cache Manager

Provides the statistics cache using Redis, with an in-memory fallback when no
Redis host is configured and a disabled mode for tests.

Values are raw strings; callers serialize before ``set`` and parse after
``get``. Every operation is best effort: a Redis failure is logged and turns
into a miss (``get``) or a no-op (``set``), never an exception.

Usage:
    cache = CacheManager(redis_url="redis://localhost:6379/0")
    
    await cache.set("meetingStats:u1", json.dumps(snapshot), ttl=3600)
    raw = await cache.get("meetingStats:u1")
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """Cache entry with metadata."""
    value: str
    created_at: float
    ttl: Optional[float] = None
    
    @property
    def is_expired(self) -> bool:
        """Check if entry has expired."""
        if self.ttl is None:
            return False
        return time.time() - self.created_at > self.ttl


class CacheManager:
    """
    Redis-backed cache with memory fallback.
    
    Modes:
    - ``redis``: a Redis URL was given and the client was created
    - ``memory``: no Redis URL (or redis unavailable), in-process dict with TTL
    - ``disabled``: every get misses and every set is a no-op; nothing is contacted
    """
    
    def __init__(
        self,
        redis_url: Optional[str] = None,
        default_ttl: int = 3600,
        namespace: str = "",
        enabled: bool = True,
    ):
        """
        Initialize cache manager.
        
        Args:
            redis_url: Redis connection URL
            default_ttl: Default TTL in seconds
            namespace: Optional key prefix
            enabled: False puts the cache in disabled mode
        """
        self._redis_url = redis_url
        self._default_ttl = default_ttl
        self._namespace = namespace
        self._enabled = enabled
        
        self._redis_client = None
        self._fallback_mode = True
        self._memory_cache: Dict[str, CacheEntry] = {}
        self._cache_stats = {
            "hits": 0,
            "misses": 0,
            "sets": 0,
            "errors": 0,
        }
        
        if not enabled:
            logger.info("Cache disabled")
        else:
            self._connect_redis()
    
    def _connect_redis(self) -> bool:
        """Attempt to create the Redis client."""
        if not self._redis_url:
            logger.info("📦 Cache running in fallback mode (no Redis)")
            return False
        
        try:
            import redis.asyncio as aioredis
            
            self._redis_client = aioredis.from_url(
                self._redis_url,
                decode_responses=True,
            )
            self._fallback_mode = False
            logger.info("✅ Cache connected to Redis")
            return True
        except Exception as e:
            logger.warning(f"⚠️ Redis client creation failed: {e}, using fallback mode")
        
        return False
    
    def _make_key(self, key: str) -> str:
        """Create namespaced key."""
        return f"{self._namespace}:{key}" if self._namespace else key
    
    @property
    def mode(self) -> str:
        if not self._enabled:
            return "disabled"
        return "memory" if self._fallback_mode else "redis"
    
    async def get(self, key: str) -> Optional[str]:
        """
        Get a raw value from cache.
        
        Returns:
            Cached value, or None on miss, expiry, disabled mode or error
        """
        if not self._enabled:
            return None
        
        full_key = self._make_key(key)
        
        if self._fallback_mode:
            entry = self._memory_cache.get(full_key)
            if entry and not entry.is_expired:
                self._cache_stats["hits"] += 1
                logger.info(f"Cache hit for key: {key}")
                return entry.value
            if entry and entry.is_expired:
                del self._memory_cache[full_key]
            self._cache_stats["misses"] += 1
            logger.info(f"Cache miss for key: {key}")
            return None
        
        try:
            value = await self._redis_client.get(full_key)
        except Exception as e:
            self._cache_stats["errors"] += 1
            logger.error(f"Error getting cache for key {key}: {e}")
            return None
        
        if value is not None:
            self._cache_stats["hits"] += 1
            logger.info(f"Cache hit for key: {key}")
        else:
            self._cache_stats["misses"] += 1
            logger.info(f"Cache miss for key: {key}")
        return value
    
    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        """
        Set a raw value in cache.
        
        Args:
            key: Cache key
            value: Serialized value
            ttl: Time-to-live in seconds (None = default TTL)
            
        Returns:
            True if the value was stored
        """
        if not self._enabled:
            return False
        
        full_key = self._make_key(key)
        ttl = ttl if ttl is not None else self._default_ttl
        
        if self._fallback_mode:
            self._cleanup_expired()
            self._memory_cache[full_key] = CacheEntry(
                value=value,
                created_at=time.time(),
                ttl=ttl,
            )
            self._cache_stats["sets"] += 1
            logger.info(f"Cache set for key: {key} with TTL: {ttl} seconds")
            return True
        
        try:
            await self._redis_client.setex(full_key, ttl, value)
        except Exception as e:
            self._cache_stats["errors"] += 1
            logger.error(f"Error setting cache for key {key}: {e}")
            return False
        
        self._cache_stats["sets"] += 1
        logger.info(f"Cache set for key: {key} with TTL: {ttl} seconds")
        return True
    
    def _cleanup_expired(self) -> int:
        """Drop expired entries from the memory cache."""
        expired = [
            key for key, entry in self._memory_cache.items()
            if entry.is_expired
        ]
        
        for key in expired:
            del self._memory_cache[key]
        
        if expired:
            logger.debug(f"Cleaned up {len(expired)} expired cache entries")
        return len(expired)
    
    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        total = self._cache_stats["hits"] + self._cache_stats["misses"]
        hit_rate = self._cache_stats["hits"] / total if total > 0 else 0
        
        return {
            **self._cache_stats,
            "hit_rate": hit_rate,
            "size": len(self._memory_cache) if self._fallback_mode else "N/A (Redis)",
            "mode": self.mode,
        }
    
    async def close(self) -> None:
        """Release the Redis connection pool, if any."""
        if self._redis_client is None:
            return
        try:
            await self._redis_client.aclose()
            logger.info("Disconnected from Redis")
        except Exception as e:
            logger.error(f"Error disconnecting from Redis: {e}")
        finally:
            self._redis_client = None
            self._fallback_mode = True

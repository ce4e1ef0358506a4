# src/meetingbot/core/container.py
"""
Dependency Injection Container

Central configuration for all dependencies in the application.
This allows switching adapters (SQLite <-> Supabase, Redis <-> memory) without
changing business logic, and lets tests inject their own store and cache.

Usage:
    container = Container(config)
    
    engine = container.stats_engine()
    meetings = container.meeting_service()
"""

import logging

from ..config import AppConfig

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency injection container.
    
    Provides factory methods for the store, cache, summarizer and services.
    Long-lived handles (store, cache) are created once and shared.
    """
    
    def __init__(
        self,
        config: AppConfig,
        store=None,
        cache=None,
        summarizer=None,
    ):
        self.config = config
        
        # Cached instances
        self._store_instance = store
        self._cache_instance = cache
        self._summarizer_instance = summarizer
        
        logger.info(f"Container initialized: store={config.database_type}, "
                    f"cache={'injected' if cache is not None else 'configured'}")
    
    # =============================================================================
    # ADAPTERS
    # =============================================================================
    
    def store(self):
        """
        Get the store adapter instance.
        
        Returns SQLiteStoreAdapter or SupabaseStoreAdapter based on config.
        """
        if self._store_instance is None:
            database_type = self.config.database_type
            if database_type == "sqlite":
                from ..adapters.database.sqlite import SQLiteStoreAdapter
                self._store_instance = SQLiteStoreAdapter(self.config.database_uri)
            elif database_type == "supabase":
                from ..adapters.database.supabase import SupabaseStoreAdapter
                self._store_instance = SupabaseStoreAdapter(
                    url=self.config.supabase_url or None,
                    key=self.config.supabase_key or None,
                )
            else:
                raise ValueError(f"Unknown database type: {database_type}")
        return self._store_instance
    
    def cache(self):
        """
        Get the cache instance.
        
        Disabled in the test environment or when CACHE_ENABLED is false.
        """
        if self._cache_instance is None:
            from ..infrastructure.cache import CacheManager
            self._cache_instance = CacheManager(
                redis_url=self.config.redis_url,
                default_ttl=self.config.meeting_stats_cache_ttl,
                enabled=self.config.cache_enabled and not self.config.is_test,
            )
        return self._cache_instance
    
    def summarizer(self):
        if self._summarizer_instance is None:
            from ..services.summarizer import MockSummarizer
            self._summarizer_instance = MockSummarizer()
        return self._summarizer_instance
    
    # =============================================================================
    # REPOSITORIES & SERVICES
    # =============================================================================
    
    def meetings_repository(self):
        from ..repositories import MeetingRepository
        return MeetingRepository(self.store())
    
    def tasks_repository(self):
        from ..repositories import TaskRepository
        return TaskRepository(self.store())
    
    def meeting_service(self):
        from ..services import MeetingService
        return MeetingService(
            self.meetings_repository(),
            self.tasks_repository(),
            self.summarizer(),
        )
    
    def task_service(self):
        from ..services import TaskService
        return TaskService(self.tasks_repository())
    
    def stats_engine(self):
        from ..services import StatsEngine
        return StatsEngine(
            self.meetings_repository(),
            self.tasks_repository(),
            self.cache(),
            meeting_stats_ttl=self.config.meeting_stats_cache_ttl,
            dashboard_stats_ttl=self.config.dashboard_stats_cache_ttl,
        )
    
    # =============================================================================
    # LIFECYCLE
    # =============================================================================
    
    async def startup(self) -> None:
        await self.store().init()
        self.cache()
    
    async def shutdown(self) -> None:
        if self._cache_instance is not None and hasattr(self._cache_instance, "close"):
            await self._cache_instance.close()
        if self._store_instance is not None:
            await self._store_instance.close()
        logger.info("Container shut down")

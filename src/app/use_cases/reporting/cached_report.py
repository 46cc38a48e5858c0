"""Cached report execution

Shared flow of every cached dashboard report:

1. Ensure the store connection
2. Serve a fresh cached value without querying
3. Otherwise recompute and overwrite the cache
4. On any failure reset the connection and serve the last cached value,
   however old, tagged cache-stale; only without one return an error
"""

import logging
from typing import Awaitable, Callable, Generic, Protocol, TypeVar
from libs.result import Result, Return
from src.app.services.connection_manager import ConnectionLifecycleManager
from src.app.services.ttl_cache import CacheLookup
from .dtos import CachedReport, DataSource
from .errors import store_failure

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReportCache(Protocol[T]):
    def get(self) -> CacheLookup[T]: ...

    def set(self, value: T) -> None: ...


class CachedReportUseCase(Generic[T]):
    """
    Base class for reports served through a TTL cache

    Subclasses call run_cached() with the cache slot for the request and a
    coroutine factory that computes the report from the store.
    """

    report_name = "report"
    failure_code = "REPORT_FAILED"

    def __init__(self, connection: ConnectionLifecycleManager):
        """
        Args:
            connection: Connection lifecycle manager shared by the process
        """
        self.connection = connection

    async def run_cached(
        self,
        cache: ReportCache[T],
        compute: Callable[[], Awaitable[T]],
        force_refresh: bool = False,
    ) -> Result[CachedReport[T]]:
        """
        Serve a report from cache or store

        Args:
            cache: Cache slot holding this report
            compute: Coroutine factory that queries the store
            force_refresh: Skip a fresh cached value (stale fallback still applies)

        Returns:
            Result[CachedReport[T]] tagged database, cache or cache-stale
        """
        try:
            await self.connection.ensure_connection()

            lookup = cache.get()
            if lookup.is_fresh and not force_refresh:
                return Return.ok(CachedReport(data=lookup.value, source=DataSource.CACHE))

            data = await compute()
        except Exception as e:
            return self._fallback(cache, e)

        cache.set(data)
        return Return.ok(CachedReport(data=data, source=DataSource.DATABASE))

    def _fallback(self, cache: ReportCache[T], error: Exception) -> Result[CachedReport[T]]:
        self.connection.reset(f"{self.report_name} failed: {type(error).__name__}")

        lookup = cache.get()
        if lookup.has_value:
            logger.warning(
                f"Serving stale {self.report_name} after failure: {type(error).__name__}: {error}"
            )
            return Return.ok(CachedReport(data=lookup.value, source=DataSource.CACHE_STALE))

        logger.error(f"Failed to compute {self.report_name}: {type(error).__name__}: {error}")
        return Return.err(
            store_failure(error, f"Failed to fetch {self.report_name}", self.failure_code)
        )

"""
Query context: everything a content query needs, built once per process.

The context bundles the connection pool, the cache and the per-phase
timeouts and is passed explicitly to the query façade. Nothing here is
a module-level singleton.
"""

from dataclasses import dataclass, field

from config.settings import Settings
from database.database import DatabaseManager
from database.deadline import QueryTimeouts
from src.cache import QueryCache
from src.logging import get_logger

logger = get_logger(__name__)


@dataclass
class QueryContext:
    """
    Shared resources for content queries.

    Usage:
        context = QueryContext.from_settings(Settings.from_env())
        service = ContentQueryService(context)
        ...
        context.close()
    """
    db: DatabaseManager
    statics_host: str
    cache: QueryCache = field(default_factory=QueryCache.disabled)
    timeouts: QueryTimeouts = field(default_factory=QueryTimeouts)

    @classmethod
    def from_settings(cls, settings: Settings) -> "QueryContext":
        db = DatabaseManager(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_open=settings.db_max_open,
            idle_timeout=settings.db_idle_timeout,
            checkout_timeout=settings.fetch_timeout,
        )

        if settings.cache_active:
            cache = QueryCache.from_url(
                settings.redis_url,
                ttl=settings.redis_ttl,
                timeout=settings.redis_timeout,
            )
            logger.info(f"Query cache enabled (ttl={settings.redis_ttl}s)")
        else:
            cache = QueryCache.disabled()
            logger.info("Query cache disabled")

        return cls(
            db=db,
            statics_host=settings.statics_host,
            cache=cache,
            timeouts=QueryTimeouts(
                count=settings.count_timeout,
                fetch=settings.fetch_timeout,
                hydrate=settings.hydrate_timeout,
            ),
        )

    def close(self) -> None:
        self.cache.close()
        self.db.dispose()

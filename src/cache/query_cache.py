"""
Best-effort read-through cache backed by Redis.

Values are stored as JSON with a TTL. Every backend or decoding failure
is logged and treated as a miss (reads) or dropped (writes); a cache
problem never fails a query.
"""

import json
from typing import Any, Optional, Tuple

import redis

from src.logging import get_logger

logger = get_logger(__name__)

CACHE_ERRORS = (redis.RedisError, OSError, ValueError, TypeError)


class QueryCache:
    """
    Narrow GET / SET EX wrapper around a Redis client.

    Usage:
        cache = QueryCache.from_url("redis://localhost:6379/0", ttl=3600)

        found, value = cache.get(key)
        if not found:
            value = run_query()
            cache.set(key, value)
    """

    def __init__(self, client: Optional[Any] = None, ttl: int = 3600):
        """
        Args:
            client: redis.Redis (or compatible) client; None disables the cache
            ttl: Expiry in seconds for every stored value
        """
        self.client = client
        self.ttl = ttl

    @classmethod
    def from_url(cls, url: str, ttl: int = 3600, timeout: float = 1.0) -> "QueryCache":
        """Build a cache whose every network call is bounded by `timeout` seconds."""
        client = redis.Redis.from_url(
            url,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
            decode_responses=True,
        )
        return cls(client=client, ttl=ttl)

    @classmethod
    def disabled(cls) -> "QueryCache":
        return cls(client=None)

    def enabled(self) -> bool:
        return self.client is not None

    def get(self, key: str) -> Tuple[bool, Any]:
        """
        Returns:
            (True, value) on a hit, (False, None) on a miss or any error
        """
        if not self.enabled():
            return False, None
        try:
            raw = self.client.get(key)
            if raw is None:
                return False, None
            return True, json.loads(raw)
        except CACHE_ERRORS as e:
            logger.cache_error("get", key, e)
            return False, None

    def set(self, key: str, value: Any) -> bool:
        """
        Returns:
            bool: True if the value was stored
        """
        if not self.enabled():
            return False
        try:
            self.client.set(key, json.dumps(value, separators=(",", ":")), ex=self.ttl)
            return True
        except CACHE_ERRORS as e:
            logger.cache_error("set", key, e)
            return False

    def close(self) -> None:
        if self.client is not None and hasattr(self.client, "close"):
            self.client.close()

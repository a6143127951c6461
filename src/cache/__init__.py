"""
Read-through query cache.
"""

from src.cache.keys import build_cache_key, normalize_order
from src.cache.query_cache import QueryCache

__all__ = [
    "QueryCache",
    "build_cache_key",
    "normalize_order",
]

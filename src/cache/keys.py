"""
Cache key generation.

A key is the operation name plus a SHA-256 digest of the normalized
request: filter, resolved order and pagination. JSON is dumped with
sorted keys and compact separators, so field insertion order never
changes the key.
"""

import hashlib
import json
from typing import Any, Dict, Optional, Sequence

from database.query.filters import FilterInput
from database.query.ordering import SortKey

KEY_PREFIX = "content"


def normalize_order(order: Optional[Sequence[SortKey]], default: Sequence[SortKey]) -> Any:
    """Resolved sort keys as plain data; the entity default collapses to "default"."""
    if order is None or tuple(order) == tuple(default):
        return "default"
    return [[field, direction.value] for field, direction in order]


def build_cache_key(
    operation: str,
    where: Optional[FilterInput] = None,
    order: Any = None,
    take: Optional[int] = None,
    skip: Optional[int] = None,
) -> str:
    """
    Build the cache key for one request.

    Args:
        operation: Operation name, e.g. "articles" or "topic:unique"
        where: Decoded (and published-defaulted) filter
        order: Output of normalize_order, or None for unordered operations
        take: Normalized page size
        skip: Normalized offset

    Returns:
        str: "content:<operation>:<sha256 hex>"
    """
    payload: Dict[str, Any] = {
        "operation": operation,
        "where": where.normalized() if where is not None else {},
        "order": order,
        "take": take,
        "skip": skip,
    }
    encoded = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    digest = hashlib.sha256(encoded.encode("utf-8")).hexdigest()
    return f"{KEY_PREFIX}:{operation}:{digest}"

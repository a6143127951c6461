"""
LIMIT / OFFSET handling.
"""

from typing import Any, Optional, Tuple

from sqlalchemy.orm import Query

from database.query.filters import InvalidQueryInput


def _page_value(name: str, value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidQueryInput(f"{name}: expected an integer, got {type(value).__name__}")
    return value if value > 0 else None


def normalize_page(take: Any = None, skip: Any = None) -> Tuple[Optional[int], Optional[int]]:
    """
    Validate take/skip; non-positive values become None (no clause).

    Raises:
        InvalidQueryInput: If either value is not an integer
    """
    return _page_value("take", take), _page_value("skip", skip)


def paginate(query: Query, take: Optional[int], skip: Optional[int]) -> Query:
    if take:
        query = query.limit(take)
    if skip:
        query = query.offset(skip)
    return query

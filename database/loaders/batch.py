"""
Batch loading primitives.

A BatchLoader collects the distinct keys one relation kind needs across
a whole result batch, resolves them with a single query, and returns a
key -> value (or key -> [values]) map. Keys that are 0 or None mean "no
relation" and are never looked up.
"""

from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Set, Tuple, TypeVar

from sqlalchemy.orm import Session

from database.deadline import Deadline
from src.logging import get_logger

logger = get_logger(__name__)

V = TypeVar("V")

Fetch = Callable[[Session, List[int]], Iterable[Tuple[int, Any]]]


class BatchLoader(Generic[V]):
    """
    Collect keys, issue one query, map the results back by key.

    Usage:
        loader = BatchLoader("post.tags", fetch_post_tags, many=True)
        loader.add_all(row.id for row in rows)
        tags_by_post = loader.load(session, deadline)
    """

    def __init__(self, kind: str, fetch: Fetch, many: bool = False):
        self.kind = kind
        self.fetch = fetch
        self.many = many
        self._keys: Set[int] = set()
        self.queries = 0

    @property
    def keys(self) -> List[int]:
        return sorted(self._keys)

    def add(self, key: Optional[int]) -> None:
        if key:
            self._keys.add(int(key))

    def add_all(self, keys: Iterable[Optional[int]]) -> None:
        for key in keys:
            self.add(key)

    def load(self, session: Session, deadline: Optional[Deadline] = None) -> Dict[int, Any]:
        """
        Run the batch query.

        Returns an empty map without touching the database when no keys
        were collected. The deadline's remaining budget is re-applied
        before the query, so statement_timeout shrinks as the pass goes on.
        Any database error propagates.

        Raises:
            QueryDeadlineExceeded: If the deadline expired before the query
        """
        if not self._keys:
            return {}
        if deadline is not None:
            deadline.apply(session)

        results: Dict[int, Any] = {}
        row_count = 0
        self.queries += 1
        for key, value in self.fetch(session, self.keys):
            row_count += 1
            if self.many:
                results.setdefault(key, []).append(value)
            else:
                results[key] = value

        logger.relation_loaded(self.kind, len(self._keys), row_count)
        return results


class LoaderSet:
    """Tracks the loaders of one hydration pass so the query total can be reported."""

    def __init__(self):
        self._loaders: List[BatchLoader] = []

    def new(self, kind: str, fetch: Fetch, many: bool = False) -> BatchLoader:
        loader = BatchLoader(kind, fetch, many=many)
        self._loaders.append(loader)
        return loader

    @property
    def queries(self) -> int:
        return sum(loader.queries for loader in self._loaders)

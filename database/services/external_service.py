"""
External Service for listing and counting syndicated items.
"""

from typing import List, Optional, Sequence

from sqlalchemy import func

from database.database import DatabaseManager
from database.deadline import Deadline, QueryTimeouts
from database.decoding import decode_external
from database.loaders.hydration import ExternalHydrator
from database.models import External
from database.query.filters import ExternalWhere
from database.query.ordering import EXTERNAL_ORDERING, SortKey
from database.query.pagination import paginate
from database.query.predicates import external_predicates
from database.schemas import ExternalItem
from src.logging import get_logger

logger = get_logger(__name__)


class ExternalService:
    """Primary query executor for external items."""

    def __init__(self, db: DatabaseManager, timeouts: QueryTimeouts = QueryTimeouts()):
        self.db = db
        self.timeouts = timeouts
        self.hydrator = ExternalHydrator()

    def list_external_items(
        self,
        where: ExternalWhere,
        order: Sequence[SortKey],
        take: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> List[ExternalItem]:
        """
        Fetch one page of external items with partner and tags.

        Items without a publish date are left out whenever the page is
        ordered by publish date.
        """
        logger.query_started("externals", take, skip)
        predicates = external_predicates(where)
        if EXTERNAL_ORDERING.sorts_by(order, "publishedDate"):
            predicates.add(External.published_date.isnot(None))

        with self.db.read_scope() as session:
            fetch = Deadline(self.timeouts.fetch, "externals fetch")
            fetch.apply(session)

            query = (
                session.query(External)
                .filter(*predicates.clauses)
                .order_by(*EXTERNAL_ORDERING.clauses(order), External.id)
            )
            rows = [decode_external(item) for item in paginate(query, take, skip).all()]

            hydrate = Deadline(self.timeouts.hydrate, "externals hydrate")
            hydrate.apply(session)
            return self.hydrator.hydrate(session, rows, hydrate)

    def count_external_items(self, where: ExternalWhere) -> int:
        logger.query_started("externalsCount")
        with self.db.read_scope() as session:
            Deadline(self.timeouts.count, "externals count").apply(session)
            return (
                session.query(func.count(External.id))
                .filter(*external_predicates(where).clauses)
                .scalar()
            ) or 0

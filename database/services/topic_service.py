"""
Topic Service for listing, counting and looking up topics.
"""

from typing import List, Optional, Sequence

from sqlalchemy import func

from database.database import DatabaseManager
from database.deadline import Deadline, QueryTimeouts
from database.decoding import decode_topic
from database.loaders.hydration import TopicHydrator
from database.models import Topic
from database.query.filters import TopicWhere, TopicWhereUnique
from database.query.ordering import TOPIC_ORDERING, SortKey
from database.query.pagination import paginate
from database.query.predicates import topic_predicates
from database.query.published import PUBLISHED
from database.schemas import Topic as TopicItem
from src.logging import get_logger

logger = get_logger(__name__)


class TopicService:
    """Primary query executor for topics."""

    def __init__(self, db: DatabaseManager, statics_host: str,
                 timeouts: QueryTimeouts = QueryTimeouts()):
        self.db = db
        self.timeouts = timeouts
        self.hydrator = TopicHydrator(statics_host)

    def list_topics(
        self,
        where: TopicWhere,
        order: Sequence[SortKey],
        take: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> List[TopicItem]:
        logger.query_started("topics", take, skip)
        with self.db.read_scope() as session:
            fetch = Deadline(self.timeouts.fetch, "topics fetch")
            fetch.apply(session)

            query = (
                session.query(Topic)
                .filter(*topic_predicates(where).clauses)
                .order_by(*TOPIC_ORDERING.clauses(order), Topic.id)
            )
            rows = [decode_topic(topic) for topic in paginate(query, take, skip).all()]

            hydrate = Deadline(self.timeouts.hydrate, "topics hydrate")
            hydrate.apply(session)
            return self.hydrator.hydrate(session, rows, hydrate)

    def count_topics(self, where: TopicWhere) -> int:
        logger.query_started("topicsCount")
        with self.db.read_scope() as session:
            Deadline(self.timeouts.count, "topics count").apply(session)
            return (
                session.query(func.count(Topic.id))
                .filter(*topic_predicates(where).clauses)
                .scalar()
            ) or 0

    def topic_by_key(self, key: TopicWhereUnique) -> Optional[TopicItem]:
        """
        Look up one published topic by id, else slug, else name.

        Returns:
            The hydrated topic, or None when no key is given or nothing matches
        """
        if key.id is not None:
            clause = Topic.id == int(key.id)
        elif key.slug is not None:
            clause = Topic.slug == key.slug
        elif key.name is not None:
            clause = Topic.name == key.name
        else:
            return None

        logger.query_started("topic:unique")
        with self.db.read_scope() as session:
            Deadline(self.timeouts.fetch, "topic fetch").apply(session)

            topic = (
                session.query(Topic)
                .filter(clause, Topic.state == PUBLISHED)
                .order_by(Topic.id)
                .first()
            )
            if topic is None:
                return None

            hydrate = Deadline(self.timeouts.hydrate, "topic hydrate")
            hydrate.apply(session)
            return self.hydrator.hydrate(session, [decode_topic(topic)], hydrate)[0]

"""
Post Service for listing, counting and looking up articles.

Runs the primary statement for Post and hands the decoded rows to the
PostHydrator. Filters arrive already decoded and published-defaulted;
order arrives as resolved sort keys.
"""

from typing import List, Optional, Sequence

from sqlalchemy import func

from database.database import DatabaseManager
from database.deadline import Deadline, QueryTimeouts
from database.decoding import decode_post
from database.loaders.hydration import PostHydrator
from database.models import Post
from database.query.filters import ArticleWhere, ArticleWhereUnique
from database.query.ordering import ARTICLE_ORDERING, SortKey
from database.query.pagination import paginate
from database.query.predicates import article_predicates
from database.query.published import PUBLISHED
from database.schemas import Article
from src.logging import get_logger

logger = get_logger(__name__)


class PostService:
    """
    Primary query executor for articles.

    Usage:
        service = PostService(db, statics_host="https://statics.example.com")

        articles = service.list_articles(where, ARTICLE_ORDERING.default, take=10)
        total = service.count_articles(where)
        article = service.article_by_key(ArticleWhereUnique(slug="hello"))
    """

    def __init__(self, db: DatabaseManager, statics_host: str,
                 timeouts: QueryTimeouts = QueryTimeouts()):
        self.db = db
        self.timeouts = timeouts
        self.hydrator = PostHydrator(statics_host)

    def list_articles(
        self,
        where: ArticleWhere,
        order: Sequence[SortKey],
        take: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> List[Article]:
        """
        Fetch one page of fully hydrated articles.

        Args:
            where: Decoded filter
            order: Resolved sort keys
            take: Page size (None for no limit)
            skip: Rows to skip (None for no offset)

        Returns:
            List[Article]: Hydrated articles in query order
        """
        logger.query_started("articles", take, skip)
        with self.db.read_scope() as session:
            fetch = Deadline(self.timeouts.fetch, "articles fetch")
            fetch.apply(session)

            query = (
                session.query(Post)
                .filter(*article_predicates(where).clauses)
                .order_by(*ARTICLE_ORDERING.clauses(order), Post.id)
            )
            rows = [decode_post(post) for post in paginate(query, take, skip).all()]

            hydrate = Deadline(self.timeouts.hydrate, "articles hydrate")
            hydrate.apply(session)
            return self.hydrator.hydrate(session, rows, hydrate)

    def count_articles(self, where: ArticleWhere) -> int:
        logger.query_started("articlesCount")
        with self.db.read_scope() as session:
            Deadline(self.timeouts.count, "articles count").apply(session)
            return (
                session.query(func.count(Post.id))
                .filter(*article_predicates(where).clauses)
                .scalar()
            ) or 0

    def article_by_key(self, key: ArticleWhereUnique) -> Optional[Article]:
        """
        Look up one published article by id, else by slug.

        Returns:
            The hydrated article, or None when no key is given or nothing matches
        """
        if key.id is not None:
            clause = Post.id == int(key.id)
        elif key.slug is not None:
            clause = Post.slug == key.slug
        else:
            return None

        logger.query_started("article:unique")
        with self.db.read_scope() as session:
            fetch = Deadline(self.timeouts.fetch, "article fetch")
            fetch.apply(session)

            post = session.query(Post).filter(clause, Post.state == PUBLISHED).first()
            if post is None:
                return None

            hydrate = Deadline(self.timeouts.hydrate, "article hydrate")
            hydrate.apply(session)
            return self.hydrator.hydrate(session, [decode_post(post)], hydrate)[0]

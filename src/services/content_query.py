"""
Content query façade.

The public query surface: list, count and unique lookups for articles,
external items and topics. Every operation runs the same pipeline:

    decode input -> published default -> cache lookup
        -> primary query + batch hydration -> cache store

Input-shape errors are raised before the cache or database is touched.
"""

from typing import Any, Callable, List, Optional, TypeVar

from database.query import (
    ARTICLE_ORDERING,
    EXTERNAL_ORDERING,
    TOPIC_ORDERING,
    decode_article_unique,
    decode_article_where,
    decode_external_where,
    decode_topic_unique,
    decode_topic_where,
    ensure_published,
    normalize_page,
    parse_order_rules,
)
from database.schemas import Article, ExternalItem, Topic
from database.services import ExternalService, PostService, TopicService
from src.cache import build_cache_key, normalize_order
from src.context import QueryContext
from src.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class ContentQueryService:
    """
    Read-only query façade over the content database.

    Usage:
        service = ContentQueryService(QueryContext.from_settings(settings))

        articles = service.list_articles(take=10, where={"sections": {"some": {"slug": {"equals": "news"}}}})
        total = service.count_articles()
        article = service.article_by_key({"slug": "hello-world"})
    """

    def __init__(self, context: QueryContext):
        self.context = context
        self.cache = context.cache
        self.posts = PostService(context.db, context.statics_host, context.timeouts)
        self.externals = ExternalService(context.db, context.timeouts)
        self.topics = TopicService(context.db, context.statics_host, context.timeouts)

    # ─── Read-through helper ────────────────────────────────────────

    def _read_through(
        self,
        operation: str,
        key: str,
        load: Callable[[], T],
        encode: Callable[[T], Any],
        decode: Callable[[Any], T],
    ) -> T:
        found, raw = self.cache.get(key)
        if found:
            try:
                value = decode(raw)
                logger.cache_hit(operation, key)
                return value
            except (ValueError, TypeError) as e:
                logger.cache_error("decode", key, e)
        elif self.cache.enabled():
            logger.cache_miss(operation, key)

        value = load()
        if value is not None:
            self.cache.set(key, encode(value))
        return value

    # ─── Articles ───────────────────────────────────────────────────

    def list_articles(self, take: Any = None, skip: Any = None,
                      order_by: Any = None, where: Any = None) -> List[Article]:
        """
        List published (unless filtered otherwise) articles, fully hydrated.

        Args:
            take: Page size; absent or non-positive means no limit
            skip: Offset; absent or non-positive means no offset
            order_by: [{field: "asc"|"desc"}], only the first rule is used
            where: Article filter tree

        Raises:
            InvalidQueryInput: If any argument has the wrong shape
        """
        filters = ensure_published(decode_article_where(where))
        order = ARTICLE_ORDERING.resolve(parse_order_rules(order_by))
        take, skip = normalize_page(take, skip)

        key = build_cache_key(
            "articles", filters, normalize_order(order, ARTICLE_ORDERING.default), take, skip
        )
        return self._read_through(
            "articles",
            key,
            lambda: self.posts.list_articles(filters, order, take, skip),
            lambda items: [item.to_dict() for item in items],
            lambda raw: [Article.model_validate(item) for item in raw],
        )

    def count_articles(self, where: Any = None) -> int:
        filters = ensure_published(decode_article_where(where))
        key = build_cache_key("articlesCount", filters)
        return self._read_through(
            "articlesCount", key, lambda: self.posts.count_articles(filters), int, int
        )

    def article_by_key(self, where: Any) -> Optional[Article]:
        """
        Look up one published article by id or slug.

        Returns:
            The article, or None when nothing matches
        """
        unique = decode_article_unique(where)
        key = build_cache_key("article:unique", unique)
        return self._read_through(
            "article:unique",
            key,
            lambda: self.posts.article_by_key(unique),
            lambda item: item.to_dict(),
            Article.model_validate,
        )

    # ─── External items ─────────────────────────────────────────────

    def list_external_items(self, take: Any = None, skip: Any = None,
                            order_by: Any = None, where: Any = None) -> List[ExternalItem]:
        filters = ensure_published(decode_external_where(where))
        order = EXTERNAL_ORDERING.resolve(parse_order_rules(order_by))
        take, skip = normalize_page(take, skip)

        key = build_cache_key(
            "externals", filters, normalize_order(order, EXTERNAL_ORDERING.default), take, skip
        )
        return self._read_through(
            "externals",
            key,
            lambda: self.externals.list_external_items(filters, order, take, skip),
            lambda items: [item.to_dict() for item in items],
            lambda raw: [ExternalItem.model_validate(item) for item in raw],
        )

    def count_external_items(self, where: Any = None) -> int:
        filters = ensure_published(decode_external_where(where))
        key = build_cache_key("externalsCount", filters)
        return self._read_through(
            "externalsCount", key, lambda: self.externals.count_external_items(filters), int, int
        )

    # ─── Topics ─────────────────────────────────────────────────────

    def list_topics(self, take: Any = None, skip: Any = None,
                    order_by: Any = None, where: Any = None) -> List[Topic]:
        filters = ensure_published(decode_topic_where(where))
        order = TOPIC_ORDERING.resolve(parse_order_rules(order_by))
        take, skip = normalize_page(take, skip)

        key = build_cache_key(
            "topics", filters, normalize_order(order, TOPIC_ORDERING.default), take, skip
        )
        return self._read_through(
            "topics",
            key,
            lambda: self.topics.list_topics(filters, order, take, skip),
            lambda items: [item.to_dict() for item in items],
            lambda raw: [Topic.model_validate(item) for item in raw],
        )

    def count_topics(self, where: Any = None) -> int:
        filters = ensure_published(decode_topic_where(where))
        key = build_cache_key("topicsCount", filters)
        return self._read_through(
            "topicsCount", key, lambda: self.topics.count_topics(filters), int, int
        )

    def topic_by_key(self, where: Any) -> Optional[Topic]:
        """
        Look up one published topic by id, slug or name.

        Returns:
            The topic, or None when nothing matches
        """
        unique = decode_topic_unique(where)
        key = build_cache_key("topic:unique", unique)
        return self._read_through(
            "topic:unique",
            key,
            lambda: self.topics.topic_by_key(unique),
            lambda item: item.to_dict(),
            Topic.model_validate,
        )

"""
Filter and order translation for the content queries.
"""

from database.query.filters import (
    ArticleWhere,
    ArticleWhereUnique,
    BooleanFilter,
    DateTimeNullableFilter,
    ExternalWhere,
    IDFilter,
    InvalidQueryInput,
    StringFilter,
    TopicWhere,
    TopicWhereUnique,
    decode_article_unique,
    decode_article_where,
    decode_external_where,
    decode_topic_unique,
    decode_topic_where,
)
from database.query.ordering import (
    ARTICLE_ORDERING,
    EXTERNAL_ORDERING,
    TOPIC_ORDERING,
    EntityOrdering,
    OrderRule,
    parse_order_rules,
)
from database.query.pagination import normalize_page, paginate
from database.query.predicates import (
    PredicateBuilder,
    article_predicates,
    external_predicates,
    topic_predicates,
)
from database.query.published import PUBLISHED, ensure_published

__all__ = [
    "ArticleWhere",
    "ArticleWhereUnique",
    "BooleanFilter",
    "DateTimeNullableFilter",
    "ExternalWhere",
    "IDFilter",
    "InvalidQueryInput",
    "StringFilter",
    "TopicWhere",
    "TopicWhereUnique",
    "decode_article_unique",
    "decode_article_where",
    "decode_external_where",
    "decode_topic_unique",
    "decode_topic_where",
    "ARTICLE_ORDERING",
    "EXTERNAL_ORDERING",
    "TOPIC_ORDERING",
    "EntityOrdering",
    "OrderRule",
    "parse_order_rules",
    "normalize_page",
    "paginate",
    "PredicateBuilder",
    "article_predicates",
    "external_predicates",
    "topic_predicates",
    "PUBLISHED",
    "ensure_published",
]

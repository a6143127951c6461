"""
Order translation.

Order input arrives as a list of single-entry mappings such as
`[{"publishedDate": "desc"}]`. Only the first rule is honoured. An
unrecognized field or direction falls back to the entity's default
order, and every sort key places NULLs last.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from sqlalchemy.sql.elements import ColumnElement

from database.enums import SortDirection
from database.models import External, Post, Topic
from database.query.filters import InvalidQueryInput

SortKey = Tuple[str, SortDirection]


@dataclass(frozen=True)
class OrderRule:
    field: str
    direction: str


def parse_order_rules(raw: Any) -> List[OrderRule]:
    """
    Decode a raw orderBy argument.

    Args:
        raw: None, or a list of mappings of field name to direction

    Returns:
        Rules in input order (may be empty)

    Raises:
        InvalidQueryInput: If raw is not a list of mappings
    """
    if raw is None:
        return []
    if isinstance(raw, (str, bytes)) or not isinstance(raw, (list, tuple)):
        raise InvalidQueryInput(f"orderBy: expected a list, got {type(raw).__name__}")

    rules: List[OrderRule] = []
    for index, entry in enumerate(raw):
        if isinstance(entry, OrderRule):
            rules.append(entry)
            continue
        if not isinstance(entry, dict):
            raise InvalidQueryInput(
                f"orderBy[{index}]: expected an object, got {type(entry).__name__}"
            )
        for field, direction in entry.items():
            if not isinstance(field, str):
                raise InvalidQueryInput(f"orderBy[{index}]: field names must be strings")
            rules.append(OrderRule(field=field, direction=str(direction)))
    return rules


def _direction(raw: str):
    try:
        return SortDirection(raw.strip().lower())
    except ValueError:
        return None


class EntityOrdering:
    """
    Recognized sort fields and the default order of one entity.

    Usage:
        keys = ARTICLE_ORDERING.resolve(parse_order_rules(order_by))
        query = query.order_by(*ARTICLE_ORDERING.clauses(keys))
    """

    def __init__(self, columns: Dict[str, Any], default: Sequence[SortKey]):
        self.columns = columns
        self.default: Tuple[SortKey, ...] = tuple(default)

    def resolve(self, rules: Sequence[OrderRule]) -> Tuple[SortKey, ...]:
        """Sort keys for the first rule, or the default when it is unusable."""
        if not rules:
            return self.default
        first = rules[0]
        direction = _direction(first.direction)
        if first.field not in self.columns or direction is None:
            return self.default
        return ((first.field, direction),)

    def clauses(self, keys: Sequence[SortKey]) -> List[ColumnElement]:
        ordered = []
        for field, direction in keys:
            column = self.columns[field]
            key = column.asc() if direction is SortDirection.ASC else column.desc()
            ordered.append(key.nulls_last())
        return ordered

    @staticmethod
    def sorts_by(keys: Sequence[SortKey], field: str) -> bool:
        return any(name == field for name, _ in keys)


ARTICLE_ORDERING = EntityOrdering(
    columns={
        "publishedDate": Post.published_date,
        "updatedAt": Post.updated_at,
        "title": Post.title,
    },
    default=[("publishedDate", SortDirection.DESC)],
)

EXTERNAL_ORDERING = EntityOrdering(
    columns={
        "publishedDate": External.published_date,
        "updatedAt": External.updated_at,
    },
    default=[("publishedDate", SortDirection.DESC)],
)

TOPIC_ORDERING = EntityOrdering(
    columns={
        "sortOrder": Topic.sort_order,
        "createdAt": Topic.created_at,
        "updatedAt": Topic.updated_at,
        "name": Topic.name,
        "slug": Topic.slug,
    },
    default=[("sortOrder", SortDirection.ASC), ("createdAt", SortDirection.DESC)],
)

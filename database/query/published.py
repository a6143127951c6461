"""
Published-state defaulting.

List and count filters without an explicit `state` are restricted to
published rows.
"""

from typing import TypeVar

from database.enums import PublishState
from database.query.filters import ArticleWhere, ExternalWhere, StringFilter, TopicWhere

W = TypeVar("W", ArticleWhere, ExternalWhere, TopicWhere)

PUBLISHED = PublishState.PUBLISHED.value


def ensure_published(where: W) -> W:
    """Return `where` unchanged if it filters on state, else a copy with state = published."""
    if where.state is not None:
        return where
    return where.model_copy(update={"state": StringFilter(equals=PUBLISHED)})

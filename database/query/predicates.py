"""
Filter translation.

`PredicateBuilder` collects SQLAlchemy clause elements for one statement.
Each filter branch appends zero or more clauses; SQLAlchemy numbers the
bind parameters when the statement is compiled, so any subset of clauses
can be combined with AND.
"""

from typing import List, Optional

from sqlalchemy import and_, not_, select
from sqlalchemy.sql.elements import ColumnElement

from database.models import Category, External, Partner, Post, Section, Topic
from database.models.associations import category_posts, post_sections
from database.query.filters import (
    ArticleWhere,
    BooleanFilter,
    CategoryWhere,
    DateTimeNullableFilter,
    ExternalWhere,
    IDFilter,
    SectionWhere,
    StringFilter,
    TopicWhere,
)


class PredicateBuilder:
    """
    Ordered list of WHERE clauses for one statement.

    Usage:
        builder = PredicateBuilder()
        builder.string(Post.slug, where.slug)
        builder.boolean(Post.is_adult, where.is_adult)
        query = query.filter(*builder.clauses)
    """

    def __init__(self):
        self._clauses: List[ColumnElement] = []

    def __len__(self) -> int:
        return len(self._clauses)

    @property
    def clauses(self) -> List[ColumnElement]:
        return list(self._clauses)

    def add(self, clause: ColumnElement) -> "PredicateBuilder":
        self._clauses.append(clause)
        return self

    def combined(self) -> Optional[ColumnElement]:
        """All clauses joined with AND, or None when nothing was added."""
        if not self._clauses:
            return None
        if len(self._clauses) == 1:
            return self._clauses[0]
        return and_(*self._clauses)

    def string(self, column, f: Optional[StringFilter]) -> "PredicateBuilder":
        if f is None:
            return self
        if f.equals is not None:
            self.add(column == f.equals)
        if f.in_:
            self.add(column.in_(list(f.in_)))
        if f.not_ is not None:
            inner = PredicateBuilder().string(column, f.not_).combined()
            if inner is not None:
                self.add(not_(inner))
        return self

    def boolean(self, column, f: Optional[BooleanFilter]) -> "PredicateBuilder":
        if f is not None and f.equals is not None:
            self.add(column == f.equals)
        return self

    def nullable_datetime(self, column, f: Optional[DateTimeNullableFilter]) -> "PredicateBuilder":
        if f is None:
            return self
        if f.equals is not None:
            self.add(column == f.equals)
        elif f.is_set("equals"):
            self.add(column.is_(None))
        if f.not_ is not None:
            if f.not_.equals is None:
                self.add(column.isnot(None))
            else:
                self.add(column != f.not_.equals)
        return self

    def identifier(self, column, f: Optional[IDFilter]) -> "PredicateBuilder":
        if f is not None and f.equals is not None:
            self.add(column == int(f.equals))
        return self


# ─── Relation EXISTS subqueries ──────────────────────────────────────

def _section_exists(some: SectionWhere) -> ColumnElement:
    nested = PredicateBuilder()
    nested.string(Section.slug, some.slug)
    nested.string(Section.state, some.state)
    return (
        select(post_sections.c.A)
        .join(Section, Section.id == post_sections.c.B)
        .where(post_sections.c.A == Post.id, *nested.clauses)
        .exists()
    )


def _category_exists(some: CategoryWhere) -> ColumnElement:
    nested = PredicateBuilder()
    nested.string(Category.slug, some.slug)
    nested.string(Category.state, some.state)
    nested.boolean(Category.is_member_only, some.is_member_only)
    return (
        select(category_posts.c.B)
        .join(Category, Category.id == category_posts.c.A)
        .where(category_posts.c.B == Post.id, *nested.clauses)
        .exists()
    )


# ─── Entity translators ──────────────────────────────────────────────

def article_predicates(where: ArticleWhere) -> PredicateBuilder:
    """Translate an article filter into WHERE clauses over Post."""
    builder = PredicateBuilder()
    builder.string(Post.slug, where.slug)
    builder.string(Post.state, where.state)
    builder.boolean(Post.is_adult, where.is_adult)
    builder.boolean(Post.is_member, where.is_member)
    builder.boolean(Post.is_featured, where.is_featured)

    # A relation filter without `some` is unconstrained
    if where.sections is not None and where.sections.some is not None:
        builder.add(_section_exists(where.sections.some))
    if where.categories is not None and where.categories.some is not None:
        builder.add(_category_exists(where.categories.some))

    if where.topics is not None:
        builder.identifier(Post.topic_id, where.topics.id)
    return builder


def external_predicates(where: ExternalWhere) -> PredicateBuilder:
    """Translate an external-item filter into WHERE clauses over External."""
    builder = PredicateBuilder()
    builder.string(External.slug, where.slug)
    builder.string(External.state, where.state)
    builder.nullable_datetime(External.published_date, where.published_date)

    if where.partner is not None:
        partner = PredicateBuilder().string(Partner.slug, where.partner.slug)
        if len(partner):
            builder.add(
                External.partner_id.in_(select(Partner.id).where(*partner.clauses))
            )
    return builder


def topic_predicates(where: TopicWhere) -> PredicateBuilder:
    """Translate a topic filter into WHERE clauses over Topic."""
    builder = PredicateBuilder()
    builder.string(Topic.slug, where.slug)
    builder.string(Topic.name, where.name)
    builder.string(Topic.state, where.state)
    builder.boolean(Topic.is_featured, where.is_featured)
    builder.string(Topic.type, where.type)
    builder.string(Topic.style, where.style)
    return builder

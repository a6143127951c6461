"""
Fetch functions for every relation kind.

Each factory returns a callable `(session, ids) -> [(owner_id, value)]`
for use with BatchLoader. Join-table relations read both endpoints in
one statement; the owner column differs per table (see
database.models.associations).
"""

from typing import Any, Iterable, List, Tuple

from sqlalchemy import select, union
from sqlalchemy.orm import Session

from database.models import Post
from database.models.associations import post_relateds


def join_fetcher(owner_column, target_column, model):
    """Rows of `model` linked to each owner through a join table."""
    def fetch(session: Session, ids: List[int]) -> Iterable[Tuple[int, Any]]:
        rows = (
            session.query(owner_column, model)
            .join(model, model.id == target_column)
            .filter(owner_column.in_(ids))
            .order_by(owner_column, model.id)
            .all()
        )
        return [(owner, item) for owner, item in rows]
    return fetch


def pair_fetcher(owner_column, target_column):
    """Raw (owner, target id) pairs from a join table."""
    def fetch(session: Session, ids: List[int]) -> Iterable[Tuple[int, Any]]:
        rows = (
            session.query(owner_column, target_column)
            .filter(owner_column.in_(ids))
            .order_by(owner_column, target_column)
            .all()
        )
        return [(owner, target) for owner, target in rows]
    return fetch


def entity_fetcher(model):
    """Whole rows of `model` by primary key."""
    def fetch(session: Session, ids: List[int]) -> Iterable[Tuple[int, Any]]:
        rows = session.query(model).filter(model.id.in_(ids)).all()
        return [(row.id, row) for row in rows]
    return fetch


def projection_fetcher(id_column, *columns):
    """Selected columns by primary key; values are named rows."""
    def fetch(session: Session, ids: List[int]) -> Iterable[Tuple[int, Any]]:
        rows = session.query(id_column, *columns).filter(id_column.in_(ids)).all()
        return [(row[0], row) for row in rows]
    return fetch


# Narrow projection used for related articles and the singular slots
RELATED_POST_COLUMNS = (Post.slug, Post.title, Post.hero_image_id)


def fetch_related_posts(session: Session, ids: List[int]) -> Iterable[Tuple[int, Any]]:
    """
    Neighbors of each post across `_Post_relateds`, in both directions.

    An edge stored as (A, B) makes B a neighbor of A and A a neighbor
    of B; the UNION removes the duplicate when both (A, B) and (B, A)
    are stored.
    """
    forward = select(
        post_relateds.c.A.label("owner"), post_relateds.c.B.label("neighbor")
    ).where(post_relateds.c.A.in_(ids))
    backward = select(
        post_relateds.c.B.label("owner"), post_relateds.c.A.label("neighbor")
    ).where(post_relateds.c.B.in_(ids))
    edges = union(forward, backward).subquery("edges")

    rows = (
        session.query(edges.c.owner, Post.id, *RELATED_POST_COLUMNS)
        .join(Post, Post.id == edges.c.neighbor)
        .order_by(edges.c.owner, Post.id)
        .all()
    )
    return [(row[0], row) for row in rows]

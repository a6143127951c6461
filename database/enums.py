"""
Database enums and types.

This module contains the enum types shared by the query layer.
"""

from enum import Enum as PyEnum


class PublishState(PyEnum):
    """
    Editorial state of a Post, External or Topic row.

    Only PUBLISHED rows are visible unless the caller filters on state.
    """
    PUBLISHED = "published"
    DRAFT = "draft"
    SCHEDULED = "scheduled"
    ARCHIVED = "archived"
    INVISIBLE = "invisible"


class ContactRole(PyEnum):
    """
    Contributor roles on a Post.

    Each value names the join table suffix (`_Post_<role>`) and the
    field on the hydrated article.
    """
    WRITERS = "writers"
    PHOTOGRAPHERS = "photographers"
    CAMERA_MAN = "camera_man"
    DESIGNERS = "designers"
    ENGINEERS = "engineers"
    VOCALS = "vocals"


class SortDirection(PyEnum):
    ASC = "asc"
    DESC = "desc"

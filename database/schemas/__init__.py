"""
Hydrated content schemas returned by the query layer.
"""

from database.schemas.content import (
    Article,
    Category,
    Contact,
    ExternalItem,
    ImageFile,
    Partner,
    Photo,
    Resized,
    Section,
    Tag,
    Topic,
    Video,
)

__all__ = [
    "Article",
    "Category",
    "Contact",
    "ExternalItem",
    "ImageFile",
    "Partner",
    "Photo",
    "Resized",
    "Section",
    "Tag",
    "Topic",
    "Video",
]

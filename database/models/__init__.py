"""
Database models package.

This module imports and exposes all database models.
Importing this package ensures all models are registered with the Base metadata.
"""

from database.base import Base
from database.models.media import Image, Video
from database.models.taxonomy import Section, Category, Tag, Contact
from database.models.external import External, Partner
from database.models.topic import Topic
from database.models.post import Post
from database.models import associations

__all__ = [
    'Base',
    'Post',
    'External',
    'Partner',
    'Topic',
    'Section',
    'Category',
    'Tag',
    'Contact',
    'Image',
    'Video',
    'associations',
]

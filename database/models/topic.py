"""
Topic model - a curated collection of articles.
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey

from database.base import Base
from database.models.types import JSONDocument


class Topic(Base):
    """
    Topic row.

    Attributes:
        sort_order: Manual ordering key (nullable, nulls sort last)
        hero_image_id / og_image_id: Image foreign keys
    """

    __tablename__ = 'Topic'

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=True)
    slug = Column(String(255), nullable=True, unique=True)
    sort_order = Column('sortOrder', Integer, nullable=True)
    state = Column(String(50), nullable=True, index=True)
    brief = Column(JSONDocument, nullable=True)
    hero_image_id = Column('heroImage', Integer, ForeignKey('Image.id'), nullable=True)
    hero_url = Column('heroUrl', Text, nullable=True)
    leading = Column(String(50), nullable=True)
    og_title = Column('og_title', Text, nullable=True)
    og_description = Column('og_description', Text, nullable=True)
    og_image_id = Column('og_image', Integer, ForeignKey('Image.id'), nullable=True)
    is_featured = Column('isFeatured', Boolean, nullable=True)
    title_style = Column('title_style', String(50), nullable=True)
    type = Column(String(50), nullable=True)
    style = Column(Text, nullable=True)
    javascript = Column(Text, nullable=True)
    dfp = Column(Text, nullable=True)
    mobile_dfp = Column('mobile_dfp', Text, nullable=True)
    created_at = Column('createdAt', DateTime(timezone=True), nullable=True)
    updated_at = Column('updatedAt', DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<Topic(id={self.id}, slug='{self.slug}', state='{self.state}')>"

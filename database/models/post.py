"""
Post model - the article table.

Foreign-key columns (hero media, topic, singular related posts) are read
as plain integers; the batch loaders resolve them.
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey

from database.base import Base
from database.models.types import JSONDocument


class Post(Base):
    """
    Article row.

    Attributes:
        id: Primary key
        slug: Unique URL slug
        state: Editorial state (see PublishState)
        published_date: Publish timestamp (nullable)
        hero_image_id / og_image_id: Image foreign keys
        hero_video_id: Video foreign key
        topic_id: Topic foreign key (column "topics")
        relateds_one_id / relateds_two_id: singular related Post slots
        brief / content: Draft.js style JSON documents
    """

    __tablename__ = 'Post'

    id = Column(Integer, primary_key=True)
    slug = Column(String(255), nullable=True, unique=True)
    title = Column(Text, nullable=True)
    subtitle = Column(Text, nullable=True)
    state = Column(String(50), nullable=True, index=True)
    style = Column(String(50), nullable=True)
    is_member = Column('isMember', Boolean, nullable=True)
    is_adult = Column('isAdult', Boolean, nullable=True)
    published_date = Column('publishedDate', DateTime(timezone=True), nullable=True, index=True)
    updated_at = Column('updatedAt', DateTime(timezone=True), nullable=True)
    hero_caption = Column('heroCaption', Text, nullable=True)
    extend_byline = Column('extend_byline', Text, nullable=True)
    hero_image_id = Column('heroImage', Integer, ForeignKey('Image.id'), nullable=True)
    hero_video_id = Column('heroVideo', Integer, ForeignKey('Video.id'), nullable=True)
    brief = Column(JSONDocument, nullable=True)
    content = Column(JSONDocument, nullable=True)
    redirect = Column(Text, nullable=True)
    og_title = Column('og_title', Text, nullable=True)
    og_description = Column('og_description', Text, nullable=True)
    hidden_advertised = Column('hiddenAdvertised', Boolean, nullable=True)
    is_advertised = Column('isAdvertised', Boolean, nullable=True)
    is_featured = Column('isFeatured', Boolean, nullable=True)
    topic_id = Column('topics', Integer, ForeignKey('Topic.id'), nullable=True)
    og_image_id = Column('og_image', Integer, ForeignKey('Image.id'), nullable=True)
    relateds_one_id = Column('relatedsOne', Integer, ForeignKey('Post.id'), nullable=True)
    relateds_two_id = Column('relatedsTwo', Integer, ForeignKey('Post.id'), nullable=True)

    def __repr__(self):
        """String representation of Post."""
        return f"<Post(id={self.id}, slug='{self.slug}', state='{self.state}')>"

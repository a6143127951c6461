"""
External and Partner models - syndicated items and their owners.
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey

from database.base import Base


class Partner(Base):
    """
    Syndication partner.

    Attributes:
        show_on_index / show_thumb / show_brief: display flags
            (show_thumb defaults to true and show_brief to false when unset)
    """

    __tablename__ = 'Partner'

    id = Column(Integer, primary_key=True)
    slug = Column(String(255), nullable=True, unique=True)
    name = Column(Text, nullable=True)
    show_on_index = Column('showOnIndex', Boolean, nullable=True)
    show_thumb = Column('showThumb', Boolean, nullable=True)
    show_brief = Column('showBrief', Boolean, nullable=True)

    def __repr__(self):
        return f"<Partner(id={self.id}, slug='{self.slug}')>"


class External(Base):
    """Syndicated item owned by a single Partner."""

    __tablename__ = 'External'

    id = Column(Integer, primary_key=True)
    slug = Column(String(255), nullable=True, unique=True)
    title = Column(Text, nullable=True)
    state = Column(String(50), nullable=True, index=True)
    published_date = Column('publishedDate', DateTime(timezone=True), nullable=True, index=True)
    extend_byline = Column('extend_byline', Text, nullable=True)
    thumb = Column(Text, nullable=True)
    thumb_caption = Column('thumbCaption', Text, nullable=True)
    brief = Column(Text, nullable=True)
    content = Column(Text, nullable=True)
    partner_id = Column('partner', Integer, ForeignKey('Partner.id'), nullable=True)
    updated_at = Column('updatedAt', DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<External(id={self.id}, slug='{self.slug}', state='{self.state}')>"

"""
Taxonomy models: Section, Category, Tag and Contact.
"""

from sqlalchemy import Column, Integer, String, Text, Boolean

from database.base import Base


class Section(Base):
    __tablename__ = 'Section'

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=True)
    slug = Column(String(255), nullable=True, unique=True)
    state = Column(String(50), nullable=True)

    def __repr__(self):
        return f"<Section(id={self.id}, slug='{self.slug}')>"


class Category(Base):
    __tablename__ = 'Category'

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=True)
    slug = Column(String(255), nullable=True, unique=True)
    state = Column(String(50), nullable=True)
    is_member_only = Column('isMemberOnly', Boolean, nullable=True)

    def __repr__(self):
        return f"<Category(id={self.id}, slug='{self.slug}')>"


class Tag(Base):
    __tablename__ = 'Tag'

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=True)
    slug = Column(String(255), nullable=True)

    def __repr__(self):
        return f"<Tag(id={self.id}, name='{self.name}')>"


class Contact(Base):
    """A contributor (writer, photographer, ...) credited on posts."""

    __tablename__ = 'Contact'

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Contact(id={self.id}, name='{self.name}')>"

"""
Media models: Image and Video.

Resized image variants are not stored; see database.media for the
URL builder.
"""

from sqlalchemy import Column, Integer, String, Text, ForeignKey

from database.base import Base


class Image(Base):
    __tablename__ = 'Image'

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=True)
    file_id = Column('imageFile_id', Text, nullable=True)
    file_extension = Column('imageFile_extension', String(20), nullable=True)
    width = Column('imageFile_width', Integer, nullable=True)
    height = Column('imageFile_height', Integer, nullable=True)
    topic_keywords = Column('topicKeywords', Text, nullable=True)

    def __repr__(self):
        return f"<Image(id={self.id}, file_id='{self.file_id}')>"


class Video(Base):
    __tablename__ = 'Video'

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=True)
    url_original = Column('urlOriginal', Text, nullable=True)
    hero_image_id = Column('heroImage', Integer, ForeignKey('Image.id'), nullable=True)

    def __repr__(self):
        return f"<Video(id={self.id})>"

"""
Primary query executors for the content entities.
"""

from database.services.external_service import ExternalService
from database.services.post_service import PostService
from database.services.topic_service import TopicService

__all__ = [
    "ExternalService",
    "PostService",
    "TopicService",
]

"""
Services package - public query surface.
"""

from src.services.content_query import ContentQueryService

__all__ = [
    'ContentQueryService',
]

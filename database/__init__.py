"""
Database package.

This package contains the read-only content query core:
- models: SQLAlchemy ORM models of the CMS schema
- database: Connection pool and read-only sessions
- query: Filter, order and pagination translation
- loaders: Batched relation hydration
- services: Primary query executors per entity
"""

# Import and expose key components
from database.base import Base
from database.database import DatabaseManager
from database.deadline import Deadline, QueryDeadlineExceeded, QueryTimeouts
from database.enums import ContactRole, PublishState, SortDirection
from database.query import InvalidQueryInput
from database.services import ExternalService, PostService, TopicService

__all__ = [
    'Base',
    'DatabaseManager',
    'Deadline',
    'QueryDeadlineExceeded',
    'QueryTimeouts',
    'ContactRole',
    'PublishState',
    'SortDirection',
    'InvalidQueryInput',
    'ExternalService',
    'PostService',
    'TopicService',
]

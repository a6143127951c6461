"""
Batched relation loading for the content queries.
"""

from database.decoding import PrimaryRow
from database.loaders.batch import BatchLoader, LoaderSet
from database.loaders.hydration import ExternalHydrator, PostHydrator, TopicHydrator

__all__ = [
    "BatchLoader",
    "LoaderSet",
    "PrimaryRow",
    "ExternalHydrator",
    "PostHydrator",
    "TopicHydrator",
]

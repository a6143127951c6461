"""Column types shared by the content models."""

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB

# jsonb on PostgreSQL, generic JSON elsewhere (tests run on SQLite)
JSONDocument = JSON().with_variant(JSONB(), "postgresql")

"""
Application package for the Content Query Service.

Wraps the query core in `database/` with:
- logging (src.logging)
- the read-through Redis cache (src.cache)
- the explicit QueryContext (src.context)
- the public query façade (src.services)
- the operator entry point (src.main)
"""

__version__ = "0.1.0"

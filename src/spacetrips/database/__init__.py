"""
Database connection and store management
"""

from .connection import get_async_session, init_database, reset_database
from .store import FindOrCreateResult, SqlTable, Store

__all__ = [
    "init_database",
    "reset_database",
    "get_async_session",
    "FindOrCreateResult",
    "SqlTable",
    "Store",
]

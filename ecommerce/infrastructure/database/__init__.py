"""Database configuration and lifecycle."""
from .config import (
    DatabaseSettings,
    close_database,
    create_engine,
    get_engine,
    get_session_factory,
    init_database,
)

__all__ = [
    "DatabaseSettings",
    "close_database",
    "create_engine",
    "get_engine",
    "get_session_factory",
    "init_database",
]

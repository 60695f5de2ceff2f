"""Database module for gemimiw."""

from .models import Base, Session, Chat, Response, Context
from .session import engine, async_session, get_session, DATABASE_URL
from .gateway import Database, Table

__all__ = [
    "Base",
    "Session",
    "Chat",
    "Response",
    "Context",
    "engine",
    "async_session",
    "get_session",
    "DATABASE_URL",
    "Database",
    "Table",
]

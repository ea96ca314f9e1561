"""Database package."""

from cvchat.db.base import Base, get_db, init_db
from cvchat.db.tables import ChatMessage, CVProfile

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "CVProfile",
    "ChatMessage",
]

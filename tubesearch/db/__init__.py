"""Database module for TubeSearch."""

from tubesearch.db.models import Base, Comment
from tubesearch.db.session import dispose_engine, get_engine, init_db

__all__ = [
    "Base",
    "Comment",
    "dispose_engine",
    "get_engine",
    "init_db",
]

"""Core app configuration, database and access control."""

from app.core.config import get_settings, settings
from app.core.database import get_db, get_session_factory, transaction

__all__ = ["get_settings", "settings", "get_db", "get_session_factory", "transaction"]

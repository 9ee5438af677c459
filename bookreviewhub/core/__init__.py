"""Core app configuration and database."""

from bookreviewhub.core.config import get_settings, settings
from bookreviewhub.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]

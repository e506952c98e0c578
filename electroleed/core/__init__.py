"""Core app configuration and database."""

from electroleed.core.config import get_settings, settings
from electroleed.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]

"""Core app configuration, database and security primitives."""

from techscope.core.config import get_settings, settings
from techscope.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]

"""SQLAlchemy ORM models."""

from techscope.models.base import Base
from techscope.models.user import User

__all__ = ["Base", "User"]

"""ORM model for user accounts."""

from sqlalchemy import Boolean, Column, Integer, String

from techscope.models.base import Base


class User(Base):
    """
    Registered account. Email is unique; password_hash holds a bcrypt digest.

    Records are created by registration (is_admin=False) or the create_user script.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(1024), nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False)

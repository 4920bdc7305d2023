"""Declarative base for techscope ORM models and alembic autogenerate."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Fixed index/constraint names so autogenerated revisions match the hand-written ones.
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)

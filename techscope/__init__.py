"""Tech Scope accounts API: registration, login and email uniqueness checks."""

__version__ = "1.0.0"

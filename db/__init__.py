"""Database package exposing the declarative base and models."""

from db.models import Base, QueryLog

__all__ = ["Base", "QueryLog"]

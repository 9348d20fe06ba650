"""Persistence: database engine, ORM models, repositories."""

from docportal.infrastructure.persistence.database import Base, Database

__all__ = ["Base", "Database"]

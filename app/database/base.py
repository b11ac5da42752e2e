"""Declarative base for all ORM models."""
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for ESG platform ORM models."""
    pass


def utcnow() -> datetime:
    """Timestamp default for created_at/updated_at columns."""
    return datetime.now(timezone.utc)

"""Issuer ORM model."""
from sqlalchemy import String, Text, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import List, Optional
from datetime import datetime

from app.database.base import Base, utcnow


class Issuer(Base):
    """Issuer table (groups the companies that answer questionnaires)."""
    __tablename__ = "issuers"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Fields
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        onupdate=utcnow
    )

    # Relationships
    companies: Mapped[List["Company"]] = relationship(
        "Company",
        back_populates="issuer"
    )

    def __repr__(self):
        return f"<Issuer(id={self.id}, name={self.name})>"

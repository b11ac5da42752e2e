"""Company ORM model."""
from sqlalchemy import String, Text, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import List, Optional
from datetime import datetime

from app.database.base import Base, utcnow


class Company(Base):
    """Company information table."""
    __tablename__ = "companies"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Fields
    name: Mapped[str] = mapped_column(String(255))
    issuer_id: Mapped[int] = mapped_column(ForeignKey("issuers.id"), index=True)
    logo_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        onupdate=utcnow
    )

    # Relationships
    issuer: Mapped["Issuer"] = relationship(
        "Issuer",
        back_populates="companies"
    )
    responses: Mapped[List["Response"]] = relationship(
        "Response",
        back_populates="company"
    )
    reports: Mapped[List["Report"]] = relationship(
        "Report",
        back_populates="company"
    )

    def __repr__(self):
        return f"<Company(id={self.id}, name={self.name}, issuer_id={self.issuer_id})>"

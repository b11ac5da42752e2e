"""Questionnaire ORM model."""
from sqlalchemy import String, Text, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import List, Optional
from datetime import datetime

from app.database.base import Base, utcnow


class Questionnaire(Base):
    """ESG questionnaire table."""
    __tablename__ = "questionnaires"

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
    questions: Mapped[List["Question"]] = relationship(
        "Question",
        back_populates="questionnaire",
        order_by="Question.order"
    )
    scoring_configs: Mapped[List["ScoringConfig"]] = relationship(
        "ScoringConfig",
        back_populates="questionnaire",
        order_by="ScoringConfig.section"
    )
    reports: Mapped[List["Report"]] = relationship(
        "Report",
        back_populates="questionnaire"
    )

    def __repr__(self):
        return f"<Questionnaire(id={self.id}, name={self.name})>"

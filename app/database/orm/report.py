"""Report ORM model."""
from sqlalchemy import Float, DateTime, ForeignKey, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import Optional
from datetime import datetime

from app.database.base import Base, utcnow


class Report(Base):
    """Immutable scoring snapshot for one company/questionnaire pair."""
    __tablename__ = "reports"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Fields
    company_id: Mapped[int] = mapped_column(ForeignKey("companies.id"), index=True)
    questionnaire_id: Mapped[int] = mapped_column(
        ForeignKey("questionnaires.id"),
        index=True
    )
    overall_score: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    section_scores: Mapped[dict] = mapped_column(JSON, default=dict)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    # Relationships
    company: Mapped["Company"] = relationship(
        "Company",
        back_populates="reports"
    )
    questionnaire: Mapped["Questionnaire"] = relationship(
        "Questionnaire",
        back_populates="reports"
    )

    # Rows are written once by the report pipeline and never updated

    def __repr__(self):
        return f"<Report(id={self.id}, company_id={self.company_id}, overall_score={self.overall_score})>"

"""Response ORM model."""
from sqlalchemy import String, Text, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import Optional
from datetime import datetime

from app.database.base import Base, utcnow


class Response(Base):
    """A company's answer to one question (one row per company/question)."""
    __tablename__ = "responses"
    __table_args__ = (
        UniqueConstraint("company_id", "question_id", name="uq_responses_company_question"),
    )

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Fields
    company_id: Mapped[int] = mapped_column(ForeignKey("companies.id"), index=True)
    question_id: Mapped[int] = mapped_column(ForeignKey("questions.id"), index=True)
    value: Mapped[str] = mapped_column(Text)
    score: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        onupdate=utcnow
    )

    # Relationships
    company: Mapped["Company"] = relationship(
        "Company",
        back_populates="responses"
    )
    question: Mapped["Question"] = relationship(
        "Question",
        back_populates="responses"
    )

    def __repr__(self):
        return f"<Response(id={self.id}, company_id={self.company_id}, question_id={self.question_id}, score={self.score})>"

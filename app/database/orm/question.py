"""Question and QuestionOption ORM models."""
from sqlalchemy import String, Text, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import List, Optional
from datetime import datetime

from app.database.base import Base, utcnow


class Question(Base):
    """Questionnaire question, tagged with its ESG section."""
    __tablename__ = "questions"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Fields
    questionnaire_id: Mapped[int] = mapped_column(
        ForeignKey("questionnaires.id"),
        index=True
    )
    text: Mapped[str] = mapped_column(Text)
    type: Mapped[str] = mapped_column(String(20))
    section: Mapped[str] = mapped_column(String(20), index=True)
    order: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        onupdate=utcnow
    )

    # Relationships
    questionnaire: Mapped["Questionnaire"] = relationship(
        "Questionnaire",
        back_populates="questions"
    )
    options: Mapped[List["QuestionOption"]] = relationship(
        "QuestionOption",
        back_populates="question",
        cascade="all, delete-orphan",
        order_by="QuestionOption.id"
    )
    responses: Mapped[List["Response"]] = relationship(
        "Response",
        back_populates="question",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Question(id={self.id}, section={self.section}, type={self.type})>"


class QuestionOption(Base):
    """Selectable answer for a question, carrying its score."""
    __tablename__ = "question_options"
    __table_args__ = (
        UniqueConstraint("question_id", "value", name="uq_question_options_question_value"),
    )

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Fields
    question_id: Mapped[int] = mapped_column(ForeignKey("questions.id"), index=True)
    text: Mapped[str] = mapped_column(String(255))
    value: Mapped[str] = mapped_column(String(255))
    score: Mapped[int] = mapped_column(Integer)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        onupdate=utcnow
    )

    # Relationships
    question: Mapped["Question"] = relationship(
        "Question",
        back_populates="options"
    )

    def __repr__(self):
        return f"<QuestionOption(id={self.id}, value={self.value}, score={self.score})>"

"""ScoringConfig ORM model."""
from sqlalchemy import String, Float, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime

from app.database.base import Base, utcnow


class ScoringConfig(Base):
    """Per-section aggregation rule for a questionnaire."""
    __tablename__ = "scoring_configs"
    __table_args__ = (
        UniqueConstraint("questionnaire_id", "section", name="uq_scoring_configs_questionnaire_section"),
    )

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Fields
    questionnaire_id: Mapped[int] = mapped_column(
        ForeignKey("questionnaires.id"),
        index=True
    )
    section: Mapped[str] = mapped_column(String(20))
    aggregation_method: Mapped[str] = mapped_column(String(20))
    weight: Mapped[float] = mapped_column(Float, default=1.0)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        onupdate=utcnow
    )

    # Relationships
    questionnaire: Mapped["Questionnaire"] = relationship(
        "Questionnaire",
        back_populates="scoring_configs"
    )

    def __repr__(self):
        return (
            f"<ScoringConfig(id={self.id}, section={self.section}, "
            f"method={self.aggregation_method}, weight={self.weight})>"
        )

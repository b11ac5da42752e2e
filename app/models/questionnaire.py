"""Questionnaire Pydantic models."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict
from .question import QuestionResponse
from .scoring_config import ScoringConfigResponse
from .report import ReportSummary


class QuestionnaireBase(BaseModel):
    """Base questionnaire model."""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class QuestionnaireCreate(QuestionnaireBase):
    """Model for creating a questionnaire."""
    pass


class QuestionnaireUpdate(BaseModel):
    """Model for updating a questionnaire (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None


class QuestionnaireResponse(QuestionnaireBase):
    """Questionnaire response model with ID and timestamps."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class QuestionnaireSummary(QuestionnaireResponse):
    """List entry with question and report counts."""
    question_count: int = 0
    report_count: int = 0


class QuestionnaireDetail(QuestionnaireResponse):
    """Questionnaire with its questions, scoring configs and reports."""
    questions: List[QuestionResponse] = Field(default_factory=list)
    scoring_configs: List[ScoringConfigResponse] = Field(default_factory=list)
    reports: List[ReportSummary] = Field(default_factory=list)


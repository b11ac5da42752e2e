"""Report Pydantic models."""
from datetime import datetime
from typing import Dict, Optional
from pydantic import BaseModel, Field, ConfigDict
from .company import CompanyRef


class ReportGenerateRequest(BaseModel):
    """Request to score a company against a questionnaire."""
    company_id: int = Field(..., ge=1)
    questionnaire_id: int = Field(..., ge=1)


class ReportSummary(BaseModel):
    """Report scores without embedded references."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    questionnaire_id: int
    overall_score: Optional[float] = None
    section_scores: Dict[str, float] = Field(default_factory=dict)
    created_at: datetime


class QuestionnaireRef(BaseModel):
    """Compact questionnaire reference embedded in report payloads."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ReportResponse(ReportSummary):
    """Report with company and questionnaire references."""
    company: Optional[CompanyRef] = None
    questionnaire: Optional[QuestionnaireRef] = None

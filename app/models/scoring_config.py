"""Scoring configuration Pydantic models."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict
from .enums import AggregationMethod, Section


class ScoringConfigBase(BaseModel):
    """Aggregation rule for one section of a questionnaire."""
    questionnaire_id: int = Field(..., ge=1)
    section: Section
    aggregation_method: AggregationMethod
    weight: float = Field(
        default=1.0,
        ge=0,
        description="Section weight (used by weighted_average)"
    )


class ScoringConfigCreate(ScoringConfigBase):
    """Model for creating a scoring config."""
    pass


class ScoringConfigUpdate(BaseModel):
    """Model for updating a scoring config (all fields optional)."""
    questionnaire_id: Optional[int] = Field(None, ge=1)
    section: Optional[Section] = None
    aggregation_method: Optional[AggregationMethod] = None
    weight: Optional[float] = Field(None, ge=0)


class ScoringConfigResponse(ScoringConfigBase):
    """Scoring config response model."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime

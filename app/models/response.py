"""Response Pydantic models."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict
from .company import CompanyRef
from .question import QuestionRef


class ResponseBase(BaseModel):
    """A company's answer to a question."""
    company_id: int = Field(..., ge=1)
    question_id: int = Field(..., ge=1)
    value: str = Field(..., min_length=1, description="Option value, or free text for text_input")


class ResponseCreate(ResponseBase):
    """Upsert payload; the score is resolved server-side."""
    pass


class ResponseUpdate(BaseModel):
    """Replace the value of an existing response."""
    value: str = Field(..., min_length=1)


class ResponseRead(ResponseBase):
    """Response with its resolved score and references."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    score: Optional[int] = None
    company: Optional[CompanyRef] = None
    question: Optional[QuestionRef] = None
    created_at: datetime
    updated_at: datetime


class ResponseBulkCreate(BaseModel):
    """Batch of responses submitted together."""
    responses: List[ResponseCreate] = Field(..., min_length=1)


class BulkItemError(BaseModel):
    """Failure entry for one item of a bulk upsert."""
    index: int
    company_id: int
    question_id: int
    error: str


class BulkUpsertResult(BaseModel):
    """Per-item outcome of a bulk upsert."""
    success_count: int = 0
    failure_count: int = 0
    results: List[ResponseRead] = Field(default_factory=list)
    errors: List[BulkItemError] = Field(default_factory=list)

"""Question and QuestionOption Pydantic models."""
from datetime import datetime
from typing import Iterable, List, Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator
from .enums import QuestionType, Section


class QuestionOptionBase(BaseModel):
    """Selectable answer and the score it carries."""
    text: str = Field(..., min_length=1, max_length=255)
    value: str = Field(..., min_length=1, max_length=255)
    score: int


class QuestionOptionCreate(QuestionOptionBase):
    """Model for creating an option (always nested in a question)."""
    pass


class QuestionOptionResponse(QuestionOptionBase):
    """Option response model."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    question_id: int
    created_at: datetime
    updated_at: datetime


def check_options(
    question_type: QuestionType,
    options: Optional[Iterable[QuestionOptionBase]],
) -> Optional[str]:
    """Validate a question's options against its type.

    Returns None when valid, otherwise the error message.
    """
    options = list(options) if options is not None else None
    if question_type is QuestionType.TEXT_INPUT:
        if options:
            return "Options should not be provided for text_input question type."
        return None
    if not options or len(options) < 2:
        return "Options are required for multiple_choice, yes_no, and scale question types."
    values = [opt.value for opt in options]
    if len(set(values)) != len(values):
        return "Option values must be unique within a question."
    return None


class QuestionBase(BaseModel):
    """Base question model."""
    questionnaire_id: int = Field(..., ge=1)
    text: str = Field(..., min_length=1)
    type: QuestionType
    section: Section
    order: Optional[int] = None


class QuestionCreate(QuestionBase):
    """Model for creating a question with its options."""
    options: Optional[List[QuestionOptionCreate]] = None

    @model_validator(mode="after")
    def validate_options(self) -> "QuestionCreate":
        """Non-text questions need ≥2 distinct options; text_input takes none."""
        error = check_options(self.type, self.options)
        if error:
            raise ValueError(error)
        return self


class QuestionUpdate(BaseModel):
    """Model for updating a question; options are replaced when supplied."""
    questionnaire_id: Optional[int] = Field(None, ge=1)
    text: Optional[str] = Field(None, min_length=1)
    type: Optional[QuestionType] = None
    section: Optional[Section] = None
    order: Optional[int] = None
    options: Optional[List[QuestionOptionCreate]] = None


class QuestionResponse(QuestionBase):
    """Question response model including options."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    options: List[QuestionOptionResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class QuestionRef(BaseModel):
    """Compact question reference embedded in response payloads."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str
    type: QuestionType
    section: Section

"""Question CRUD endpoints (options are managed through their question)."""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response as HTTPResponse, status
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload
from app.database.connection import get_db
from app.database.orm import Question, QuestionOption, Questionnaire
from app.models import (
    QuestionCreate,
    QuestionUpdate,
    QuestionResponse,
    QuestionType,
    check_options,
)
from app.routers.deps import apply_update, bad_request, get_or_404

router = APIRouter(prefix="/api/v1/questions", tags=["Questions"])


def _check_questionnaire(db: Session, questionnaire_id: int) -> None:
    if db.get(Questionnaire, questionnaire_id) is None:
        raise bad_request("Associated questionnaire not found")


def _option_rows(options) -> List[QuestionOption]:
    return [QuestionOption(**opt.model_dump()) for opt in options or []]


@router.get("", response_model=List[QuestionResponse], summary="List Questions")
def list_questions(
    questionnaire_id: Optional[int] = Query(None, description="Filter by questionnaire"),
    db: Session = Depends(get_db),
):
    """List questions ordered by their ``order`` field."""
    stmt = select(Question).options(selectinload(Question.options))
    if questionnaire_id is not None:
        stmt = stmt.where(Question.questionnaire_id == questionnaire_id)
    stmt = stmt.order_by(Question.order, Question.id)
    return list(db.scalars(stmt))


@router.get("/{question_id}", response_model=QuestionResponse, summary="Get Question")
def get_question(question_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Question, question_id, "Question")


@router.post(
    "",
    response_model=QuestionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Question"
)
def create_question(payload: QuestionCreate, db: Session = Depends(get_db)):
    """Create a question together with its options."""
    _check_questionnaire(db, payload.questionnaire_id)
    question = Question(
        **payload.model_dump(mode="json", exclude={"options"}),
        options=_option_rows(payload.options),
    )
    db.add(question)
    db.commit()
    db.refresh(question)
    return question


@router.put("/{question_id}", response_model=QuestionResponse, summary="Update Question")
def update_question(question_id: int, update: QuestionUpdate, db: Session = Depends(get_db)):
    """Update a question; supplied options replace the existing set."""
    question = get_or_404(db, Question, question_id, "Question")
    if update.questionnaire_id is not None:
        _check_questionnaire(db, update.questionnaire_id)

    new_type = update.type or QuestionType(question.type)
    replace_options = "options" in update.model_fields_set
    options = update.options if replace_options else question.options
    error = check_options(new_type, options)
    if error:
        raise bad_request(error)

    apply_update(
        question,
        update.model_dump(mode="json", exclude_unset=True, exclude={"options"}),
        nullable=("order",),
    )
    if replace_options:
        # Old rows must be gone before new values hit the unique constraint
        question.options.clear()
        db.flush()
        question.options.extend(_option_rows(update.options))

    db.commit()
    db.refresh(question)
    return question


@router.delete(
    "/{question_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=HTTPResponse,
    summary="Delete Question"
)
def delete_question(question_id: int, db: Session = Depends(get_db)):
    """Delete a question along with its options and responses."""
    question = get_or_404(db, Question, question_id, "Question")
    db.delete(question)
    db.commit()

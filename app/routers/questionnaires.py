"""Questionnaire CRUD endpoints."""
from typing import List
from fastapi import APIRouter, Depends, Response as HTTPResponse, status
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from app.database.connection import get_db
from app.database.orm import Question, Questionnaire, Report
from app.models import (
    QuestionnaireCreate,
    QuestionnaireUpdate,
    QuestionnaireResponse,
    QuestionnaireSummary,
    QuestionnaireDetail,
)
from app.routers.deps import apply_update, bad_request, get_or_404

router = APIRouter(prefix="/api/v1/questionnaires", tags=["Questionnaires"])


def _count(model, fk):
    return (
        select(func.count(model.id))
        .where(fk == Questionnaire.id)
        .correlate(Questionnaire)
        .scalar_subquery()
    )


@router.get("", response_model=List[QuestionnaireSummary], summary="List Questionnaires")
def list_questionnaires(db: Session = Depends(get_db)):
    """List questionnaires (newest first) with question and report counts."""
    stmt = (
        select(
            Questionnaire,
            _count(Question, Question.questionnaire_id).label("question_count"),
            _count(Report, Report.questionnaire_id).label("report_count"),
        )
        .order_by(Questionnaire.created_at.desc(), Questionnaire.id.desc())
    )
    return [
        QuestionnaireSummary.model_validate(q).model_copy(
            update={"question_count": question_count, "report_count": report_count}
        )
        for q, question_count, report_count in db.execute(stmt)
    ]


@router.get(
    "/{questionnaire_id}",
    response_model=QuestionnaireDetail,
    summary="Get Questionnaire"
)
def get_questionnaire(questionnaire_id: int, db: Session = Depends(get_db)):
    """Get a questionnaire with its questions (by order), scoring configs and reports."""
    return get_or_404(db, Questionnaire, questionnaire_id, "Questionnaire")


@router.post(
    "",
    response_model=QuestionnaireResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Questionnaire"
)
def create_questionnaire(payload: QuestionnaireCreate, db: Session = Depends(get_db)):
    questionnaire = Questionnaire(**payload.model_dump())
    db.add(questionnaire)
    db.commit()
    db.refresh(questionnaire)
    return questionnaire


@router.put(
    "/{questionnaire_id}",
    response_model=QuestionnaireResponse,
    summary="Update Questionnaire"
)
def update_questionnaire(
    questionnaire_id: int,
    update: QuestionnaireUpdate,
    db: Session = Depends(get_db),
):
    questionnaire = get_or_404(db, Questionnaire, questionnaire_id, "Questionnaire")
    apply_update(questionnaire, update.model_dump(exclude_unset=True), nullable=("description",))
    db.commit()
    db.refresh(questionnaire)
    return questionnaire


@router.delete(
    "/{questionnaire_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=HTTPResponse,
    summary="Delete Questionnaire"
)
def delete_questionnaire(questionnaire_id: int, db: Session = Depends(get_db)):
    """Delete a questionnaire with no questions, scoring configs or reports."""
    questionnaire = get_or_404(db, Questionnaire, questionnaire_id, "Questionnaire")
    if questionnaire.questions or questionnaire.scoring_configs or questionnaire.reports:
        raise bad_request(
            "Cannot delete questionnaire because it is associated with questions, "
            "scoring configs, or reports."
        )
    db.delete(questionnaire)
    db.commit()

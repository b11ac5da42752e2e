"""Response upsert with write-time score resolution."""
from typing import Optional

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.database.orm import Company, Question, Response
from app.scoring.option_scores import resolve_for_question

logger = structlog.get_logger(__name__)


class UnknownReferenceError(ValueError):
    """Raised when a response points at a company or question that does not exist."""


def _load_question(db: Session, question_id: int) -> Optional[Question]:
    return db.scalar(
        select(Question)
        .where(Question.id == question_id)
        .options(selectinload(Question.options))
    )


def upsert_response(db: Session, company_id: int, question_id: int, value: str) -> Response:
    """Create or replace the response of a company to a question.

    The score is resolved from the question's options on every write.

    Raises:
        UnknownReferenceError: company or question does not exist.
        InvalidOptionValueError: value matches no option of a scored question.
    """
    company = db.get(Company, company_id)
    question = _load_question(db, question_id)
    if company is None or question is None:
        raise UnknownReferenceError("Invalid company_id or question_id")

    score = resolve_for_question(question, value)

    response = db.scalar(
        select(Response).where(
            Response.company_id == company_id,
            Response.question_id == question_id,
        )
    )
    created = response is None
    if created:
        response = Response(company_id=company_id, question_id=question_id)
        db.add(response)
    response.value = value
    response.score = score

    db.commit()
    db.refresh(response)

    logger.info(
        "response_upserted",
        company_id=company_id,
        question_id=question_id,
        score=score,
        created=created,
    )
    return response


def update_response_value(db: Session, response: Response, value: str) -> Response:
    """Replace the value of an existing response and recompute its score."""
    question = _load_question(db, response.question_id)
    response.score = resolve_for_question(question, value)
    response.value = value
    db.commit()
    db.refresh(response)
    logger.info("response_updated", response_id=response.id, score=response.score)
    return response

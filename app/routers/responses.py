"""Response endpoints: upsert, bulk upsert and CRUD."""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response as HTTPResponse, status
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload
from app.database.connection import get_db
from app.database.orm import Question, Response
from app.models import (
    BulkItemError,
    BulkUpsertResult,
    ResponseBulkCreate,
    ResponseCreate,
    ResponseRead,
    ResponseUpdate,
)
from app.pipelines import UnknownReferenceError, update_response_value, upsert_response
from app.routers.deps import bad_request, get_or_404
from app.scoring.errors import InvalidOptionValueError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/responses", tags=["Responses"])


@router.get("", response_model=List[ResponseRead], summary="List Responses")
def list_responses(
    company_id: Optional[int] = Query(None, description="Filter by company"),
    questionnaire_id: Optional[int] = Query(None, description="Filter by questionnaire"),
    db: Session = Depends(get_db),
):
    stmt = select(Response).options(
        selectinload(Response.company),
        selectinload(Response.question),
    )
    if company_id is not None:
        stmt = stmt.where(Response.company_id == company_id)
    if questionnaire_id is not None:
        stmt = stmt.join(Response.question).where(Question.questionnaire_id == questionnaire_id)
    stmt = stmt.order_by(Response.id)
    return list(db.scalars(stmt))


@router.get("/{response_id}", response_model=ResponseRead, summary="Get Response")
def get_response(response_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Response, response_id, "Response")


@router.post(
    "",
    response_model=ResponseRead,
    status_code=status.HTTP_201_CREATED,
    summary="Upsert Response"
)
def create_or_update_response(payload: ResponseCreate, db: Session = Depends(get_db)):
    """Create the company's response to a question, or replace the existing one."""
    try:
        return upsert_response(db, payload.company_id, payload.question_id, payload.value)
    except (UnknownReferenceError, InvalidOptionValueError) as e:
        db.rollback()
        raise bad_request(str(e))


@router.post("/bulk", response_model=BulkUpsertResult, summary="Bulk Upsert Responses")
def bulk_upsert_responses(payload: ResponseBulkCreate, db: Session = Depends(get_db)):
    """Upsert many responses; each item succeeds or fails on its own."""
    result = BulkUpsertResult()
    for index, item in enumerate(payload.responses):
        try:
            response = upsert_response(db, item.company_id, item.question_id, item.value)
        except (UnknownReferenceError, InvalidOptionValueError) as e:
            db.rollback()
            result.errors.append(BulkItemError(
                index=index,
                company_id=item.company_id,
                question_id=item.question_id,
                error=str(e),
            ))
            continue
        result.results.append(ResponseRead.model_validate(response))

    result.success_count = len(result.results)
    result.failure_count = len(result.errors)
    logger.info(
        f"Bulk upsert: {result.success_count} succeeded, {result.failure_count} failed"
    )
    return result


@router.put("/{response_id}", response_model=ResponseRead, summary="Update Response")
def update_response(response_id: int, update: ResponseUpdate, db: Session = Depends(get_db)):
    """Replace the value of a response; the score is recomputed."""
    response = get_or_404(db, Response, response_id, "Response")
    try:
        return update_response_value(db, response, update.value)
    except InvalidOptionValueError as e:
        db.rollback()
        raise bad_request(str(e))


@router.delete(
    "/{response_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=HTTPResponse,
    summary="Delete Response"
)
def delete_response(response_id: int, db: Session = Depends(get_db)):
    response = get_or_404(db, Response, response_id, "Response")
    db.delete(response)
    db.commit()

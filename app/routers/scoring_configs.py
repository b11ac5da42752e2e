"""Scoring configuration CRUD endpoints."""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response as HTTPResponse, status
from sqlalchemy import select
from sqlalchemy.orm import Session
from app.database.connection import get_db
from app.database.orm import Questionnaire, ScoringConfig
from app.models import ScoringConfigCreate, ScoringConfigUpdate, ScoringConfigResponse
from app.routers.deps import apply_update, bad_request, conflict, get_or_404

router = APIRouter(prefix="/api/v1/scoring-configs", tags=["Scoring Configs"])


def _check_questionnaire(db: Session, questionnaire_id: int) -> None:
    if db.get(Questionnaire, questionnaire_id) is None:
        raise bad_request("Associated questionnaire not found")


def _check_section_free(
    db: Session,
    questionnaire_id: int,
    section: str,
    exclude_id: Optional[int] = None,
) -> None:
    """At most one config per (questionnaire, section)."""
    stmt = select(ScoringConfig.id).where(
        ScoringConfig.questionnaire_id == questionnaire_id,
        ScoringConfig.section == section,
    )
    if exclude_id is not None:
        stmt = stmt.where(ScoringConfig.id != exclude_id)
    if db.scalar(stmt) is not None:
        raise conflict(
            f"A scoring configuration for section '{section}' already exists "
            "for this questionnaire."
        )


@router.get("", response_model=List[ScoringConfigResponse], summary="List Scoring Configs")
def list_scoring_configs(
    questionnaire_id: Optional[int] = Query(None, description="Filter by questionnaire"),
    db: Session = Depends(get_db),
):
    """List configs ordered by questionnaire, then section."""
    stmt = select(ScoringConfig)
    if questionnaire_id is not None:
        stmt = stmt.where(ScoringConfig.questionnaire_id == questionnaire_id)
    stmt = stmt.order_by(ScoringConfig.questionnaire_id, ScoringConfig.section)
    return list(db.scalars(stmt))


@router.get("/{config_id}", response_model=ScoringConfigResponse, summary="Get Scoring Config")
def get_scoring_config(config_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, ScoringConfig, config_id, "Scoring config")


@router.post(
    "",
    response_model=ScoringConfigResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Scoring Config"
)
def create_scoring_config(payload: ScoringConfigCreate, db: Session = Depends(get_db)):
    data = payload.model_dump(mode="json")
    _check_questionnaire(db, payload.questionnaire_id)
    _check_section_free(db, payload.questionnaire_id, data["section"])
    config = ScoringConfig(**data)
    db.add(config)
    db.commit()
    db.refresh(config)
    return config


@router.put("/{config_id}", response_model=ScoringConfigResponse, summary="Update Scoring Config")
def update_scoring_config(
    config_id: int,
    update: ScoringConfigUpdate,
    db: Session = Depends(get_db),
):
    config = get_or_404(db, ScoringConfig, config_id, "Scoring config")
    data = update.model_dump(mode="json", exclude_unset=True)
    questionnaire_id = data.get("questionnaire_id") or config.questionnaire_id
    section = data.get("section") or config.section
    if data.get("questionnaire_id") is not None:
        _check_questionnaire(db, questionnaire_id)
    _check_section_free(db, questionnaire_id, section, exclude_id=config.id)

    apply_update(config, data)
    db.commit()
    db.refresh(config)
    return config


@router.delete(
    "/{config_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=HTTPResponse,
    summary="Delete Scoring Config"
)
def delete_scoring_config(config_id: int, db: Session = Depends(get_db)):
    config = get_or_404(db, ScoringConfig, config_id, "Scoring config")
    db.delete(config)
    db.commit()

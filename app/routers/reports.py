"""Report endpoints: generation, retrieval and Excel export."""
import logging
from datetime import datetime, timezone
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response as HTTPResponse, status
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload
from app.config import Settings
from app.database.connection import get_db
from app.database.orm import Company, Questionnaire, Report
from app.models import ReportGenerateRequest, ReportResponse
from app.pipelines import ReportPipeline, responses_for
from app.routers.deps import bad_request, get_or_404
from app.scoring.errors import ScoringError
from app.services import (
    CacheKeys,
    RedisCache,
    ReportExcelExporter,
    XLSX_MEDIA_TYPE,
    attachment_headers,
    get_app_settings,
    get_cache,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/reports", tags=["Reports"])


def _with_refs(stmt):
    return stmt.options(
        selectinload(Report.company),
        selectinload(Report.questionnaire),
    )


def _filtered(company_id: Optional[int], questionnaire_id: Optional[int]):
    stmt = _with_refs(select(Report))
    if company_id is not None:
        stmt = stmt.where(Report.company_id == company_id)
    if questionnaire_id is not None:
        stmt = stmt.where(Report.questionnaire_id == questionnaire_id)
    return stmt


@router.get("", response_model=List[ReportResponse], summary="List Reports")
def list_reports(
    company_id: Optional[int] = Query(None, description="Filter by company"),
    questionnaire_id: Optional[int] = Query(None, description="Filter by questionnaire"),
    db: Session = Depends(get_db),
):
    """List reports, newest first."""
    stmt = _filtered(company_id, questionnaire_id).order_by(
        Report.created_at.desc(), Report.id.desc()
    )
    return list(db.scalars(stmt))


@router.get(
    "/export/historical",
    response_class=HTTPResponse,
    summary="Export Historical Reports",
    responses={200: {"content": {XLSX_MEDIA_TYPE: {}}}},
)
def export_historical(
    company_id: Optional[int] = Query(None, description="Filter by company"),
    questionnaire_id: Optional[int] = Query(None, description="Filter by questionnaire"),
    db: Session = Depends(get_db),
):
    """Export every matching report as a summary workbook with per-company history sheets."""
    stmt = _filtered(company_id, questionnaire_id).order_by(
        Report.company_id, Report.created_at.desc(), Report.id.desc()
    )
    reports = list(db.scalars(stmt))
    if not reports:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No reports found for the specified criteria."
        )

    content = ReportExcelExporter().historical(reports)
    filename = f"ESG_Historical_Reports_{datetime.now(timezone.utc).date().isoformat()}.xlsx"
    return HTTPResponse(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers=attachment_headers(filename),
    )


@router.get("/{report_id}", response_model=ReportResponse, summary="Get Report")
def get_report(
    report_id: int,
    db: Session = Depends(get_db),
    cache: RedisCache = Depends(get_cache),
    settings: Settings = Depends(get_app_settings),
):
    """Get a report by ID. Reports never change, so reads are cached."""
    cache_key = CacheKeys.report(report_id)

    # Try cache first
    cached = cache.get(cache_key, ReportResponse)
    if cached:
        return cached

    report = db.scalar(_with_refs(select(Report)).where(Report.id == report_id))
    if report is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Report not found"
        )
    result = ReportResponse.model_validate(report)
    cache.set(cache_key, result, settings.cache_ttl_report)
    return result


@router.get(
    "/{report_id}/export",
    response_class=HTTPResponse,
    summary="Export Report",
    responses={200: {"content": {XLSX_MEDIA_TYPE: {}}}},
)
def export_report(report_id: int, db: Session = Depends(get_db)):
    """Export one report and its underlying responses to Excel."""
    report = get_or_404(db, Report, report_id, "Report")
    responses = responses_for(db, report.company_id, report.questionnaire_id)

    content = ReportExcelExporter().single_report(report, responses)
    filename = f"ESG_Report_{report.company.name}_{report.id}.xlsx".replace(" ", "_")
    return HTTPResponse(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers=attachment_headers(filename),
    )


@router.post(
    "/generate",
    response_model=ReportResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Generate Report"
)
def generate_report(
    payload: ReportGenerateRequest,
    db: Session = Depends(get_db),
    cache: RedisCache = Depends(get_cache),
    settings: Settings = Depends(get_app_settings),
):
    """Score the company's current responses and store a new report."""
    if db.get(Company, payload.company_id) is None:
        raise bad_request("Associated company not found")
    if db.get(Questionnaire, payload.questionnaire_id) is None:
        raise bad_request("Associated questionnaire not found")

    try:
        report = ReportPipeline().run(db, payload.company_id, payload.questionnaire_id)
    except ScoringError as e:
        raise bad_request(str(e))

    result = ReportResponse.model_validate(report)
    cache.set(CacheKeys.report(report.id), result, settings.cache_ttl_report)
    return result

"""Company CRUD endpoints."""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response as HTTPResponse, status
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload
from app.database.connection import get_db
from app.database.orm import Company, Issuer
from app.models import CompanyCreate, CompanyUpdate, CompanyWithIssuer
from app.routers.deps import apply_update, bad_request, get_or_404

router = APIRouter(prefix="/api/v1/companies", tags=["Companies"])


def _check_issuer(db: Session, issuer_id: int) -> None:
    if db.get(Issuer, issuer_id) is None:
        raise bad_request("Associated issuer not found")


@router.get("", response_model=List[CompanyWithIssuer], summary="List Companies")
def list_companies(
    issuer_id: Optional[int] = Query(None, description="Filter by issuer"),
    db: Session = Depends(get_db),
):
    """List companies (newest first) with optional issuer filtering."""
    stmt = select(Company).options(selectinload(Company.issuer))
    if issuer_id is not None:
        stmt = stmt.where(Company.issuer_id == issuer_id)
    stmt = stmt.order_by(Company.created_at.desc(), Company.id.desc())
    return list(db.scalars(stmt))


@router.get("/{company_id}", response_model=CompanyWithIssuer, summary="Get Company")
def get_company(company_id: int, db: Session = Depends(get_db)):
    """Get a company by ID, including its issuer."""
    return get_or_404(db, Company, company_id, "Company")


@router.post(
    "",
    response_model=CompanyWithIssuer,
    status_code=status.HTTP_201_CREATED,
    summary="Create Company"
)
def create_company(payload: CompanyCreate, db: Session = Depends(get_db)):
    """Create a new company under an existing issuer."""
    _check_issuer(db, payload.issuer_id)
    company = Company(**payload.model_dump())
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


@router.put("/{company_id}", response_model=CompanyWithIssuer, summary="Update Company")
def update_company(company_id: int, update: CompanyUpdate, db: Session = Depends(get_db)):
    company = get_or_404(db, Company, company_id, "Company")
    update_data = update.model_dump(exclude_unset=True)
    if update_data.get("issuer_id") is not None:
        _check_issuer(db, update_data["issuer_id"])
    apply_update(company, update_data, nullable=("logo_url", "description"))
    db.commit()
    db.refresh(company)
    return company


@router.delete(
    "/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=HTTPResponse,
    summary="Delete Company"
)
def delete_company(company_id: int, db: Session = Depends(get_db)):
    """Delete a company that has no responses or reports."""
    company = get_or_404(db, Company, company_id, "Company")
    if company.responses or company.reports:
        raise bad_request(
            "Cannot delete company because it is associated with responses or reports."
        )
    db.delete(company)
    db.commit()

"""Issuer CRUD endpoints."""
from typing import List
from fastapi import APIRouter, Depends, Response as HTTPResponse, status
from sqlalchemy import select
from sqlalchemy.orm import Session
from app.database.connection import get_db
from app.database.orm import Issuer
from app.models import IssuerCreate, IssuerUpdate, IssuerResponse, IssuerWithCompanies
from app.routers.deps import apply_update, bad_request, get_or_404

router = APIRouter(prefix="/api/v1/issuers", tags=["Issuers"])


@router.get("", response_model=List[IssuerResponse], summary="List Issuers")
def list_issuers(db: Session = Depends(get_db)):
    """List issuers, newest first."""
    return list(db.scalars(
        select(Issuer).order_by(Issuer.created_at.desc(), Issuer.id.desc())
    ))


@router.get("/{issuer_id}", response_model=IssuerWithCompanies, summary="Get Issuer")
def get_issuer(issuer_id: int, db: Session = Depends(get_db)):
    """Get an issuer with its companies."""
    return get_or_404(db, Issuer, issuer_id, "Issuer")


@router.post(
    "",
    response_model=IssuerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Issuer"
)
def create_issuer(payload: IssuerCreate, db: Session = Depends(get_db)):
    issuer = Issuer(**payload.model_dump())
    db.add(issuer)
    db.commit()
    db.refresh(issuer)
    return issuer


@router.put("/{issuer_id}", response_model=IssuerResponse, summary="Update Issuer")
def update_issuer(issuer_id: int, update: IssuerUpdate, db: Session = Depends(get_db)):
    issuer = get_or_404(db, Issuer, issuer_id, "Issuer")
    apply_update(issuer, update.model_dump(exclude_unset=True), nullable=("description",))
    db.commit()
    db.refresh(issuer)
    return issuer


@router.delete(
    "/{issuer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=HTTPResponse,
    summary="Delete Issuer"
)
def delete_issuer(issuer_id: int, db: Session = Depends(get_db)):
    """Delete an issuer that has no companies."""
    issuer = get_or_404(db, Issuer, issuer_id, "Issuer")
    if issuer.companies:
        raise bad_request("Cannot delete issuer because it is associated with companies.")
    db.delete(issuer)
    db.commit()

"""Shared router helpers."""
from typing import Type, TypeVar

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.database.base import Base

ModelT = TypeVar("ModelT", bound=Base)


def get_or_404(db: Session, model: Type[ModelT], obj_id: int, label: str) -> ModelT:
    """Fetch a row by primary key or raise 404."""
    obj = db.get(model, obj_id)
    if obj is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label} not found"
        )
    return obj


def bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def conflict(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=detail)


def apply_update(obj: Base, data: dict, nullable: tuple = ()) -> None:
    """Copy update fields onto a row; None only clears columns listed in ``nullable``."""
    for field, value in data.items():
        if value is None and field not in nullable:
            continue
        setattr(obj, field, value)

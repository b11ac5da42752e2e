"""User registration, login and profile endpoints."""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session
from app.database.connection import get_db
from app.database.orm import User
from app.models import AuthResponse, UserLogin, UserRegister, UserResponse, UserRole
from app.services import (
    AuthService,
    DuplicateEmailError,
    get_auth_service,
    get_current_user,
    require_role,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/users", tags=["Users"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register User"
)
def register(payload: UserRegister, auth: AuthService = Depends(get_auth_service)):
    """Create an account and return it with a bearer token."""
    try:
        user, token = auth.register(payload.email, payload.password, payload.role)
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return AuthResponse(
        message="User registered successfully.",
        user=UserResponse.model_validate(user),
        token=token,
    )


@router.post("/login", response_model=AuthResponse, summary="Login")
def login(payload: UserLogin, auth: AuthService = Depends(get_auth_service)):
    """Verify credentials and return a bearer token."""
    try:
        user, token = auth.login(payload.email, payload.password)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    return AuthResponse(
        message="Login successful.",
        user=UserResponse.model_validate(user),
        token=token,
    )


@router.get("/me", response_model=UserResponse, summary="Current User")
def me(user: User = Depends(get_current_user)):
    return user


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List Users",
    description="Admin only."
)
def list_users(
    db: Session = Depends(get_db),
    _admin: User = Depends(require_role(UserRole.ADMIN)),
):
    return list(db.scalars(select(User).order_by(User.id)))

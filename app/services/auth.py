"""
User authentication service.

Provides registration, login, JWT token management and password hashing.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt
from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.config import Settings
from app.database.connection import get_db
from app.database.orm import User
from app.models.enums import UserRole
from app.models.user import MAX_PASSWORD_BYTES

logger = logging.getLogger(__name__)


class DuplicateEmailError(ValueError):
    """Raised when registering an email that already has an account."""


class AuthService:
    """User authentication service bound to one DB session."""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    def hash_password(self, password: str) -> str:
        """Hash password with bcrypt."""
        salt = bcrypt.gensalt(rounds=self.settings.bcrypt_rounds)
        return bcrypt.hashpw(password.encode(), salt).decode()

    @staticmethod
    def verify_password(password: str, hashed: str) -> bool:
        """Verify password against hash."""
        encoded = password.encode()
        if len(encoded) > MAX_PASSWORD_BYTES:
            # Never hashable, so never stored
            return False
        return bcrypt.checkpw(encoded, hashed.encode())

    def create_access_token(self, user: User) -> str:
        """Create JWT access token."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "email": user.email,
            "role": user.role,
            "iat": now,
            "exp": now + timedelta(hours=self.settings.access_token_expire_hours),
        }
        return jwt.encode(
            payload,
            self.settings.jwt_secret_key,
            algorithm=self.settings.jwt_algorithm
        )

    def decode_token(self, token: str) -> Dict[str, Any]:
        """Verify signature and expiry, return the claims."""
        try:
            return jwt.decode(
                token,
                self.settings.jwt_secret_key,
                algorithms=[self.settings.jwt_algorithm]
            )
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError:
            raise ValueError("Invalid token")

    def register(self, email: str, password: str, role: UserRole = UserRole.USER) -> tuple[User, str]:
        """Register a new user and issue a token."""
        email = email.lower()
        existing = self.db.scalar(select(User).where(User.email == email))
        if existing:
            raise DuplicateEmailError("User with this email already exists.")

        user = User(
            email=email,
            password_hash=self.hash_password(password),
            role=UserRole(role).value,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"Registered user {user.id} ({user.role})")
        return user, self.create_access_token(user)

    def login(self, email: str, password: str) -> tuple[User, str]:
        """Authenticate user and issue a token."""
        user = self.db.scalar(select(User).where(User.email == email.lower()))
        if not user or not self.verify_password(password, user.password_hash):
            raise ValueError("Incorrect email or password.")
        return user, self.create_access_token(user)

    def user_from_token(self, token: str) -> User:
        """Resolve the user a token was issued to."""
        claims = self.decode_token(token)
        try:
            user_id = int(claims["sub"])
        except (KeyError, ValueError):
            raise ValueError("Invalid token")
        user = self.db.get(User, user_id)
        if not user:
            raise ValueError("User no longer exists")
        return user


def get_app_settings(request: Request) -> Settings:
    """Return the Settings the running application was built with."""
    return request.app.state.settings


def get_auth_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> AuthService:
    return AuthService(db, settings)


def get_current_user(
    authorization: Optional[str] = Header(None),
    auth: AuthService = Depends(get_auth_service),
) -> User:
    """Extract and validate the bearer token from the Authorization header."""
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required"
        )
    if not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization format"
        )

    try:
        return auth.user_from_token(authorization[len("Bearer "):])
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


def require_role(role: UserRole):
    """Dependency factory that admits only users with ``role``."""

    def checker(user: User = Depends(get_current_user)) -> User:
        if user.role != role.value:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions"
            )
        return user

    return checker

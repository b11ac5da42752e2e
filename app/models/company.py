"""Company and Issuer Pydantic models."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict


def _blank_to_none(v: Optional[str]) -> Optional[str]:
    return v or None


def _check_logo_url(v: Optional[str]) -> Optional[str]:
    if not v:
        return None
    if not v.startswith(("http://", "https://")):
        raise ValueError("logo_url must be an http(s) URL")
    return v


class IssuerBase(BaseModel):
    """Base issuer model."""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None

    @field_validator("description")
    @classmethod
    def blank_description(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty descriptions as missing."""
        return _blank_to_none(v)


class IssuerCreate(IssuerBase):
    """Model for creating an issuer."""
    pass


class IssuerUpdate(BaseModel):
    """Model for updating an issuer (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None


class IssuerResponse(IssuerBase):
    """Issuer response model with ID and timestamps."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class CompanyBase(BaseModel):
    """Base company model with validation."""
    name: str = Field(..., min_length=1, max_length=255)
    issuer_id: int = Field(..., ge=1)
    logo_url: Optional[str] = Field(None, max_length=1024)
    description: Optional[str] = None

    @field_validator("logo_url")
    @classmethod
    def validate_logo_url(cls, v: Optional[str]) -> Optional[str]:
        """Allow blank, otherwise require an http(s) URL."""
        return _check_logo_url(v)

    @field_validator("description")
    @classmethod
    def blank_description(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


class CompanyCreate(CompanyBase):
    """Model for creating a company."""
    pass


class CompanyUpdate(BaseModel):
    """Model for updating a company (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    issuer_id: Optional[int] = Field(None, ge=1)
    logo_url: Optional[str] = Field(None, max_length=1024)
    description: Optional[str] = None

    @field_validator("logo_url")
    @classmethod
    def validate_logo_url(cls, v: Optional[str]) -> Optional[str]:
        return _check_logo_url(v)


class CompanyResponse(CompanyBase):
    """Company response model with ID and timestamps."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class CompanyRef(BaseModel):
    """Compact company reference embedded in other payloads."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    logo_url: Optional[str] = None


class CompanyWithIssuer(CompanyResponse):
    """Company response including issuer details."""
    issuer: Optional[IssuerResponse] = None


class IssuerWithCompanies(IssuerResponse):
    """Issuer response including its companies."""
    companies: List[CompanyResponse] = Field(default_factory=list)

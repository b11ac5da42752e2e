"""Configuration management using Pydantic Settings."""
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "ESG Scoring Platform"
    app_version: str = "1.0.0"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Database (any SQLAlchemy URL; SQLite by default)
    database_url: str = "sqlite:///./esg_scoring.db"

    # Auth
    jwt_secret_key: str = Field(
        default="change-me-in-production",
        description="HMAC key for access tokens (JWT_SECRET_KEY)",
    )
    jwt_algorithm: str = "HS256"
    access_token_expire_hours: int = 24
    bcrypt_rounds: int = 12

    # Redis
    cache_enabled: bool = True
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0

    # Cache TTLs (seconds)
    cache_ttl_report: int = 3600  # reports are immutable snapshots


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""Services package - cache, authentication and export services."""
from .redis_cache import RedisCache, CacheKeys, get_cache
from .auth import (
    AuthService,
    DuplicateEmailError,
    get_app_settings,
    get_auth_service,
    get_current_user,
    require_role,
)
from .excel_export import (
    DETAIL_HEADERS,
    SUMMARY_HEADERS,
    XLSX_MEDIA_TYPE,
    ReportExcelExporter,
    attachment_headers,
)

__all__ = [
    "RedisCache",
    "CacheKeys",
    "get_cache",
    "AuthService",
    "DuplicateEmailError",
    "get_app_settings",
    "get_auth_service",
    "get_current_user",
    "require_role",
    "ReportExcelExporter",
    "XLSX_MEDIA_TYPE",
    "attachment_headers",
    "SUMMARY_HEADERS",
    "DETAIL_HEADERS",
]

"""Routers package - API endpoint routers."""

from .health import router as health_router
from .users import router as users_router
from .issuers import router as issuers_router
from .companies import router as companies_router
from .questionnaires import router as questionnaires_router
from .questions import router as questions_router
from .responses import router as responses_router
from .scoring_configs import router as scoring_configs_router
from .reports import router as reports_router

__all__ = [
    "health_router",
    "users_router",
    "issuers_router",
    "companies_router",
    "questionnaires_router",
    "questions_router",
    "responses_router",
    "scoring_configs_router",
    "reports_router",
]

"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import Settings, get_settings
from app.database.connection import Database
from app.services import RedisCache
from app.routers import (
    health_router,
    users_router,
    issuers_router,
    companies_router,
    questionnaires_router,
    questions_router,
    responses_router,
    scoring_configs_router,
    reports_router,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    settings: Settings = app.state.settings
    logger.info("Starting ESG Scoring Platform...")
    logger.info(f"Environment: {'DEBUG' if settings.debug else 'PRODUCTION'}")
    app.state.database.create_tables()
    yield
    # Shutdown
    logger.info("Shutting down ESG Scoring Platform...")
    app.state.cache.close()
    app.state.database.dispose()


def create_app(
    settings: Optional[Settings] = None,
    cache: Optional[RedisCache] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="""
        ## ESG Scoring Platform API

        Collects ESG questionnaire responses from companies and scores them.

        ### Features:
        - Issuer, company and questionnaire management
        - Questions with scored answer options
        - Response upsert with write-time scoring
        - Per-section scoring configuration (sum / average / weighted average)
        - Report generation with section and overall scores
        - Excel export of single and historical reports
        """,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json"
    )

    app.state.settings = settings
    app.state.database = Database(settings)
    app.state.cache = cache or RedisCache.from_settings(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(issuers_router)
    app.include_router(companies_router)
    app.include_router(questionnaires_router)
    app.include_router(questions_router)
    app.include_router(responses_router)
    app.include_router(scoring_configs_router)
    app.include_router(reports_router)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"}
        )

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)

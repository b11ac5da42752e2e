"""Pydantic models for the ESG Scoring Platform."""

# Common Models
from app.models.common import (
    HealthResponse,
)

# Enums
from app.models.enums import (
    Section,
    QuestionType,
    AggregationMethod,
    UserRole,
    SECTION_ORDER,
    SCORED_QUESTION_TYPES,
)

# Users
from app.models.user import (
    UserRegister,
    UserLogin,
    UserResponse,
    AuthResponse,
)

# Issuers and Companies
from app.models.company import (
    IssuerBase,
    IssuerCreate,
    IssuerUpdate,
    IssuerResponse,
    IssuerWithCompanies,
    CompanyBase,
    CompanyCreate,
    CompanyUpdate,
    CompanyResponse,
    CompanyRef,
    CompanyWithIssuer,
)

# Questions
from app.models.question import (
    QuestionOptionBase,
    QuestionOptionCreate,
    QuestionOptionResponse,
    QuestionBase,
    QuestionCreate,
    QuestionUpdate,
    QuestionResponse,
    QuestionRef,
    check_options,
)

# Scoring configs
from app.models.scoring_config import (
    ScoringConfigBase,
    ScoringConfigCreate,
    ScoringConfigUpdate,
    ScoringConfigResponse,
)

# Reports
from app.models.report import (
    ReportGenerateRequest,
    ReportSummary,
    ReportResponse,
    QuestionnaireRef,
)

# Questionnaires
from app.models.questionnaire import (
    QuestionnaireBase,
    QuestionnaireCreate,
    QuestionnaireUpdate,
    QuestionnaireResponse,
    QuestionnaireSummary,
    QuestionnaireDetail,
)

# Responses
from app.models.response import (
    ResponseBase,
    ResponseCreate,
    ResponseUpdate,
    ResponseRead,
    ResponseBulkCreate,
    BulkItemError,
    BulkUpsertResult,
)

__all__ = [
    # Common
    "HealthResponse",
    # Enums
    "Section",
    "QuestionType",
    "AggregationMethod",
    "UserRole",
    "SECTION_ORDER",
    "SCORED_QUESTION_TYPES",
    # Users
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    # Issuers and Companies
    "IssuerBase",
    "IssuerCreate",
    "IssuerUpdate",
    "IssuerResponse",
    "IssuerWithCompanies",
    "CompanyBase",
    "CompanyCreate",
    "CompanyUpdate",
    "CompanyResponse",
    "CompanyRef",
    "CompanyWithIssuer",
    # Questions
    "QuestionOptionBase",
    "QuestionOptionCreate",
    "QuestionOptionResponse",
    "QuestionBase",
    "QuestionCreate",
    "QuestionUpdate",
    "QuestionResponse",
    "QuestionRef",
    "check_options",
    # Scoring configs
    "ScoringConfigBase",
    "ScoringConfigCreate",
    "ScoringConfigUpdate",
    "ScoringConfigResponse",
    # Reports
    "ReportGenerateRequest",
    "ReportSummary",
    "ReportResponse",
    "QuestionnaireRef",
    # Questionnaires
    "QuestionnaireBase",
    "QuestionnaireCreate",
    "QuestionnaireUpdate",
    "QuestionnaireResponse",
    "QuestionnaireSummary",
    "QuestionnaireDetail",
    # Responses
    "ResponseBase",
    "ResponseCreate",
    "ResponseUpdate",
    "ResponseRead",
    "ResponseBulkCreate",
    "BulkItemError",
    "BulkUpsertResult",
]

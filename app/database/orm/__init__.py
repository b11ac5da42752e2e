"""SQLAlchemy ORM models for the ESG Scoring Platform."""
from app.database.base import Base
from app.database.orm.user import User
from app.database.orm.issuer import Issuer
from app.database.orm.company import Company
from app.database.orm.questionnaire import Questionnaire
from app.database.orm.question import Question, QuestionOption
from app.database.orm.response import Response
from app.database.orm.scoring_config import ScoringConfig
from app.database.orm.report import Report

__all__ = [
    "Base",
    "User",
    "Issuer",
    "Company",
    "Questionnaire",
    "Question",
    "QuestionOption",
    "Response",
    "ScoringConfig",
    "Report",
]

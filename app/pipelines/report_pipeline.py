"""ESG report pipeline.

Reads one (company, questionnaire) snapshot, scores it and stores the Report.
The read and the write share a single session, so the stored scores always
describe the responses that were read.
"""
from dataclasses import dataclass
from typing import List, Optional

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.database.orm import Question, Report, Response, ScoringConfig
from app.models.enums import Section
from app.scoring.esg_calculator import ESGScoreCalculator, ESGScoreResult, ResponseRecord
from app.scoring.section_aggregator import SectionConfig

logger = structlog.get_logger(__name__)


@dataclass
class ScoringSnapshot:
    """Everything the calculator needs for one run."""

    company_id: int
    questionnaire_id: int
    responses: List[ResponseRecord]
    configs: List[SectionConfig]


def responses_for(db: Session, company_id: int, questionnaire_id: int) -> List[Response]:
    """Responses of a company to the questions of a questionnaire (questions loaded)."""
    stmt = (
        select(Response)
        .join(Response.question)
        .where(
            Response.company_id == company_id,
            Question.questionnaire_id == questionnaire_id,
        )
        .options(selectinload(Response.question))
        .order_by(Question.section, Question.order, Question.id)
    )
    return list(db.scalars(stmt))


def load_snapshot(db: Session, company_id: int, questionnaire_id: int) -> ScoringSnapshot:
    """Read responses and scoring configs for one scoring run."""
    responses = [
        ResponseRecord(
            question_id=r.question_id,
            section=Section(r.question.section),
            value=r.value,
            score=r.score,
        )
        for r in responses_for(db, company_id, questionnaire_id)
    ]
    configs = [
        SectionConfig.from_values(c.section, c.aggregation_method, c.weight)
        for c in db.scalars(
            select(ScoringConfig)
            .where(ScoringConfig.questionnaire_id == questionnaire_id)
            .order_by(ScoringConfig.section)
        )
    ]
    return ScoringSnapshot(
        company_id=company_id,
        questionnaire_id=questionnaire_id,
        responses=responses,
        configs=configs,
    )


class ReportPipeline:
    """Score a company against a questionnaire and persist the Report."""

    def __init__(self, calculator: Optional[ESGScoreCalculator] = None) -> None:
        self.calculator = calculator or ESGScoreCalculator()

    def score(self, db: Session, company_id: int, questionnaire_id: int) -> ESGScoreResult:
        """Run the calculator without persisting anything.

        Raises NoResponsesError / NoScoringConfigError on an empty snapshot.
        """
        snapshot = load_snapshot(db, company_id, questionnaire_id)
        return self.calculator.calculate(
            snapshot.responses,
            snapshot.configs,
            company_id=company_id,
            questionnaire_id=questionnaire_id,
        )

    def run(self, db: Session, company_id: int, questionnaire_id: int) -> Report:
        """Score and store a new Report; commits the session."""
        result = self.score(db, company_id, questionnaire_id)
        payload = result.to_report_payload()

        report = Report(
            company_id=company_id,
            questionnaire_id=questionnaire_id,
            overall_score=payload["overall_score"],
            section_scores=payload["section_scores"],
        )
        db.add(report)
        db.commit()
        db.refresh(report)

        logger.info(
            "report_generated",
            report_id=report.id,
            company_id=company_id,
            questionnaire_id=questionnaire_id,
            overall_score=report.overall_score,
        )
        return report

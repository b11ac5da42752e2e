"""Sample data: one issuer, one company and a three-question ESG questionnaire."""
from dataclasses import dataclass

import structlog
from sqlalchemy.orm import Session

from app.database.orm import (
    Company,
    Issuer,
    Question,
    QuestionOption,
    Questionnaire,
    ScoringConfig,
)
from app.models.enums import AggregationMethod, QuestionType, Section
from app.pipelines import ReportPipeline, upsert_response

log = structlog.get_logger(__name__)

YES_NO_OPTIONS = [("Yes", "yes", 4), ("No", "no", 1)]

SAMPLE_QUESTIONS = [
    (
        "What percentage of your energy comes from renewable sources?",
        QuestionType.SCALE,
        Section.ENVIRONMENTAL,
        [("0-25%", "0-25", 1), ("26-50%", "26-50", 2),
         ("51-75%", "51-75", 3), ("76-100%", "76-100", 4)],
        "76-100",
    ),
    (
        "Do you have a diversity and inclusion policy?",
        QuestionType.YES_NO,
        Section.SOCIAL,
        YES_NO_OPTIONS,
        "yes",
    ),
    (
        "Do you have a code of ethics for employees?",
        QuestionType.YES_NO,
        Section.GOVERNANCE,
        YES_NO_OPTIONS,
        "yes",
    ),
]


@dataclass
class SeedResult:
    issuer_id: int
    company_id: int
    questionnaire_id: int
    report_id: int


def seed_sample_data(db: Session) -> SeedResult:
    """Insert the sample rows, answer every question and generate one report."""
    issuer = Issuer(name="Sample Issuer", description="A sample issuer for testing")
    db.add(issuer)
    db.flush()

    company = Company(name="TechCorp Inc.", issuer_id=issuer.id)
    questionnaire = Questionnaire(
        name="ESG Assessment Questionnaire",
        description="A comprehensive ESG assessment questionnaire",
    )
    db.add_all([company, questionnaire])
    db.flush()

    answers = []
    for order, (text, qtype, section, options, answer) in enumerate(SAMPLE_QUESTIONS, start=1):
        question = Question(
            questionnaire_id=questionnaire.id,
            text=text,
            type=qtype.value,
            section=section.value,
            order=order,
            options=[
                QuestionOption(text=label, value=value, score=score)
                for label, value, score in options
            ],
        )
        db.add(question)
        db.flush()
        answers.append((question.id, answer))

    for section in (Section.ENVIRONMENTAL, Section.SOCIAL, Section.GOVERNANCE):
        db.add(ScoringConfig(
            questionnaire_id=questionnaire.id,
            section=section.value,
            aggregation_method=AggregationMethod.AVERAGE.value,
            weight=1.0,
        ))
    db.commit()

    for question_id, answer in answers:
        upsert_response(db, company.id, question_id, answer)

    report = ReportPipeline().run(db, company.id, questionnaire.id)
    log.info("sample_data_seeded", company_id=company.id, report_id=report.id,
             overall_score=report.overall_score)
    return SeedResult(
        issuer_id=issuer.id,
        company_id=company.id,
        questionnaire_id=questionnaire.id,
        report_id=report.id,
    )

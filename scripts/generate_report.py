"""scripts/generate_report.py

Score one company against one questionnaire, store the Report and
optionally write the Excel export.

Usage
-----
    python scripts/generate_report.py --company-id 1 --questionnaire-id 1
    python scripts/generate_report.py --company-id 1 --questionnaire-id 1 --xlsx report.xlsx
    python scripts/generate_report.py --company-id 1 --questionnaire-id 1 --dry-run
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import structlog

from app.config import Settings, get_settings
from app.database.connection import Database
from app.database.orm import Company, Questionnaire
from app.pipelines import ReportPipeline, responses_for
from app.scoring.errors import ScoringError
from app.services import ReportExcelExporter

# ── logging ──────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.dev.ConsoleRenderer(),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=False,
)
log = structlog.get_logger("generate_report")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate an ESG report")
    parser.add_argument("--company-id", type=int, required=True)
    parser.add_argument("--questionnaire-id", type=int, required=True)
    parser.add_argument("--xlsx", type=Path, help="Write the Excel export to this path")
    parser.add_argument("--dry-run", action="store_true",
                        help="Print the scores without storing a report")
    parser.add_argument("--database-url", help="Override DATABASE_URL")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    if args.database_url:
        settings = Settings(database_url=args.database_url)

    database = Database(settings)
    pipeline = ReportPipeline()
    try:
        with database.session() as db:
            company = db.get(Company, args.company_id)
            questionnaire = db.get(Questionnaire, args.questionnaire_id)
            if company is None or questionnaire is None:
                log.error("unknown_reference", company_id=args.company_id,
                          questionnaire_id=args.questionnaire_id)
                return 1

            try:
                if args.dry_run:
                    result = pipeline.score(db, company.id, questionnaire.id)
                    print(json.dumps(result.to_dict(), indent=2))
                    return 0
                report = pipeline.run(db, company.id, questionnaire.id)
            except ScoringError as e:
                log.error("scoring_failed", error=str(e))
                return 1

            print(json.dumps({
                "report_id": report.id,
                "overall_score": report.overall_score,
                "section_scores": report.section_scores,
            }, indent=2))

            if args.xlsx:
                responses = responses_for(db, company.id, questionnaire.id)
                args.xlsx.write_bytes(ReportExcelExporter().single_report(report, responses))
                log.info("excel_written", path=str(args.xlsx))
    finally:
        database.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())

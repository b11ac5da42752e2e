"""scripts/seed_data.py

Seed the configured database with sample ESG data:

  Sample Issuer → TechCorp Inc.
  ESG Assessment Questionnaire (one question per section, average scoring)
  responses 76-100 / yes / yes → report with every section at 4.0

Usage
-----
    python scripts/seed_data.py
    python scripts/seed_data.py --database-url sqlite:///./demo.db
"""

from __future__ import annotations

import argparse
import logging
import sys

import structlog

from app.config import Settings, get_settings
from app.database.connection import Database
from app.database.seed import seed_sample_data

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
log = structlog.get_logger("seed_data")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed sample ESG data")
    parser.add_argument("--database-url", help="Override DATABASE_URL")
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.database_url:
        settings = Settings(database_url=args.database_url)

    database = Database(settings)
    database.create_tables()
    try:
        with database.session() as db:
            result = seed_sample_data(db)
    finally:
        database.dispose()

    log.info("seed_complete", report_id=result.report_id,
             company_id=result.company_id, questionnaire_id=result.questionnaire_id)
    print(f"Seed data created successfully! Report ID: {result.report_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

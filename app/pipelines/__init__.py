"""Scoring and write pipelines for the ESG Scoring Platform."""
from app.pipelines.report_pipeline import (
    ReportPipeline,
    ScoringSnapshot,
    load_snapshot,
    responses_for,
)
from app.pipelines.response_writer import (
    UnknownReferenceError,
    upsert_response,
    update_response_value,
)

__all__ = [
    "ReportPipeline",
    "ScoringSnapshot",
    "load_snapshot",
    "responses_for",
    "UnknownReferenceError",
    "upsert_response",
    "update_response_value",
]

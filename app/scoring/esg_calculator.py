"""ESG score calculator.

Runs the section and overall aggregators over one snapshot of responses and
scoring configs and returns the payload stored on a Report:

  {"overall_score": float | None, "section_scores": {section: float}}

Sections without a scoring config are skipped even if they have responses.
Sections with a config but no scored response are left out of
``section_scores``.
"""
from dataclasses import dataclass
from typing import Optional, Sequence

import structlog

from app.models.enums import Section
from app.scoring.errors import NoResponsesError, NoScoringConfigError
from app.scoring.overall_aggregator import OverallAggregator, OverallScoreResult
from app.scoring.section_aggregator import (
    SectionAggregator,
    SectionConfig,
    SectionScoreResult,
)
from app.scoring.utils import score_to_float

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ResponseRecord:
    """One scored answer, tagged with its question's section."""

    question_id: int
    section:     Section
    value:       str
    score:       Optional[int]


@dataclass
class ESGScoreResult:
    """Complete scoring run for one company/questionnaire pair."""

    company_id:       Optional[int]
    questionnaire_id: Optional[int]
    section_results:  list[SectionScoreResult]
    overall:          OverallScoreResult
    skipped_sections: list[Section]

    @property
    def overall_score(self) -> Optional[float]:
        return score_to_float(self.overall.overall_score)

    @property
    def section_scores(self) -> dict[str, float]:
        return {
            r.section.value: float(r.score)
            for r in self.section_results
            if not r.is_absent
        }

    def to_report_payload(self) -> dict:
        return {
            "overall_score": self.overall_score,
            "section_scores": self.section_scores,
        }

    def to_dict(self) -> dict:
        return {
            "company_id":       self.company_id,
            "questionnaire_id": self.questionnaire_id,
            "overall_score":    self.overall_score,
            "section_scores":   self.section_scores,
            "branch":           self.overall.branch.value,
            "skipped_sections": [s.value for s in self.skipped_sections],
        }


class ESGScoreCalculator:
    """Aggregate responses into section scores and an overall score."""

    def __init__(
        self,
        section_aggregator: Optional[SectionAggregator] = None,
        overall_aggregator: Optional[OverallAggregator] = None,
    ) -> None:
        self.section_aggregator = section_aggregator or SectionAggregator()
        self.overall_aggregator = overall_aggregator or OverallAggregator()

    def calculate(
        self,
        responses: Sequence[ResponseRecord],
        configs: Sequence[SectionConfig],
        company_id: Optional[int] = None,
        questionnaire_id: Optional[int] = None,
    ) -> ESGScoreResult:
        """Score one response snapshot.

        Args:
            responses: All responses of the company to the questionnaire.
            configs: The questionnaire's scoring configs (one per section at most).
            company_id: For logging and the result only.
            questionnaire_id: For logging and the result only.

        Raises:
            NoResponsesError: ``responses`` is empty.
            NoScoringConfigError: ``configs`` is empty.
            ValueError: two configs target the same section.
        """
        if not responses:
            raise NoResponsesError(company_id, questionnaire_id)
        if not configs:
            raise NoScoringConfigError(questionnaire_id)

        ordered = sorted(configs, key=lambda c: c.section.value)
        sections = [c.section for c in ordered]
        if len(set(sections)) != len(sections):
            raise ValueError("Duplicate scoring config for a section")

        scores_by_section: dict[Section, list[Optional[int]]] = {s: [] for s in sections}
        skipped: set[Section] = set()
        for response in responses:
            bucket = scores_by_section.get(response.section)
            if bucket is None:
                skipped.add(response.section)
                continue
            bucket.append(response.score)

        # Config-less sections never fail the run
        for section in sorted(skipped, key=lambda s: s.value):
            logger.debug("section_without_config_skipped", section=section.value,
                         questionnaire_id=questionnaire_id)

        section_results = [
            self.section_aggregator.calculate(config, scores_by_section[config.section])
            for config in ordered
        ]
        overall = self.overall_aggregator.calculate(section_results, ordered)

        result = ESGScoreResult(
            company_id=company_id,
            questionnaire_id=questionnaire_id,
            section_results=section_results,
            overall=overall,
            skipped_sections=sorted(skipped, key=lambda s: s.value),
        )
        logger.info("esg_score_calculated", **result.to_dict())
        return result

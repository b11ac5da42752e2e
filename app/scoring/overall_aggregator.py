"""Overall ESG score aggregation.

Two-branch policy, chosen by looking at the whole ScoringConfig set:

  weighted: every config is weighted_average and Σ weight > 0
       overall = Σ section_score / Σ weight
     The numerator covers the sections that produced a score; the divisor
     covers every config, so a configured section with no scored response
     pulls the overall score down. Section scores already carry their
     weight (mean × weight), so weight enters twice. This matches the
     figures stored on existing reports and must be kept.

  positive mean: otherwise
       overall = mean of section scores strictly greater than 0
     A section that aggregates to exactly 0 is left out.

No qualifying score in either branch → None. Rounded to 2 places.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Sequence

import structlog

from app.models.enums import AggregationMethod, Section
from app.scoring.section_aggregator import SectionConfig, SectionScoreResult
from app.scoring.utils import mean, round_score

logger = structlog.get_logger(__name__)


class OverallBranch(str, Enum):
    """Which policy produced the overall score."""
    WEIGHTED = "weighted"
    POSITIVE_MEAN = "positive_mean"


@dataclass
class OverallScoreResult:
    """Overall aggregation result."""

    overall_score: Optional[Decimal]
    branch:        OverallBranch
    contributing_sections: list[Section] = field(default_factory=list)
    total_weight:  Optional[Decimal] = None  # weighted branch only

    def to_dict(self) -> dict:
        return {
            "overall_score": None if self.overall_score is None else float(self.overall_score),
            "branch": self.branch.value,
            "contributing_sections": [s.value for s in self.contributing_sections],
            "total_weight": None if self.total_weight is None else float(self.total_weight),
        }


def all_weighted(configs: Sequence[SectionConfig]) -> bool:
    """True when every config in the set uses weighted_average."""
    return bool(configs) and all(
        c.aggregation_method is AggregationMethod.WEIGHTED_AVERAGE for c in configs
    )


class OverallAggregator:
    """Combine section scores into the overall score."""

    def calculate(
        self,
        section_results: Sequence[SectionScoreResult],
        configs: Sequence[SectionConfig],
    ) -> OverallScoreResult:
        """Calculate the overall score.

        Args:
            section_results: Output of SectionAggregator, one per configured section.
            configs: The questionnaire's complete ScoringConfig set.

        Returns:
            OverallScoreResult; ``overall_score`` is None when nothing qualifies.
        """
        present = [r for r in section_results if not r.is_absent]

        if present and all_weighted(configs):
            total_weight = sum((c.weight for c in configs), Decimal(0))
            if total_weight > 0:
                weighted_sum = sum((r.raw_score for r in present), Decimal(0))
                result = OverallScoreResult(
                    overall_score=round_score(weighted_sum / total_weight),
                    branch=OverallBranch.WEIGHTED,
                    contributing_sections=[r.section for r in present],
                    total_weight=total_weight,
                )
                logger.info("overall_score_calculated", **result.to_dict())
                return result

        positive = [r for r in present if r.score > 0]
        overall = round_score(mean([r.score for r in positive])) if positive else None
        result = OverallScoreResult(
            overall_score=overall,
            branch=OverallBranch.POSITIVE_MEAN,
            contributing_sections=[r.section for r in positive],
        )
        logger.info("overall_score_calculated", **result.to_dict())
        return result

"""Section score aggregation.

Per section of a questionnaire:

  sum               = Σ scores
  average           = Σ scores / n
  weighted_average  = (Σ scores / n) × weight

Null scores (unscored text answers) are dropped first. A section left with
no scores is *absent* (score None), which is not the same as a score of 0.
Results are rounded to 2 places with ROUND_HALF_UP.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

import structlog

from app.models.enums import AggregationMethod, Section
from app.scoring.utils import as_decimal, drop_unscored, mean, round_score

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SectionConfig:
    """Aggregation rule for one section (mirrors a ScoringConfig row)."""

    section: Section
    aggregation_method: AggregationMethod
    weight: Decimal = Decimal(1)

    @classmethod
    def from_values(cls, section, aggregation_method, weight) -> "SectionConfig":
        return cls(
            section=Section(section),
            aggregation_method=AggregationMethod(aggregation_method),
            weight=as_decimal(weight),
        )


@dataclass
class SectionScoreResult:
    """Section aggregation result with audit fields."""

    section:        Section
    method:         AggregationMethod
    weight:         Decimal
    response_count: int               # scored responses that contributed
    raw_score:      Optional[Decimal]  # before rounding; None when absent
    score:          Optional[Decimal]  # rounded to 2 places; None when absent

    @property
    def is_absent(self) -> bool:
        return self.score is None

    def to_dict(self) -> dict:
        return {
            "section":        self.section.value,
            "method":         self.method.value,
            "weight":         float(self.weight),
            "response_count": self.response_count,
            "raw_score":      None if self.raw_score is None else float(self.raw_score),
            "score":          None if self.score is None else float(self.score),
        }


class SectionAggregator:
    """Combine the response scores of one section into a section score."""

    def calculate(
        self,
        config: SectionConfig,
        scores: Iterable[Optional[int]],
    ) -> SectionScoreResult:
        """Aggregate one section.

        Args:
            config: The section's aggregation method and weight.
            scores: Response scores in the section (None for unscored answers).

        Returns:
            SectionScoreResult; ``score`` is None when no scored response exists.
        """
        values = drop_unscored(scores)

        if not values:
            result = SectionScoreResult(
                section=config.section,
                method=config.aggregation_method,
                weight=config.weight,
                response_count=0,
                raw_score=None,
                score=None,
            )
            logger.debug("section_score_absent", section=config.section.value)
            return result

        raw = self._aggregate(config, values)
        result = SectionScoreResult(
            section=config.section,
            method=config.aggregation_method,
            weight=config.weight,
            response_count=len(values),
            raw_score=raw,
            score=round_score(raw),
        )
        logger.info("section_score_calculated", **result.to_dict())
        return result

    @staticmethod
    def _aggregate(config: SectionConfig, values: list[Decimal]) -> Decimal:
        method = config.aggregation_method
        if method is AggregationMethod.SUM:
            return sum(values, Decimal(0))
        if method is AggregationMethod.AVERAGE:
            return mean(values)
        if method is AggregationMethod.WEIGHTED_AVERAGE:
            # Scalar scaling of the plain mean, not a per-question weighting
            return mean(values) * config.weight
        raise ValueError(f"Unsupported aggregation method: {method}")

"""Property-based tests for the section and overall aggregators.

Uses Hypothesis to verify:
  1. average lies between the smallest and largest score
  2. sum equals the exact integer sum
  3. a section is absent exactly when it has no scored response
  4. null scores never change a section score
  5. the positive-mean overall score lies between its contributing scores
  6. the calculator is independent of response order
  7. with equal weights the weighted overall stays within the section means
"""
from decimal import Decimal

from hypothesis import HealthCheck, given, settings as h_settings
from hypothesis import strategies as st

from app.models.enums import AggregationMethod, Section
from app.scoring.esg_calculator import ESGScoreCalculator, ResponseRecord
from app.scoring.overall_aggregator import OverallAggregator, OverallBranch
from app.scoring.section_aggregator import SectionAggregator, SectionConfig
from app.scoring.utils import round_score

# ── Hypothesis configuration ──────────────────────────────────────────────────
h_settings.register_profile(
    "ci",
    max_examples=300,
    suppress_health_check=[HealthCheck.too_slow],
)
h_settings.load_profile("ci")


# ── Strategy helpers ──────────────────────────────────────────────────────────

_score = st.integers(min_value=-10, max_value=10)
_scores = st.lists(_score, min_size=1, max_size=20)
_maybe_scores = st.lists(st.one_of(st.none(), _score), max_size=20)
_section = st.sampled_from(list(Section))
_method = st.sampled_from(list(AggregationMethod))
_weight = st.decimals(min_value=0, max_value=5, places=2, allow_nan=False, allow_infinity=False)

_aggregator = SectionAggregator()


def _config(section=Section.ENVIRONMENTAL, method=AggregationMethod.AVERAGE, weight=1):
    return SectionConfig.from_values(section, method, weight)


# ── Section properties ────────────────────────────────────────────────────────

@given(scores=_scores)
def test_average_bounded_by_scores(scores):
    result = _aggregator.calculate(_config(), scores)
    assert Decimal(min(scores)) <= result.score <= Decimal(max(scores))


@given(scores=_scores)
def test_sum_is_exact(scores):
    result = _aggregator.calculate(_config(method=AggregationMethod.SUM), scores)
    assert result.score == Decimal(sum(scores))


@given(scores=_maybe_scores, method=_method, weight=_weight)
def test_absent_iff_no_scored_response(scores, method, weight):
    result = _aggregator.calculate(_config(method=method, weight=weight), scores)
    has_scores = any(s is not None for s in scores)
    assert result.is_absent is (not has_scores)
    assert result.response_count == sum(1 for s in scores if s is not None)


@given(scores=_scores, nulls=st.integers(min_value=1, max_value=5), method=_method, weight=_weight)
def test_nulls_do_not_change_score(scores, nulls, method, weight):
    config = _config(method=method, weight=weight)
    plain = _aggregator.calculate(config, scores)
    padded = _aggregator.calculate(config, [None] * nulls + scores)
    assert plain.score == padded.score


@given(scores=_scores, weight=_weight)
def test_section_score_has_two_places(scores, weight):
    config = _config(method=AggregationMethod.WEIGHTED_AVERAGE, weight=weight)
    result = _aggregator.calculate(config, scores)
    assert result.score == round_score(result.score)


# ── Overall properties ────────────────────────────────────────────────────────

@given(per_section=st.lists(_maybe_scores, min_size=3, max_size=3))
def test_positive_mean_bounded(per_section):
    configs = [_config(section, AggregationMethod.SUM) for section in Section]
    results = [_aggregator.calculate(c, s) for c, s in zip(configs, per_section)]
    overall = OverallAggregator().calculate(results, configs)

    positive = [r.score for r in results if r.score is not None and r.score > 0]
    assert overall.branch is OverallBranch.POSITIVE_MEAN
    if not positive:
        assert overall.overall_score is None
    else:
        assert min(positive) <= overall.overall_score <= max(positive)


@given(
    per_section=st.lists(_scores, min_size=3, max_size=3),
    weight=st.decimals(min_value="0.5", max_value=3, places=1),
)
def test_equal_weights_stay_within_section_means(per_section, weight):
    configs = [
        _config(section, AggregationMethod.WEIGHTED_AVERAGE, weight) for section in Section
    ]
    results = [_aggregator.calculate(c, s) for c, s in zip(configs, per_section)]
    overall = OverallAggregator().calculate(results, configs)

    means = [Decimal(sum(s)) / Decimal(len(s)) for s in per_section]
    tolerance = Decimal("0.01")
    assert overall.branch is OverallBranch.WEIGHTED
    assert min(means) - tolerance <= overall.overall_score <= max(means) + tolerance


# ── Calculator properties ─────────────────────────────────────────────────────

_records = st.lists(
    st.builds(
        ResponseRecord,
        question_id=st.integers(min_value=1, max_value=1000),
        section=_section,
        value=st.just("v"),
        score=st.one_of(st.none(), _score),
    ),
    min_size=1,
    max_size=30,
)


@given(records=_records, data=st.data())
def test_calculator_is_order_independent(records, data):
    configs = [
        _config(section, data.draw(_method), data.draw(_weight)) for section in Section
    ]
    shuffled = data.draw(st.permutations(records))
    calculator = ESGScoreCalculator()
    first = calculator.calculate(records, configs).to_report_payload()
    second = calculator.calculate(shuffled, configs).to_report_payload()
    assert first == second


@given(records=_records)
def test_section_scores_only_for_scored_sections(records):
    configs = [_config(section) for section in Section]
    payload = ESGScoreCalculator().calculate(records, configs).to_report_payload()
    scored = {r.section.value for r in records if r.score is not None}
    assert set(payload["section_scores"]) == scored

"""Unit tests for the ESG scoring core."""
from decimal import Decimal

import pytest

from app.models.enums import AggregationMethod, QuestionType, Section
from app.scoring.errors import (
    InvalidOptionValueError,
    NoResponsesError,
    NoScoringConfigError,
    ScoringError,
)
from app.scoring.esg_calculator import ESGScoreCalculator, ResponseRecord
from app.scoring.option_scores import OptionScoreTable, resolve_question_score
from app.scoring.overall_aggregator import OverallAggregator, OverallBranch, all_weighted
from app.scoring.section_aggregator import SectionAggregator, SectionConfig
from app.scoring.utils import drop_unscored, mean, round_score

E, S, G = Section.ENVIRONMENTAL, Section.SOCIAL, Section.GOVERNANCE
SUM, AVG, WAVG = (
    AggregationMethod.SUM,
    AggregationMethod.AVERAGE,
    AggregationMethod.WEIGHTED_AVERAGE,
)


def cfg(section, method, weight=1):
    return SectionConfig.from_values(section, method, weight)


def rec(section, score, question_id=1, value="x"):
    return ResponseRecord(question_id=question_id, section=section, value=value, score=score)


# ── utils ────────────────────────────────────────────────────────────────────

class TestUtils:

    def test_round_score_half_up(self):
        assert round_score(Decimal("0.125")) == Decimal("0.13")
        assert round_score(Decimal("2.675")) == Decimal("2.68")
        assert round_score(Decimal("1.004")) == Decimal("1.00")

    def test_mean_rejects_empty(self):
        with pytest.raises(ValueError):
            mean([])

    def test_drop_unscored(self):
        assert drop_unscored([1, None, 3]) == [Decimal(1), Decimal(3)]
        assert drop_unscored([None, None]) == []


# ── option score resolution ──────────────────────────────────────────────────

class TestQuestionScoreResolution:

    @pytest.fixture
    def yes_no(self):
        return OptionScoreTable(question_id=7, scores={"yes": 4, "no": 1})

    def test_matching_option_returns_its_score(self, yes_no):
        assert resolve_question_score(QuestionType.YES_NO, yes_no, "yes") == 4
        assert resolve_question_score(QuestionType.YES_NO, yes_no, "no") == 1

    def test_text_input_is_never_scored(self):
        table = OptionScoreTable(question_id=1, scores={"anything": 5})
        assert resolve_question_score(QuestionType.TEXT_INPUT, table, "anything") is None
        assert resolve_question_score("text_input", OptionScoreTable(), "free text") is None

    def test_match_is_case_sensitive(self, yes_no):
        with pytest.raises(InvalidOptionValueError):
            resolve_question_score(QuestionType.YES_NO, yes_no, "Yes")

    def test_unknown_value_raises_not_zero(self, yes_no):
        with pytest.raises(InvalidOptionValueError) as exc_info:
            resolve_question_score(QuestionType.YES_NO, yes_no, "maybe")
        err = exc_info.value
        assert err.value == "maybe"
        assert err.question_type == "yes_no"
        assert err.question_id == 7
        assert "maybe" in str(err)
        assert isinstance(err, ScoringError)

    def test_from_options_reads_value_and_score(self):
        class Opt:
            def __init__(self, value, score):
                self.value, self.score = value, score

        table = OptionScoreTable.from_options([Opt("1", 1), Opt("5", 5)], question_id=3)
        assert len(table) == 2
        assert "5" in table
        assert table.lookup("1") == 1
        assert table.lookup("2") is None


# ── section aggregation ──────────────────────────────────────────────────────

class TestSectionAggregator:

    @pytest.fixture
    def aggregator(self):
        return SectionAggregator()

    def test_average(self, aggregator):
        result = aggregator.calculate(cfg(E, AVG), [4, 4, 4])
        assert result.score == Decimal("4.00")
        assert result.response_count == 3

    def test_sum_drops_nulls(self, aggregator):
        result = aggregator.calculate(cfg(S, SUM), [1, 2, None])
        assert result.score == Decimal("3")
        assert result.response_count == 2

    def test_weighted_average_is_mean_times_weight(self, aggregator):
        result = aggregator.calculate(cfg(G, WAVG, 2), [3, 4])
        assert result.score == Decimal("7.00")

    def test_rounds_to_two_places(self, aggregator):
        result = aggregator.calculate(cfg(E, AVG), [1, 2, 2])
        assert result.score == Decimal("1.67")
        assert result.raw_score != result.score

    def test_rounding_is_half_up(self, aggregator):
        result = aggregator.calculate(cfg(E, WAVG, "0.125"), [1])
        assert result.score == Decimal("0.13")

    def test_no_scored_responses_is_absent(self, aggregator):
        result = aggregator.calculate(cfg(E, AVG), [None, None])
        assert result.is_absent
        assert result.score is None
        assert result.raw_score is None
        assert result.response_count == 0

    def test_empty_is_absent_not_zero(self, aggregator):
        result = aggregator.calculate(cfg(E, SUM), [])
        assert result.is_absent

    def test_zero_scores_are_present(self, aggregator):
        result = aggregator.calculate(cfg(E, SUM), [0, 0])
        assert not result.is_absent
        assert result.score == Decimal("0")

    def test_to_dict(self, aggregator):
        data = aggregator.calculate(cfg(S, AVG), [2, 3]).to_dict()
        assert data["section"] == "Social"
        assert data["method"] == "average"
        assert data["score"] == 2.5


# ── overall aggregation ──────────────────────────────────────────────────────

class TestOverallAggregator:

    def _run(self, configs_and_scores):
        sections = SectionAggregator()
        configs = [c for c, _ in configs_and_scores]
        results = [sections.calculate(c, scores) for c, scores in configs_and_scores]
        return OverallAggregator().calculate(results, configs)

    def test_all_weighted(self):
        assert all_weighted([cfg(E, WAVG), cfg(S, WAVG)])
        assert not all_weighted([cfg(E, WAVG), cfg(S, AVG)])
        assert not all_weighted([])

    def test_weighted_branch_divides_by_total_weight(self):
        # E: 4*2=8, S: 2*1=2, G: 3*1=3 → 13 / 4
        result = self._run([
            (cfg(E, WAVG, 2), [4]),
            (cfg(S, WAVG, 1), [2]),
            (cfg(G, WAVG, 1), [3]),
        ])
        assert result.branch is OverallBranch.WEIGHTED
        assert result.overall_score == Decimal("3.25")
        assert result.total_weight == Decimal(4)

    def test_weighted_branch_counts_weight_of_absent_sections(self):
        result = self._run([
            (cfg(E, WAVG, 2), [4]),
            (cfg(S, WAVG, 1), [None]),
        ])
        # E: 4*2=8, S absent → 8 / (2 + 1)
        assert result.branch is OverallBranch.WEIGHTED
        assert result.total_weight == Decimal(3)
        assert result.overall_score == Decimal("2.67")
        assert result.contributing_sections == [E]

    def test_weighted_branch_with_no_scored_section(self):
        result = self._run([(cfg(E, WAVG, 2), [None]), (cfg(S, WAVG, 1), [])])
        assert result.branch is OverallBranch.POSITIVE_MEAN
        assert result.overall_score is None

    def test_zero_total_weight_falls_back_to_positive_mean(self):
        result = self._run([
            (cfg(E, WAVG, 0), [4]),
            (cfg(S, WAVG, 0), [3]),
        ])
        assert result.branch is OverallBranch.POSITIVE_MEAN
        assert result.overall_score is None

    def test_mixed_methods_use_mean_of_positive_scores(self):
        result = self._run([
            (cfg(E, AVG), [4, 2]),   # 3
            (cfg(S, SUM), [1, 1]),   # 2
            (cfg(G, AVG), [0]),      # 0, excluded
        ])
        assert result.branch is OverallBranch.POSITIVE_MEAN
        assert result.overall_score == Decimal("2.50")
        assert result.contributing_sections == [E, S]

    def test_all_sections_absent_gives_none(self):
        result = self._run([(cfg(E, AVG), [None]), (cfg(S, SUM), [])])
        assert result.overall_score is None

    def test_all_zero_gives_none(self):
        result = self._run([(cfg(E, SUM), [0]), (cfg(S, AVG), [0, 0])])
        assert result.overall_score is None

    def test_overall_is_rounded(self):
        result = self._run([
            (cfg(E, AVG), [1]),
            (cfg(S, AVG), [1]),
            (cfg(G, AVG), [2]),
        ])
        assert result.overall_score == Decimal("1.33")


# ── calculator ───────────────────────────────────────────────────────────────

class TestESGScoreCalculator:

    @pytest.fixture
    def calculator(self):
        return ESGScoreCalculator()

    def test_sample_scenario(self, calculator):
        responses = [rec(E, 4, 1), rec(S, 4, 2), rec(G, 4, 3)]
        configs = [cfg(E, AVG), cfg(S, AVG), cfg(G, AVG)]
        payload = calculator.calculate(responses, configs).to_report_payload()
        assert payload == {
            "overall_score": 4.0,
            "section_scores": {"Environmental": 4.0, "Social": 4.0, "Governance": 4.0},
        }

    def test_no_responses(self, calculator):
        with pytest.raises(NoResponsesError):
            calculator.calculate([], [cfg(E, AVG)], company_id=1, questionnaire_id=2)

    def test_no_configs(self, calculator):
        with pytest.raises(NoScoringConfigError):
            calculator.calculate([rec(E, 4)], [], questionnaire_id=2)

    def test_duplicate_section_configs_rejected(self, calculator):
        with pytest.raises(ValueError):
            calculator.calculate([rec(E, 4)], [cfg(E, AVG), cfg(E, SUM)])

    def test_section_without_config_is_skipped(self, calculator):
        result = calculator.calculate([rec(E, 4, 1), rec(S, 1, 2)], [cfg(E, AVG)])
        assert result.section_scores == {"Environmental": 4.0}
        assert result.skipped_sections == [S]
        assert result.overall_score == 4.0

    def test_text_only_section_is_left_out(self, calculator):
        responses = [rec(E, 3, 1), rec(G, None, 2, value="free text")]
        result = calculator.calculate(responses, [cfg(E, AVG), cfg(G, AVG)])
        assert result.section_scores == {"Environmental": 3.0}
        assert "Governance" not in result.section_scores

    def test_only_unscored_responses(self, calculator):
        result = calculator.calculate([rec(E, None)], [cfg(E, AVG)])
        assert result.section_scores == {}
        assert result.overall_score is None

    def test_weighted_configs(self, calculator):
        responses = [rec(E, 4, 1), rec(E, 2, 2), rec(S, 4, 3)]
        configs = [cfg(E, WAVG, "0.5"), cfg(S, WAVG, "0.5")]
        result = calculator.calculate(responses, configs)
        # E: 3*0.5=1.5, S: 4*0.5=2 → 3.5 / 1.0
        assert result.section_scores == {"Environmental": 1.5, "Social": 2.0}
        assert result.overall_score == 3.5
        assert result.overall.branch is OverallBranch.WEIGHTED

    def test_weighted_config_without_responses_dilutes_overall(self, calculator):
        result = calculator.calculate([rec(E, 4)], [cfg(E, WAVG, 2), cfg(S, WAVG, 1)])
        assert result.section_scores == {"Environmental": 8.0}
        assert result.overall_score == 2.67

    def test_response_order_does_not_matter(self, calculator):
        responses = [rec(E, 1, 1), rec(S, 3, 2), rec(E, 4, 3), rec(G, 2, 4)]
        configs = [cfg(E, AVG), cfg(S, SUM), cfg(G, AVG)]
        forward = calculator.calculate(responses, configs).to_report_payload()
        backward = calculator.calculate(responses[::-1], configs[::-1]).to_report_payload()
        assert forward == backward

    def test_to_dict_includes_audit_fields(self, calculator):
        data = calculator.calculate(
            [rec(E, 2)], [cfg(E, SUM)], company_id=5, questionnaire_id=6
        ).to_dict()
        assert data["company_id"] == 5
        assert data["questionnaire_id"] == 6
        assert data["branch"] == "positive_mean"
        assert data["skipped_sections"] == []

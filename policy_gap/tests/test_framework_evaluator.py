"""
Tests for framework-level evaluation.
"""

import pytest
from policy_gap.benchmarking import (
    FrameworkEvaluator,
    MaturityLevel,
    RuleEvaluator,
    UnknownFrameworkError,
)
from policy_gap.catalog import Criticality, Framework, Rule
from policy_gap.utils import round_half_up


def keyword_rule(keywords, criticality=Criticality.MEDIUM):
    return Rule(
        title="Keyword Rule",
        requirement="",
        category="Testing",
        criticality=criticality,
        benchmark_criteria=(),
        keywords=tuple(keywords),
    )


class TestFrameworkEvaluator:
    """Test suite for FrameworkEvaluator."""

    @pytest.fixture
    def evaluator(self):
        return FrameworkEvaluator()

    @pytest.fixture
    def keyword_evaluator(self):
        """Evaluator over a small framework scored on keywords only."""
        framework = Framework(
            framework_id="TEST",
            name="Test Framework",
            jurisdiction="Nowhere",
            rules={
                "three_of_four": keyword_rule(["alpha", "bravo", "charlie", "delta"]),
                "all": keyword_rule(["alpha"]),
                "none": keyword_rule(["zulu"], Criticality.CRITICAL),
            },
        )
        return FrameworkEvaluator(
            frameworks={"TEST": framework},
            rule_evaluator=RuleEvaluator(keyword_weight=100, criteria_weight=0),
        )

    def test_overall_score_formula(self, evaluator, privacy_policy, resume):
        """Test overall score against the sum of rule scores."""
        for text in (privacy_policy, resume):
            result = evaluator.evaluate_framework(text, "SOX")
            total = sum(e.score for e in result.rule_evaluations)
            total_max = sum(e.max_score for e in result.rule_evaluations)

            assert result.overall_score == round_half_up(total / total_max * 100)
            assert 0 <= result.overall_score <= 100

    def test_complete_policy_scores_high(self, evaluator, privacy_policy):
        """Test that a policy covering GDPR scores in the advanced band."""
        result = evaluator.evaluate_framework(privacy_policy, "GDPR")

        assert result.overall_score >= 90
        assert result.maturity_level == MaturityLevel.ADVANCED
        assert result.recommendations == []
        assert len(result.strengths) == len(result.rule_evaluations)

    def test_unrelated_text_scores_initial(self, evaluator, resume):
        """Test that an unrelated document lands in the initial band."""
        result = evaluator.evaluate_framework(resume, "HIPAA")

        assert result.maturity_level == MaturityLevel.INITIAL
        assert len(result.recommendations) == len(result.rule_evaluations)
        assert result.count_issues(Criticality.CRITICAL) == 3

    def test_unknown_framework_raises(self, evaluator, privacy_policy):
        """Test that an unregistered framework is a distinct error."""
        with pytest.raises(UnknownFrameworkError) as excinfo:
            evaluator.evaluate_framework(privacy_policy, "FOO")

        assert excinfo.value.framework_id == "FOO"
        assert isinstance(excinfo.value, KeyError)
        assert str(excinfo.value) == "Framework FOO not supported"

    def test_middle_band_is_neither_gap_nor_strength(self, keyword_evaluator):
        """Test that a 75% rule is neither a recommendation nor a strength."""
        result = keyword_evaluator.evaluate_framework("alpha bravo charlie", "TEST")

        gap_ids = [g.rule_id for g in result.recommendations]
        strength_ids = [s.rule_id for s in result.strengths]

        assert "three_of_four" not in gap_ids
        assert "three_of_four" not in strength_ids
        assert strength_ids == ["all"]
        assert gap_ids == ["none"]

    def test_gap_carries_framework_context(self, keyword_evaluator):
        """Test that gaps record their framework and target score."""
        result = keyword_evaluator.evaluate_framework("alpha", "TEST")
        gap = next(g for g in result.recommendations if g.rule_id == "none")

        assert gap.framework_id == "TEST"
        assert gap.framework_name == "Test Framework"
        assert gap.jurisdiction == "Nowhere"
        assert gap.current_score == 0
        assert gap.target_score == 90

    def test_overall_score_rounds_half_up(self, keyword_evaluator):
        """Test rounding of the overall score."""
        # 75 + 100 + 0 over 300 = 58.33
        result = keyword_evaluator.evaluate_framework("alpha bravo charlie", "TEST")

        assert result.overall_score == 58
        assert result.maturity_level == MaturityLevel.BASIC

    def test_empty_framework_scores_zero(self):
        """Test that a framework without rules scores zero."""
        empty = Framework(framework_id="EMPTY", name="Empty", jurisdiction="", rules={})
        evaluator = FrameworkEvaluator(frameworks={"EMPTY": empty})
        result = evaluator.evaluate_framework("text", "EMPTY")

        assert result.overall_score == 0
        assert result.maturity_level == MaturityLevel.INITIAL

    @pytest.mark.parametrize("score,level", [
        (100, MaturityLevel.ADVANCED),
        (90, MaturityLevel.ADVANCED),
        (89, MaturityLevel.INTERMEDIATE),
        (75, MaturityLevel.INTERMEDIATE),
        (74, MaturityLevel.DEVELOPING),
        (60, MaturityLevel.DEVELOPING),
        (59, MaturityLevel.BASIC),
        (40, MaturityLevel.BASIC),
        (39, MaturityLevel.INITIAL),
        (0, MaturityLevel.INITIAL),
    ])
    def test_maturity_boundaries(self, score, level):
        """Test inclusive lower bounds of maturity levels."""
        assert MaturityLevel.from_score(score) == level

    def test_to_dict(self, evaluator, privacy_policy):
        """Test serialization of a framework result."""
        data = evaluator.evaluate_framework(privacy_policy, "HIPAA").to_dict()

        assert data['framework'] == "HIPAA"
        assert data['maturity_level'] in [m.value for m in MaturityLevel]
        assert set(data['rule_evaluations']) == {
            "administrative_safeguards", "physical_safeguards",
            "technical_safeguards", "breach_notification",
        }

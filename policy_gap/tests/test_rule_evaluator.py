"""
Tests for single rule scoring.
"""

import pytest
from policy_gap.benchmarking import RuleEvaluator, RuleEvaluation
from policy_gap.catalog import FRAMEWORKS, Criticality, Rule


def make_rule(criteria=(), keywords=(), criticality=Criticality.HIGH):
    return Rule(
        title="Test Rule",
        requirement="A test requirement",
        category="Testing",
        criticality=criticality,
        benchmark_criteria=tuple(criteria),
        keywords=tuple(keywords),
    )


class TestRuleEvaluator:
    """Test suite for RuleEvaluator."""

    @pytest.fixture
    def evaluator(self):
        return RuleEvaluator()

    def test_full_match_scores_100(self, evaluator, privacy_policy):
        """Test that a rule fully covered by the text scores the maximum."""
        rule = FRAMEWORKS["GDPR"].rules["lawful_basis"]
        evaluation = evaluator.evaluate_rule(privacy_policy, rule, rule_id="lawful_basis")

        assert isinstance(evaluation, RuleEvaluation)
        assert evaluation.score == 100
        assert evaluation.gaps == []
        assert evaluation.keyword_matches == evaluation.total_keywords

    def test_no_match_scores_zero(self, evaluator):
        """Test that unrelated text scores zero and lists every criterion as a gap."""
        rule = FRAMEWORKS["SOX"].rules["auditor_independence"]
        evaluation = evaluator.evaluate_rule("The weather was mild.", rule)

        assert evaluation.score == 0
        assert evaluation.gaps == list(rule.benchmark_criteria)
        assert evaluation.recommendations == [f"Implement: {c}" for c in rule.benchmark_criteria]

    def test_keyword_component(self, evaluator):
        """Test that keyword coverage contributes up to 40 points."""
        rule = make_rule(keywords=("alpha", "bravo", "charlie", "delta"))
        evaluation = evaluator.evaluate_rule("alpha and bravo", rule)

        assert evaluation.score == 20
        assert evaluation.keyword_matches == 2
        assert evaluation.keyword_coverage == 50

    def test_criteria_component(self, evaluator):
        """Test that criteria share 60 points evenly."""
        rule = make_rule(criteria=("Encryption keys rotated", "Quarterly vendor reviews"))
        evaluation = evaluator.evaluate_rule("Encryption keys are rotated monthly.", rule)

        assert evaluation.score == 30
        assert evaluation.gaps == ["Quarterly vendor reviews"]
        assert evaluation.recommendations == ["Implement: Quarterly vendor reviews"]

    def test_matching_is_case_insensitive(self, evaluator):
        """Test case-insensitive keyword matching."""
        rule = make_rule(keywords=("Data Protection",))
        evaluation = evaluator.evaluate_rule("DATA PROTECTION matters", rule)

        assert evaluation.score == 40

    def test_degenerate_rule_scores_zero(self, evaluator):
        """Test that a rule without keywords or criteria scores zero."""
        evaluation = evaluator.evaluate_rule("anything at all", make_rule())

        assert evaluation.score == 0
        assert evaluation.gaps == []

    def test_rule_without_keywords_uses_criteria_only(self, evaluator):
        """Test that an empty keyword list contributes nothing."""
        rule = make_rule(criteria=("Audit logs maintained",))
        evaluation = evaluator.evaluate_rule("Audit logs are maintained.", rule)

        assert evaluation.score == 60

    def test_score_always_in_bounds(self, evaluator, privacy_policy, resume):
        """Test that every catalog rule scores within [0, 100]."""
        for framework in FRAMEWORKS.values():
            for rule_id, rule in framework.rules.items():
                for text in (privacy_policy, resume, ""):
                    evaluation = evaluator.evaluate_rule(text, rule, rule_id=rule_id)
                    assert 0 <= evaluation.score <= 100
                    assert evaluation.max_score == 100

    def test_extract_keywords_drops_stop_words(self, evaluator):
        """Test keyword extraction from criterion text."""
        keywords = evaluator.extract_keywords("Right to access procedures defined")

        assert keywords == ["right", "access", "procedures", "defined"]

    def test_extract_keywords_limit(self, evaluator):
        """Test that at most six keywords are taken."""
        keywords = evaluator.extract_keywords(
            "alpha bravo charlie delta echo foxtrot golf hotel"
        )

        assert len(keywords) == 6
        assert keywords[-1] == "foxtrot"

    def test_extract_keywords_strips_punctuation(self, evaluator):
        """Test punctuation handling in criterion text."""
        assert evaluator.extract_keywords("Privacy-friendly default settings") == [
            "privacy", "friendly", "default", "settings"
        ]

    def test_criterion_without_keywords_never_met(self, evaluator):
        """Test that a criterion made only of stop words is never met."""
        assert not evaluator.criterion_met("to be or not to be", "to be or")

    def test_non_text_input_rejected(self, evaluator):
        """Test that non-string input fails fast."""
        with pytest.raises(TypeError):
            evaluator.evaluate_rule(None, make_rule())

"""
Scoring of a single rule against policy text.

A rule earns up to 100 points:
- 40 points for keyword coverage
- 60 points split evenly across its benchmark criteria
"""

import re
from dataclasses import dataclass, field

from ..catalog.frameworks import Rule, Criticality
from ..utils import clamp, percentage, require_text, round_half_up


@dataclass
class RuleEvaluation:
    """Result of scoring one rule against one document."""

    rule_id: str
    title: str
    category: str
    criticality: Criticality
    score: int
    max_score: int = 100
    gaps: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    keyword_matches: int = 0
    total_keywords: int = 0

    @property
    def percentage(self) -> int:
        """Score as a percentage of the maximum."""
        return round_half_up(percentage(self.score, self.max_score))

    @property
    def keyword_coverage(self) -> int:
        """Share of the rule's keywords found in the document."""
        return round_half_up(percentage(self.keyword_matches, self.total_keywords))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'rule_id': self.rule_id,
            'title': self.title,
            'category': self.category,
            'criticality': self.criticality.value,
            'score': self.score,
            'max_score': self.max_score,
            'percentage': self.percentage,
            'gaps': self.gaps,
            'recommendations': self.recommendations,
            'keyword_matches': self.keyword_matches,
            'total_keywords': self.total_keywords,
            'keyword_coverage': self.keyword_coverage,
        }


class RuleEvaluator:
    """
    Scores policy text against a single catalog rule.

    Matching is case-insensitive substring matching. A rule with no keywords
    or no criteria scores 0 for that component.
    """

    STOP_WORDS = frozenset({
        'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for',
        'of', 'with', 'by', 'is', 'are', 'be', 'been', 'being', 'have', 'has',
        'had', 'do', 'does', 'did', 'will', 'would', 'could', 'should',
    })

    MAX_SCORE = 100

    def __init__(
        self,
        keyword_weight: float = 40.0,
        criteria_weight: float = 60.0,
        criterion_match_ratio: float = 0.5,
        max_criterion_keywords: int = 6
    ):
        """
        Initialize evaluator.

        Args:
            keyword_weight: Points available for keyword coverage
            criteria_weight: Points shared across benchmark criteria
            criterion_match_ratio: Share of criterion keywords needed to meet it
            max_criterion_keywords: Keywords taken from each criterion
        """
        self.keyword_weight = keyword_weight
        self.criteria_weight = criteria_weight
        self.criterion_match_ratio = criterion_match_ratio
        self.max_criterion_keywords = max_criterion_keywords

    def evaluate_rule(self, text: str, rule: Rule, rule_id: str = "") -> RuleEvaluation:
        """
        Score a rule against document text.

        Args:
            text: Policy document text
            rule: Catalog rule to evaluate
            rule_id: Identifier of the rule within its framework

        Returns:
            RuleEvaluation with score, gaps and remediation strings
        """
        require_text(text)
        normalized = text.lower()

        matched_keywords = [kw for kw in rule.keywords if kw.lower() in normalized]
        if rule.keywords:
            keyword_score = len(matched_keywords) / len(rule.keywords) * self.keyword_weight
        else:
            keyword_score = 0.0

        gaps = []
        recommendations = []
        criteria_score = 0.0
        if rule.benchmark_criteria:
            points_per_criterion = self.criteria_weight / len(rule.benchmark_criteria)
            for criterion in rule.benchmark_criteria:
                if self.criterion_met(normalized, criterion):
                    criteria_score += points_per_criterion
                else:
                    gaps.append(criterion)
                    recommendations.append(f"Implement: {criterion}")

        score = round_half_up(clamp(keyword_score + criteria_score, 0, self.MAX_SCORE))

        return RuleEvaluation(
            rule_id=rule_id,
            title=rule.title,
            category=rule.category,
            criticality=rule.criticality,
            score=score,
            max_score=self.MAX_SCORE,
            gaps=gaps,
            recommendations=recommendations,
            keyword_matches=len(matched_keywords),
            total_keywords=len(rule.keywords),
        )

    def criterion_met(self, normalized_text: str, criterion: str) -> bool:
        """Check whether enough of a criterion's keywords appear in the text."""
        keywords = self.extract_keywords(criterion)
        if not keywords:
            return False
        matched = sum(1 for kw in keywords if kw in normalized_text)
        return matched / len(keywords) >= self.criterion_match_ratio

    def extract_keywords(self, text: str) -> list[str]:
        """Meaningful lowercase tokens of a criterion, in order."""
        tokens = re.sub(r'[^\w\s]', ' ', text.lower()).split()
        keywords = [t for t in tokens if len(t) > 2 and t not in self.STOP_WORDS]
        return keywords[:self.max_criterion_keywords]

"""
Framework-level aggregation of rule scores.

Runs every rule of a framework against the document and turns the results
into an overall score, a maturity level, and lists of gaps and strengths.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

from ..catalog.frameworks import FRAMEWORKS, Framework, Criticality
from ..utils import require_text, round_half_up
from .rule_evaluator import RuleEvaluator, RuleEvaluation


class UnknownFrameworkError(KeyError):
    """Raised when a framework id is not in the rule catalog."""

    def __init__(self, framework_id: str):
        super().__init__(framework_id)
        self.framework_id = framework_id

    def __str__(self) -> str:
        return f"Framework {self.framework_id} not supported"


class MaturityLevel(Enum):
    """Qualitative maturity derived from a framework score."""
    INITIAL = "Initial"
    BASIC = "Basic"
    DEVELOPING = "Developing"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    @classmethod
    def from_score(cls, score: float) -> "MaturityLevel":
        """Map a 0-100 score to a maturity level (inclusive lower bounds)."""
        if score >= 90:
            return cls.ADVANCED
        elif score >= 75:
            return cls.INTERMEDIATE
        elif score >= 60:
            return cls.DEVELOPING
        elif score >= 40:
            return cls.BASIC
        return cls.INITIAL


@dataclass
class Gap:
    """A rule that scored below the recommendation threshold."""

    rule_id: str
    title: str
    category: str
    criticality: Criticality
    gaps: list[str]
    recommendations: list[str]
    current_score: int
    target_score: int = 90
    framework_id: Optional[str] = None
    framework_name: Optional[str] = None
    jurisdiction: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'rule_id': self.rule_id,
            'title': self.title,
            'category': self.category,
            'criticality': self.criticality.value,
            'gaps': self.gaps,
            'recommendations': self.recommendations,
            'current_score': self.current_score,
            'target_score': self.target_score,
            'framework': self.framework_id,
            'framework_name': self.framework_name,
            'jurisdiction': self.jurisdiction,
        }


@dataclass
class Strength:
    """A rule that scored at or above the strength threshold."""

    rule_id: str
    title: str
    score: int
    framework_id: Optional[str] = None
    framework_name: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'rule_id': self.rule_id,
            'title': self.title,
            'score': self.score,
            'framework': self.framework_id,
            'framework_name': self.framework_name,
        }


@dataclass
class FrameworkResult:
    """Benchmark result for one framework."""

    framework_id: str
    name: str
    jurisdiction: str
    overall_score: int
    maturity_level: MaturityLevel
    rule_evaluations: list[RuleEvaluation] = field(default_factory=list)
    recommendations: list[Gap] = field(default_factory=list)
    strengths: list[Strength] = field(default_factory=list)
    max_score: int = 100

    def count_issues(self, criticality: Criticality) -> int:
        """Number of gaps with the given criticality."""
        return sum(1 for gap in self.recommendations if gap.criticality == criticality)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'framework': self.framework_id,
            'name': self.name,
            'jurisdiction': self.jurisdiction,
            'overall_score': self.overall_score,
            'max_score': self.max_score,
            'maturity_level': self.maturity_level.value,
            'rule_evaluations': {e.rule_id: e.to_dict() for e in self.rule_evaluations},
            'recommendations': [g.to_dict() for g in self.recommendations],
            'strengths': [s.to_dict() for s in self.strengths],
        }


class FrameworkEvaluator:
    """
    Evaluates a document against one framework of the rule catalog.

    Rules scoring below 70% of their maximum become recommendations, rules
    at or above 80% become strengths. Scores in between are neither.
    """

    RECOMMENDATION_THRESHOLD = 0.7
    STRENGTH_THRESHOLD = 0.8

    def __init__(
        self,
        frameworks: Optional[Mapping[str, Framework]] = None,
        rule_evaluator: Optional[RuleEvaluator] = None
    ):
        """
        Initialize evaluator.

        Args:
            frameworks: Catalog to evaluate against (defaults to the built-in catalog)
            rule_evaluator: Optional RuleEvaluator instance for rule scoring
        """
        self.frameworks = FRAMEWORKS if frameworks is None else frameworks
        self.rule_evaluator = rule_evaluator or RuleEvaluator()

    def evaluate_framework(self, text: str, framework_id: str) -> FrameworkResult:
        """
        Evaluate policy text against a framework.

        Args:
            text: Policy document text
            framework_id: Catalog id such as "GDPR"

        Returns:
            FrameworkResult for the framework

        Raises:
            UnknownFrameworkError: If the framework is not in the catalog
        """
        require_text(text)
        framework = self.frameworks.get(framework_id)
        if framework is None:
            raise UnknownFrameworkError(framework_id)

        evaluations = []
        recommendations = []
        strengths = []
        total_score = 0
        total_max_score = 0

        for rule_id, rule in framework.rules.items():
            evaluation = self.rule_evaluator.evaluate_rule(text, rule, rule_id=rule_id)
            evaluations.append(evaluation)
            total_score += evaluation.score
            total_max_score += evaluation.max_score

            if evaluation.score < evaluation.max_score * self.RECOMMENDATION_THRESHOLD:
                recommendations.append(Gap(
                    rule_id=rule_id,
                    title=rule.title,
                    category=rule.category,
                    criticality=rule.criticality,
                    gaps=list(evaluation.gaps),
                    recommendations=list(evaluation.recommendations),
                    current_score=evaluation.percentage,
                    framework_id=framework.framework_id,
                    framework_name=framework.name,
                    jurisdiction=framework.jurisdiction,
                ))
            elif evaluation.score >= evaluation.max_score * self.STRENGTH_THRESHOLD:
                strengths.append(Strength(
                    rule_id=rule_id,
                    title=rule.title,
                    score=evaluation.percentage,
                    framework_id=framework.framework_id,
                    framework_name=framework.name,
                ))

        if total_max_score:
            overall = round_half_up(total_score / total_max_score * 100)
        else:
            overall = 0

        return FrameworkResult(
            framework_id=framework.framework_id,
            name=framework.name,
            jurisdiction=framework.jurisdiction,
            overall_score=overall,
            maturity_level=MaturityLevel.from_score(overall),
            rule_evaluations=evaluations,
            recommendations=recommendations,
            strengths=strengths,
        )

"""
Cross-framework benchmarking.

Evaluates a document against a set of frameworks and aggregates the
results into an overall compliance posture:
- Average score and maturity distribution
- Gap tallies by criticality
- Industry benchmark comparison
- Compliance matrix and prioritized recommendations
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from ..catalog.frameworks import Criticality
from ..catalog.industry import IndustryBenchmark, get_industry_benchmark
from ..utils import require_text, round_half_up
from .framework_evaluator import (
    FrameworkEvaluator,
    FrameworkResult,
    Gap,
    MaturityLevel,
    Strength,
    UnknownFrameworkError,
)
from .prioritizer import RecommendationPrioritizer, PrioritizedRecommendation

logger = logging.getLogger(__name__)


@dataclass
class ComplianceMatrixRow:
    """One row of the compliance matrix."""

    framework_id: str
    name: str
    score: int
    maturity: MaturityLevel
    critical_issues: int
    high_issues: int

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'framework': self.framework_id,
            'name': self.name,
            'score': self.score,
            'maturity': self.maturity.value,
            'critical_issues': self.critical_issues,
            'high_issues': self.high_issues,
        }


@dataclass
class BenchmarkReport:
    """Aggregated benchmark across the requested frameworks."""

    industry: str
    industry_benchmark: IndustryBenchmark
    average_score: int = 0
    benchmark_comparison: str = ""
    critical_gaps: int = 0
    high_gaps: int = 0
    medium_gaps: int = 0
    total_strengths: int = 0
    maturity_distribution: dict[str, int] = field(default_factory=dict)
    framework_results: dict[str, FrameworkResult] = field(default_factory=dict)
    top_strengths: list[Strength] = field(default_factory=list)
    compliance_matrix: list[ComplianceMatrixRow] = field(default_factory=list)
    prioritized_recommendations: list[PrioritizedRecommendation] = field(default_factory=list)
    skipped_frameworks: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'overall_results': {
                'average_score': self.average_score,
                'maturity_distribution': self.maturity_distribution,
                'critical_gaps': self.critical_gaps,
                'high_gaps': self.high_gaps,
                'medium_gaps': self.medium_gaps,
                'total_strengths': self.total_strengths,
                'industry': self.industry,
                'industry_benchmark': self.industry_benchmark.to_dict(),
                'benchmark_comparison': self.benchmark_comparison,
            },
            'framework_results': {
                fid: result.to_dict() for fid, result in self.framework_results.items()
            },
            'prioritized_recommendations': [r.to_dict() for r in self.prioritized_recommendations],
            'top_strengths': [s.to_dict() for s in self.top_strengths],
            'compliance_matrix': [row.to_dict() for row in self.compliance_matrix],
            'skipped_frameworks': self.skipped_frameworks,
        }


class BenchmarkOrchestrator:
    """
    Benchmarks a document against several regulatory frameworks.

    Each framework is evaluated independently. An unknown framework id is
    logged and skipped so that the remaining frameworks still produce a
    report.
    """

    DEFAULT_FRAMEWORKS = ("GDPR", "HIPAA", "SOX")
    TOP_STRENGTHS = 5

    def __init__(
        self,
        framework_evaluator: Optional[FrameworkEvaluator] = None,
        prioritizer: Optional[RecommendationPrioritizer] = None,
        default_frameworks: tuple[str, ...] = DEFAULT_FRAMEWORKS,
        default_industry: str = "Technology"
    ):
        """
        Initialize orchestrator.

        Args:
            framework_evaluator: Evaluator used per framework
            prioritizer: Ranks the collected gaps
            default_frameworks: Frameworks used when none are requested
            default_industry: Industry used when none is given
        """
        self.framework_evaluator = framework_evaluator or FrameworkEvaluator()
        self.prioritizer = prioritizer or RecommendationPrioritizer()
        self.default_frameworks = tuple(default_frameworks)
        self.default_industry = default_industry

    def normalize_frameworks(
        self,
        framework_ids: Union[str, list[str], tuple[str, ...], None]
    ) -> list[str]:
        """Turn the requested frameworks into a non-empty list without duplicates."""
        if not framework_ids:
            return list(self.default_frameworks)
        if isinstance(framework_ids, str):
            return [framework_ids]
        # First occurrence wins
        return list(dict.fromkeys(framework_ids))

    def benchmark(
        self,
        text: str,
        framework_ids: Union[str, list[str], tuple[str, ...], None] = None,
        industry: Optional[str] = None
    ) -> BenchmarkReport:
        """
        Benchmark policy text against the requested frameworks.

        Args:
            text: Policy document text
            framework_ids: Framework ids to evaluate (defaults when empty)
            industry: Industry for benchmark comparison

        Returns:
            BenchmarkReport with aggregated results
        """
        require_text(text)
        frameworks = self.normalize_frameworks(framework_ids)
        industry = industry or self.default_industry
        logger.debug("benchmarking frameworks: %s", frameworks)

        report = BenchmarkReport(
            industry=industry,
            industry_benchmark=get_industry_benchmark(industry),
        )

        all_gaps: list[Gap] = []
        all_strengths: list[Strength] = []

        for framework_id in frameworks:
            try:
                result = self.framework_evaluator.evaluate_framework(text, framework_id)
            except UnknownFrameworkError as e:
                logger.warning("Could not evaluate framework %s: %s", framework_id, e)
                report.skipped_frameworks.append(framework_id)
                continue

            report.framework_results[framework_id] = result
            all_gaps.extend(result.recommendations)
            all_strengths.extend(result.strengths)

            report.compliance_matrix.append(ComplianceMatrixRow(
                framework_id=framework_id,
                name=result.name,
                score=result.overall_score,
                maturity=result.maturity_level,
                critical_issues=result.count_issues(Criticality.CRITICAL),
                high_issues=result.count_issues(Criticality.HIGH),
            ))

        scores = [r.overall_score for r in report.framework_results.values()]
        report.average_score = round_half_up(sum(scores) / len(scores)) if scores else 0

        distribution = {level.value: 0 for level in MaturityLevel}
        for result in report.framework_results.values():
            distribution[result.maturity_level.value] += 1
        report.maturity_distribution = distribution

        # Low criticality gaps are tallied with medium
        for gap in all_gaps:
            if gap.criticality == Criticality.CRITICAL:
                report.critical_gaps += 1
            elif gap.criticality == Criticality.HIGH:
                report.high_gaps += 1
            else:
                report.medium_gaps += 1

        report.total_strengths = len(all_strengths)
        report.benchmark_comparison = report.industry_benchmark.compare(report.average_score)
        report.prioritized_recommendations = self.prioritizer.prioritize(all_gaps)
        report.top_strengths = sorted(
            all_strengths, key=lambda s: s.score, reverse=True
        )[:self.TOP_STRENGTHS]

        return report

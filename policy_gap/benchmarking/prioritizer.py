"""
Prioritization of compliance gaps into an ordered action list.
"""

from dataclasses import dataclass
from enum import Enum

from ..catalog.frameworks import Criticality
from .framework_evaluator import Gap


class Effort(Enum):
    """Estimated implementation effort."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass
class PrioritizedRecommendation:
    """A gap annotated with its rank and implementation guidance."""

    priority: int
    gap: Gap
    estimated_effort: Effort
    timeframe: str
    business_impact: str

    @property
    def criticality(self) -> Criticality:
        return self.gap.criticality

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = {'priority': self.priority}
        data.update(self.gap.to_dict())
        data.update({
            'estimated_effort': self.estimated_effort.value,
            'timeframe': self.timeframe,
            'business_impact': self.business_impact,
        })
        return data


class RecommendationPrioritizer:
    """
    Ranks gaps from all frameworks into a single ordered list.

    Order is criticality first, then more unmet criteria, then lower current
    score. Framework and rule ids break any remaining ties so the output does
    not depend on input order.
    """

    TIMEFRAMES = {
        Criticality.CRITICAL: "Immediate (0-30 days)",
        Criticality.HIGH: "Short-term (30-90 days)",
        Criticality.MEDIUM: "Medium-term (90-180 days)",
        Criticality.LOW: "Long-term (180+ days)",
    }

    BUSINESS_IMPACTS = {
        Criticality.CRITICAL: "High regulatory and financial risk",
        Criticality.HIGH: "Moderate compliance and operational risk",
        Criticality.MEDIUM: "Low to moderate process risk",
        Criticality.LOW: "Minor operational efficiency impact",
    }

    def prioritize(self, gaps: list[Gap]) -> list[PrioritizedRecommendation]:
        """
        Rank gaps and annotate each with effort, timeframe and impact.

        Args:
            gaps: Gaps collected from one or more framework evaluations

        Returns:
            PrioritizedRecommendation list, priority 1 first
        """
        ordered = sorted(gaps, key=self._sort_key)

        return [
            PrioritizedRecommendation(
                priority=index + 1,
                gap=gap,
                estimated_effort=self.estimate_effort(gap),
                timeframe=self.TIMEFRAMES[gap.criticality],
                business_impact=self.BUSINESS_IMPACTS[gap.criticality],
            )
            for index, gap in enumerate(ordered)
        ]

    def _sort_key(self, gap: Gap) -> tuple:
        return (
            gap.criticality.rank,
            -len(gap.gaps),
            gap.current_score,
            gap.framework_id or "",
            gap.rule_id,
        )

    def estimate_effort(self, gap: Gap) -> Effort:
        """Estimate implementation effort from score and unmet criteria."""
        gap_count = len(gap.gaps)
        if gap.current_score < 30 or gap_count >= 4:
            return Effort.HIGH
        if gap.current_score < 60 or gap_count >= 2:
            return Effort.MEDIUM
        return Effort.LOW

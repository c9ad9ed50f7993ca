"""
Industry benchmark reference values.

Reference scores are used for comparison only; they never feed back into
framework scoring.
"""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class IndustryBenchmark:
    """Reference average, median and top-decile scores for an industry."""

    industry: str
    average: int
    median: int
    top10: int

    def compare(self, score: float) -> str:
        """Classify a score against this benchmark."""
        if score >= self.top10:
            return "Top 10% performer"
        elif score >= self.average:
            return "Above average"
        elif score >= self.median:
            return "Below average"
        return "Significant improvement needed"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'industry': self.industry,
            'average': self.average,
            'median': self.median,
            'top10': self.top10,
        }


DEFAULT_INDUSTRY = "Default"

INDUSTRY_BENCHMARKS = MappingProxyType({
    "Technology": IndustryBenchmark("Technology", average=78, median=75, top10=92),
    "Healthcare": IndustryBenchmark("Healthcare", average=85, median=83, top10=95),
    "Financial": IndustryBenchmark("Financial", average=88, median=86, top10=96),
    "Manufacturing": IndustryBenchmark("Manufacturing", average=72, median=70, top10=89),
    "Retail": IndustryBenchmark("Retail", average=70, median=68, top10=87),
    DEFAULT_INDUSTRY: IndustryBenchmark(DEFAULT_INDUSTRY, average=75, median=73, top10=90),
})


def get_industry_benchmark(industry: str) -> IndustryBenchmark:
    """Benchmark for an industry, falling back to the Default row."""
    return INDUSTRY_BENCHMARKS.get(industry, INDUSTRY_BENCHMARKS[DEFAULT_INDUSTRY])

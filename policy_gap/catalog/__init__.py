"""Static rule catalog and industry reference data."""

from .frameworks import (
    Criticality,
    Rule,
    Framework,
    FRAMEWORKS,
    get_framework,
    list_frameworks,
)
from .industry import IndustryBenchmark, INDUSTRY_BENCHMARKS, get_industry_benchmark

__all__ = [
    "Criticality",
    "Rule",
    "Framework",
    "FRAMEWORKS",
    "get_framework",
    "list_frameworks",
    "IndustryBenchmark",
    "INDUSTRY_BENCHMARKS",
    "get_industry_benchmark",
]

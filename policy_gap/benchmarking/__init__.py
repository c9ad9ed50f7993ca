"""Benchmarking module for scoring policy text against regulatory frameworks."""

from .rule_evaluator import RuleEvaluator, RuleEvaluation
from .framework_evaluator import (
    FrameworkEvaluator,
    FrameworkResult,
    Gap,
    MaturityLevel,
    Strength,
    UnknownFrameworkError,
)
from .prioritizer import RecommendationPrioritizer, PrioritizedRecommendation, Effort
from .orchestrator import BenchmarkOrchestrator, BenchmarkReport, ComplianceMatrixRow

__all__ = [
    "RuleEvaluator",
    "RuleEvaluation",
    "FrameworkEvaluator",
    "FrameworkResult",
    "Gap",
    "MaturityLevel",
    "Strength",
    "UnknownFrameworkError",
    "RecommendationPrioritizer",
    "PrioritizedRecommendation",
    "Effort",
    "BenchmarkOrchestrator",
    "BenchmarkReport",
    "ComplianceMatrixRow",
]

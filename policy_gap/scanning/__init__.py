"""Scanning module for policy-type detection and structural completeness."""

from .policy_types import POLICY_TYPES, COMPLIANCE_CITATIONS, PolicyType, PolicySection, CitationTable
from .structure_scanner import (
    StructureScanner,
    StructureScanResult,
    DetectedPolicy,
    DocumentFormat,
    ScanRecommendation,
    ScanSummary,
)

__all__ = [
    "POLICY_TYPES",
    "COMPLIANCE_CITATIONS",
    "PolicyType",
    "PolicySection",
    "CitationTable",
    "StructureScanner",
    "StructureScanResult",
    "DetectedPolicy",
    "DocumentFormat",
    "ScanRecommendation",
    "ScanSummary",
]

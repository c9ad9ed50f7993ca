"""Reports module for merged compliance reports."""

from .summaries import ReportGenerator, ComplianceReport

__all__ = [
    "ReportGenerator",
    "ComplianceReport",
]

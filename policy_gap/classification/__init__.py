"""Classification module for deciding whether a text is a policy document."""

from .classifier import DocumentClassifier, ClassificationResult

__all__ = [
    "DocumentClassifier",
    "ClassificationResult",
]

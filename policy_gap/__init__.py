"""
PolicyGap - deterministic compliance benchmarking and gap analysis for
policy documents.

Classifies a document, scores it against a catalog of regulatory
frameworks and reports prioritized gaps. No network calls are made.
"""

__version__ = "0.1.0"
__author__ = "PolicyGap Team"

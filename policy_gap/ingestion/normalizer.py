"""
Text normalization for loaded policy documents.
"""

import re
import unicodedata
from dataclasses import dataclass


@dataclass
class NormalizedText:
    """Normalized policy text with simple statistics."""

    original: str
    normalized: str
    word_count: int
    paragraph_count: int


class TextNormalizer:
    """
    Normalizes extracted policy text before analysis.

    Handles:
    - Unicode normalization
    - Typographic quotes and dashes
    - Words hyphenated across PDF line breaks
    - Whitespace standardization
    """

    PUNCTUATION_MAP = {
        "\u2018": "'", "\u2019": "'", "\u201c": '"', "\u201d": '"',
        "\u2010": "-", "\u2011": "-", "\u2012": "-", "\u2013": "-", "\u2014": "-",
        "\u00a0": " ",
    }

    def __init__(self, join_hyphenated: bool = True):
        """
        Initialize the TextNormalizer.

        Args:
            join_hyphenated: Rejoin words split by a hyphen at a line break.
        """
        self.join_hyphenated = join_hyphenated
        self._translation = str.maketrans(self.PUNCTUATION_MAP)

    def normalize(self, text: str) -> NormalizedText:
        """
        Normalize policy text.

        Args:
            text: Raw extracted text

        Returns:
            NormalizedText with normalized content and statistics
        """
        normalized = unicodedata.normalize('NFKC', text)
        normalized = normalized.translate(self._translation)
        normalized = normalized.replace('\r\n', '\n').replace('\r', '\n')

        if self.join_hyphenated:
            normalized = re.sub(r'(\w)-\n(\w)', r'\1\2', normalized)

        normalized = self._normalize_whitespace(normalized)
        paragraphs = [p for p in normalized.split('\n\n') if p.strip()]

        return NormalizedText(
            original=text,
            normalized=normalized,
            word_count=len(normalized.split()),
            paragraph_count=len(paragraphs),
        )

    def _normalize_whitespace(self, text: str) -> str:
        """Single spaces within lines, at most one blank line between paragraphs."""
        text = re.sub(r'[^\S\n]+', ' ', text)
        lines = [line.strip() for line in text.split('\n')]
        text = '\n'.join(lines)
        text = re.sub(r'\n{3,}', '\n\n', text)
        return text.strip()

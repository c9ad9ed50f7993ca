"""
Document classification for policy gap analysis.

Decides whether an input text is a legitimate policy document before it is
benchmarked. The classifier is a deterministic heuristic that weighs
competing signals:
- Essential privacy sections (data collection, rights, sharing, ...)
- Weighted privacy vocabulary
- Structural and quality phrasing
- Strong policy indicators (fast accept)
- Non-policy vocabulary such as resumes or marketing copy (fast reject)
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from ..utils import require_text, round_half_up
from . import patterns

logger = logging.getLogger(__name__)


@dataclass
class ClassificationResult:
    """Outcome of classifying a document."""

    is_valid: bool
    document_type: str
    reason: str
    confidence: int
    sub_type: Optional[str] = None
    privacy_score: int = 0
    structure_score: int = 0
    quality_score: int = 0
    content_score: int = 0
    final_score: int = 0
    adjusted_threshold: float = 0.0
    found_sections: list[str] = field(default_factory=list)
    missing_sections: list[str] = field(default_factory=list)
    completeness: int = 0
    matched_indicators: list[str] = field(default_factory=list)
    text_length: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'is_valid': self.is_valid,
            'document_type': self.document_type,
            'sub_type': self.sub_type,
            'reason': self.reason,
            'confidence': self.confidence,
            'scores': {
                'privacy_score': self.privacy_score,
                'structure_score': self.structure_score,
                'quality_score': self.quality_score,
                'content_score': self.content_score,
                'final_score': self.final_score,
                'adjusted_threshold': round(self.adjusted_threshold, 2),
            },
            'found_sections': self.found_sections,
            'missing_sections': self.missing_sections,
            'completeness': self.completeness,
            'matched_indicators': self.matched_indicators,
            'text_length': self.text_length,
        }


class DocumentClassifier:
    """
    Classifies input text as a policy document or not.

    Two paths are supported. Text extracted from a PDF goes through a
    permissive path that only rejects obvious resumes. All other text goes
    through strict validation against privacy-policy content.
    """

    NON_BUSINESS_THRESHOLD = 3
    PDF_CONFIDENCE = 90
    FAST_ACCEPT_CONFIDENCE = 98
    FAST_REJECT_MIN_HITS = 2

    def __init__(
        self,
        min_length: int = 1000,
        min_sections: int = 4,
        reference_length: int = 3000,
        max_length_factor: float = 1.5
    ):
        """
        Initialize the classifier.

        Args:
            min_length: Shortest text accepted on the strict path
            min_sections: Essential privacy sections required on the strict path
            reference_length: Text length at which the threshold is unscaled
            max_length_factor: Upper bound on the length scaling of the threshold
        """
        self.min_length = min_length
        self.min_sections = min_sections
        self.reference_length = reference_length
        self.max_length_factor = max_length_factor

        self._section_res = {
            name: self._compile_patterns(section_patterns)
            for name, section_patterns in patterns.ESSENTIAL_SECTIONS.items()
        }
        self._non_policy_res = {
            category: [re.compile(p, re.IGNORECASE) for p in category_patterns]
            for category, category_patterns in patterns.NON_POLICY_PATTERNS.items()
        }
        self._non_business_res = [
            re.compile(p, re.IGNORECASE) for p in patterns.NON_BUSINESS_PATTERNS
        ]
        self._strong_resume_re = self._compile_patterns(patterns.STRONG_RESUME_PATTERNS)
        self._generic_policy_res = [
            re.compile(p, re.IGNORECASE) for p in patterns.GENERIC_POLICY_PATTERNS
        ]
        self._structural_res = [
            re.compile(p, re.MULTILINE) for p in patterns.STRUCTURAL_INDICATORS
        ]

    def _compile_patterns(self, pattern_list: list[str]) -> re.Pattern:
        """Compile list of patterns into single regex."""
        combined = '|'.join(f'(?:{p})' for p in pattern_list)
        return re.compile(combined, re.IGNORECASE)

    def classify(self, text: str, is_pdf_source: bool = False) -> ClassificationResult:
        """
        Classify a document.

        Args:
            text: Document text
            is_pdf_source: True when the text was extracted from a PDF upload

        Returns:
            ClassificationResult with the decision and all sub-scores
        """
        require_text(text)

        if is_pdf_source:
            result = self._classify_pdf(text)
        else:
            result = self._classify_strict(text)

        logger.debug(
            "classified document: valid=%s type=%s reason=%s confidence=%s",
            result.is_valid, result.document_type, result.reason, result.confidence
        )
        return result

    def _classify_pdf(self, text: str) -> ClassificationResult:
        """Permissive path for PDF sources."""
        non_business_hits = [
            r.pattern for r in self._non_business_res if r.search(text)
        ]
        strong_resume = self._strong_resume_re.search(text)

        if len(non_business_hits) >= self.NON_BUSINESS_THRESHOLD or strong_resume:
            return ClassificationResult(
                is_valid=False,
                document_type='resume',
                reason='non_business_document',
                confidence=min(90, 60 + 10 * len(non_business_hits)),
                matched_indicators=non_business_hits,
                text_length=len(text),
            )

        return ClassificationResult(
            is_valid=True,
            document_type='business_document',
            reason='pdf_business_document',
            confidence=self.PDF_CONFIDENCE,
            text_length=len(text),
        )

    def _classify_strict(self, text: str) -> ClassificationResult:
        """Strict validation path for non-PDF text."""
        length = len(text)

        if length < self.min_length:
            return ClassificationResult(
                is_valid=False,
                document_type='insufficient_content',
                reason='insufficient_content',
                confidence=95,
                text_length=length,
            )

        normalized = text.lower()
        non_policy_category, non_policy_hits = self._detect_non_policy(text)

        # Essential privacy sections
        found = [name for name, regex in self._section_res.items() if regex.search(text)]
        missing = [name for name in self._section_res if name not in found]
        completeness = round_half_up(len(found) / len(self._section_res) * 100)

        if len(found) < self.min_sections:
            if non_policy_category:
                return self._non_policy_result(
                    non_policy_category, non_policy_hits, found, missing, completeness, length
                )
            return ClassificationResult(
                is_valid=False,
                document_type='insufficient_privacy_content',
                reason='insufficient_privacy_content',
                confidence=100 - completeness,
                found_sections=found,
                missing_sections=missing,
                completeness=completeness,
                text_length=length,
            )

        privacy_score = self._privacy_score(normalized)
        structure_score = patterns.STRUCTURE_POINTS * sum(
            1 for phrase in patterns.STRUCTURE_PHRASES if phrase in normalized
        )
        quality_score = patterns.QUALITY_POINTS * sum(
            1 for phrase in patterns.QUALITY_INDICATORS if phrase in normalized
        )

        scores = dict(
            privacy_score=privacy_score,
            structure_score=structure_score,
            quality_score=quality_score,
            found_sections=found,
            missing_sections=missing,
            completeness=completeness,
            text_length=length,
        )

        # Fast accept on unambiguous policy vocabulary
        indicators = [
            phrase for phrase, _ in patterns.STRONG_POLICY_INDICATORS if phrase in normalized
        ]
        if indicators:
            sub_type = next(
                sub for phrase, sub in patterns.STRONG_POLICY_INDICATORS if phrase == indicators[0]
            )
            return ClassificationResult(
                is_valid=True,
                document_type='policy',
                sub_type=sub_type,
                reason='strong_policy_indicator',
                confidence=self.FAST_ACCEPT_CONFIDENCE,
                matched_indicators=indicators,
                **scores
            )

        # Fast reject on non-policy vocabulary
        if non_policy_category:
            return self._non_policy_result(
                non_policy_category, non_policy_hits, found, missing, completeness, length,
                privacy_score=privacy_score,
                structure_score=structure_score,
                quality_score=quality_score,
            )

        content_score = self._content_score(text)
        final_score = privacy_score + structure_score + quality_score + content_score
        base_threshold = 25 if privacy_score > 0 else 35
        adjusted_threshold = base_threshold * min(
            self.max_length_factor, length / self.reference_length
        )
        is_valid = final_score >= adjusted_threshold
        ratio = final_score / adjusted_threshold

        if is_valid:
            confidence = min(95, 60 + round_half_up(min(ratio, 3.5) * 10))
        else:
            confidence = min(90, 50 + round_half_up((1 - ratio) * 40))

        return ClassificationResult(
            is_valid=is_valid,
            document_type='policy' if is_valid else 'non_policy',
            sub_type='general_policy' if is_valid else None,
            reason='policy_content_threshold_met' if is_valid else 'below_policy_threshold',
            confidence=confidence,
            content_score=content_score,
            final_score=final_score,
            adjusted_threshold=adjusted_threshold,
            **scores
        )

    def _privacy_score(self, normalized: str) -> int:
        """Weighted, uncapped sum over the privacy vocabulary tiers."""
        score = 0
        for points, terms in patterns.PRIVACY_TERM_TIERS.values():
            score += points * sum(1 for term in terms if term in normalized)
        return score

    def _content_score(self, text: str) -> int:
        """Generic policy vocabulary plus structural layout signals."""
        generic = patterns.GENERIC_POLICY_POINTS * sum(
            1 for r in self._generic_policy_res if r.search(text)
        )
        structural = patterns.STRUCTURAL_INDICATOR_POINTS * sum(
            1 for r in self._structural_res if r.search(text)
        )
        return generic + structural

    def _detect_non_policy(self, text: str) -> tuple[Optional[str], int]:
        """
        Find the non-policy category with the most strong hits.

        Returns:
            (category, hits) when some category reaches the rejection
            threshold, otherwise (None, 0)
        """
        best_category = None
        best_hits = 0
        for category, regexes in self._non_policy_res.items():
            hits = sum(1 for r in regexes if r.search(text))
            if hits >= self.FAST_REJECT_MIN_HITS and hits > best_hits:
                best_category = category
                best_hits = hits
        return best_category, best_hits

    def _non_policy_result(
        self,
        category: str,
        hits: int,
        found: list[str],
        missing: list[str],
        completeness: int,
        length: int,
        **scores
    ) -> ClassificationResult:
        return ClassificationResult(
            is_valid=False,
            document_type=category,
            reason='non_policy_document',
            confidence=min(90, hits * 25),
            found_sections=found,
            missing_sections=missing,
            completeness=completeness,
            text_length=length,
            **scores
        )

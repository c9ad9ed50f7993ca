"""
Policy structure scanning.

Classifies a document into the policy-type taxonomy and measures how
complete each detected policy is, independently of regulatory scoring.
Also extracts structured content (headers, metadata, version, effective
date) and explicit compliance citations.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

from ..utils import percentage, require_text, round_half_up
from .policy_types import (
    COMPLIANCE_CITATIONS,
    POLICY_TYPES,
    CitationTable,
    PolicySection,
    PolicyType,
)

logger = logging.getLogger(__name__)


class DocumentFormat(Enum):
    """Source format sniffed from the raw text."""
    PDF = "PDF"
    DOCX = "DOCX"
    DOC = "DOC"
    MARKDOWN = "Markdown"
    HTML = "HTML"
    TEXT = "Text"


@dataclass
class SectionAnalysis:
    """Presence and completeness of one template section."""

    found: bool
    confidence: int
    elements: list[str] = field(default_factory=list)
    missing_elements: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'found': self.found,
            'confidence': self.confidence,
            'elements': self.elements,
            'missing_elements': self.missing_elements,
        }


@dataclass
class DetectedPolicy:
    """A policy type detected in the document."""

    type_id: str
    name: str
    confidence: int
    sections: dict[str, SectionAnalysis]
    completeness: int
    missing_elements: list[str] = field(default_factory=list)

    @property
    def sections_found(self) -> int:
        """Number of template sections found."""
        return sum(1 for s in self.sections.values() if s.found)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'type': self.type_id,
            'name': self.name,
            'confidence': self.confidence,
            'sections': {key: s.to_dict() for key, s in self.sections.items()},
            'completeness': self.completeness,
            'missing_elements': self.missing_elements,
        }


@dataclass
class Header:
    """A heading found in the document."""

    kind: str
    text: str
    level: int

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {'type': self.kind, 'text': self.text, 'level': self.level}


@dataclass
class StructuredContent:
    """Machine-readable structure extracted from the document."""

    headers: list[Header] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)
    version: Optional[str] = None
    effective_date: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'headers': [h.to_dict() for h in self.headers],
            'metadata': self.metadata,
            'version': self.version,
            'effective_date': self.effective_date,
        }


@dataclass
class ComplianceReference:
    """Mentions of one compliance framework."""

    framework: str
    kind: str
    mentioned: bool
    citations: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'framework': self.framework,
            'mentioned': self.mentioned,
            self.kind: self.citations,
            'keywords': self.keywords,
        }


@dataclass
class ScanRecommendation:
    """A structural improvement suggested by the scanner."""

    kind: str
    priority: str
    message: str
    policy: Optional[str] = None
    framework: Optional[str] = None
    missing_elements: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = {
            'type': self.kind,
            'priority': self.priority,
            'message': self.message,
        }
        if self.policy:
            data['policy'] = self.policy
            data['missing_elements'] = self.missing_elements
        if self.framework:
            data['framework'] = self.framework
        return data


@dataclass
class StructureScanResult:
    """Complete structure scan of a document."""

    document_format: DocumentFormat
    detected_policies: list[DetectedPolicy]
    structured_content: StructuredContent
    compliance_references: dict[str, ComplianceReference]
    completeness_score: int = 0
    missing_elements: list[str] = field(default_factory=list)
    recommendations: list[ScanRecommendation] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'document_format': self.document_format.value,
            'detected_policies': [p.to_dict() for p in self.detected_policies],
            'structured_content': self.structured_content.to_dict(),
            'compliance_references': {
                name: ref.to_dict() for name, ref in self.compliance_references.items()
            },
            'completeness_score': self.completeness_score,
            'missing_elements': self.missing_elements,
            'recommendations': [r.to_dict() for r in self.recommendations],
        }


@dataclass
class ScanSummary:
    """Condensed view of a scan for reporting."""

    document_summary: dict
    policy_breakdown: list[dict]
    compliance_gaps: list[dict]
    recommendations: list[ScanRecommendation]
    next_steps: list[str]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'document_summary': self.document_summary,
            'policy_breakdown': self.policy_breakdown,
            'compliance_gaps': self.compliance_gaps,
            'recommendations': [r.to_dict() for r in self.recommendations],
            'next_steps': self.next_steps,
        }


class StructureScanner:
    """
    Scans a document against the policy-type templates.

    A policy type is detected when more than 25% of its keywords appear; a
    section is found when more than 30% of its keywords appear. Required
    elements are matched loosely so that "opt-out", "opt out" and "optout"
    all count.
    """

    HEADER_PATTERNS = {
        'markdown': re.compile(r'^(#{1,6})\s+(.+)$', re.MULTILINE),
        'html': re.compile(r'<h([1-6])[^>]*>([^<]+)</h[1-6]>', re.IGNORECASE),
        'structured': re.compile(r'^()## (.+) ##$', re.MULTILINE),
    }

    METADATA_PATTERNS = [
        re.compile(r'^@(\w+):\s*(.+)$', re.MULTILINE),
        re.compile(r'"(\w+)":\s*"([^"]+)"'),
    ]

    VERSION_PATTERN = re.compile(r'version[:\s]+([0-9.]+)', re.IGNORECASE)
    EFFECTIVE_DATE_PATTERN = re.compile(
        r'effective[:\s]+date[:\s]+([0-9]{4}-[0-9]{2}-[0-9]{2})', re.IGNORECASE
    )
    MARKDOWN_HEADING = re.compile(r'^#{1,6}\s+', re.MULTILINE)

    INCOMPLETE_THRESHOLD = 70
    HIGH_PRIORITY_THRESHOLD = 40
    MIN_CITATIONS = 3

    def __init__(
        self,
        detection_threshold: float = 25,
        section_threshold: float = 30,
        policy_types: Optional[Mapping[str, PolicyType]] = None,
        citation_tables: Optional[Mapping[str, CitationTable]] = None
    ):
        """
        Initialize scanner.

        Args:
            detection_threshold: Keyword percentage a policy type must exceed
            section_threshold: Keyword percentage a section must exceed
            policy_types: Template catalog (defaults to the built-in templates)
            citation_tables: Framework citation tables
        """
        self.detection_threshold = detection_threshold
        self.section_threshold = section_threshold
        self.policy_types = POLICY_TYPES if policy_types is None else policy_types
        self.citation_tables = COMPLIANCE_CITATIONS if citation_tables is None else citation_tables

    def scan(self, text: str) -> StructureScanResult:
        """
        Scan a document.

        Args:
            text: Document text

        Returns:
            StructureScanResult
        """
        require_text(text)
        normalized = text.lower()

        detected = []
        for type_id, policy_type in self.policy_types.items():
            confidence = self.detection_confidence(normalized, policy_type)
            if confidence > self.detection_threshold:
                detected.append(self._analyze_policy(normalized, policy_type, confidence))

        if detected:
            completeness = round_half_up(
                sum(p.completeness for p in detected) / len(detected)
            )
        else:
            completeness = 0

        missing = []
        for policy in detected:
            for element in policy.missing_elements:
                if element not in missing:
                    missing.append(element)

        result = StructureScanResult(
            document_format=self.detect_format(text),
            detected_policies=detected,
            structured_content=self.extract_structured_content(text),
            compliance_references=self.find_compliance_references(normalized),
            completeness_score=completeness,
            missing_elements=missing,
        )
        result.recommendations = self._generate_recommendations(result)

        logger.debug(
            "scanned document: format=%s detected=%s completeness=%s",
            result.document_format.value, [p.type_id for p in detected], completeness
        )
        return result

    def detect_format(self, text: str) -> DocumentFormat:
        """Guess the source format from markers in the raw text."""
        if '%PDF-' in text:
            return DocumentFormat.PDF
        if '<?xml' in text and 'word/' in text:
            return DocumentFormat.DOCX
        if 'Microsoft Office Word' in text:
            return DocumentFormat.DOC
        if self.MARKDOWN_HEADING.search(text):
            return DocumentFormat.MARKDOWN
        if '<html' in text or '<!DOCTYPE' in text:
            return DocumentFormat.HTML
        return DocumentFormat.TEXT

    def detection_confidence(self, normalized: str, policy_type: PolicyType) -> int:
        """Percentage of the policy type's keywords present in the text."""
        matched = sum(1 for kw in policy_type.keywords if kw.lower() in normalized)
        return round_half_up(percentage(matched, len(policy_type.keywords)))

    def _analyze_policy(
        self,
        normalized: str,
        policy_type: PolicyType,
        confidence: int
    ) -> DetectedPolicy:
        sections = {
            key: self._analyze_section(normalized, section)
            for key, section in policy_type.sections.items()
        }
        found = sum(1 for s in sections.values() if s.found)
        missing = [e for s in sections.values() for e in s.missing_elements]

        return DetectedPolicy(
            type_id=policy_type.type_id,
            name=policy_type.name,
            confidence=confidence,
            sections=sections,
            completeness=round_half_up(percentage(found, len(sections))),
            missing_elements=missing,
        )

    def _analyze_section(self, normalized: str, section: PolicySection) -> SectionAnalysis:
        elements = [kw for kw in section.keywords if kw.lower() in normalized]
        keyword_hits = len(elements)

        missing = []
        for element in section.required:
            if self.element_present(normalized, element):
                elements.append(element)
            else:
                missing.append(element)

        confidence = round_half_up(percentage(keyword_hits, len(section.keywords)))
        return SectionAnalysis(
            found=confidence > self.section_threshold,
            confidence=confidence,
            elements=elements,
            missing_elements=missing,
        )

    def element_present(self, normalized: str, element: str) -> bool:
        """Check for a required element or one of its spelling variations."""
        return any(v.lower() in normalized for v in self.element_variations(element))

    @staticmethod
    def element_variations(element: str) -> list[str]:
        """Literal, joined, hyphenated, underscored and singular/plural forms."""
        variations = [
            element,
            re.sub(r'\s+', '', element),
            re.sub(r'\s+', '-', element),
            re.sub(r'\s+', '_', element),
        ]
        if element.endswith('s'):
            variations.append(element[:-1])
        else:
            variations.append(element + 's')
        return variations

    def extract_structured_content(self, text: str) -> StructuredContent:
        """Pull headers, metadata, version and effective date out of the text."""
        content = StructuredContent()

        for kind, pattern in self.HEADER_PATTERNS.items():
            for match in pattern.finditer(text):
                marker, heading = match.group(1), match.group(2)
                if kind == 'markdown':
                    level = len(marker)
                elif kind == 'html':
                    level = int(marker)
                else:
                    level = 1
                content.headers.append(Header(kind=kind, text=heading.strip(), level=level))

        for pattern in self.METADATA_PATTERNS:
            for match in pattern.finditer(text):
                content.metadata[match.group(1)] = match.group(2).strip()

        version = self.VERSION_PATTERN.search(text)
        if version:
            content.version = version.group(1)

        effective = self.EFFECTIVE_DATE_PATTERN.search(text)
        if effective:
            content.effective_date = effective.group(1)

        return content

    def find_compliance_references(self, normalized: str) -> dict[str, ComplianceReference]:
        """Frameworks mentioned by keyword or specific citation."""
        references = {}
        for name, table in self.citation_tables.items():
            keywords = [kw for kw in table.keywords if kw.lower() in normalized]
            citations = [c for c in table.citations if c.lower() in normalized]
            if keywords or citations:
                references[name] = ComplianceReference(
                    framework=name,
                    kind=table.kind,
                    mentioned=bool(keywords),
                    citations=citations,
                    keywords=keywords,
                )
        return references

    def _generate_recommendations(self, result: StructureScanResult) -> list[ScanRecommendation]:
        recommendations = []

        for policy in result.detected_policies:
            if policy.completeness < self.INCOMPLETE_THRESHOLD:
                priority = 'high' if policy.completeness < self.HIGH_PRIORITY_THRESHOLD else 'medium'
                recommendations.append(ScanRecommendation(
                    kind='policy_improvement',
                    priority=priority,
                    policy=policy.name,
                    message=(
                        f"{policy.name} is {policy.completeness}% complete. "
                        "Consider adding missing elements."
                    ),
                    missing_elements=list(policy.missing_elements),
                ))

        for name, ref in result.compliance_references.items():
            if len(ref.citations) < self.MIN_CITATIONS:
                recommendations.append(ScanRecommendation(
                    kind='compliance_reference',
                    priority='medium',
                    framework=name,
                    message=(
                        f"Consider adding more specific {name} {ref.kind} references "
                        "for better compliance documentation."
                    ),
                ))

        if not result.structured_content.version:
            recommendations.append(ScanRecommendation(
                kind='metadata',
                priority='low',
                message='Add version information to improve document tracking and version control.',
            ))

        if not result.structured_content.effective_date:
            recommendations.append(ScanRecommendation(
                kind='metadata',
                priority='medium',
                message='Add effective date to clarify when the policy takes effect.',
            ))

        return recommendations

    def summary_report(self, result: StructureScanResult) -> ScanSummary:
        """
        Condense a scan into a summary with next steps.

        Only high and medium priority recommendations are kept.
        """
        return ScanSummary(
            document_summary={
                'type': result.document_format.value,
                'policies_detected': len(result.detected_policies),
                'overall_completeness': result.completeness_score,
                'compliance_frameworks': len(result.compliance_references),
            },
            policy_breakdown=[
                {
                    'name': policy.name,
                    'completeness': policy.completeness,
                    'confidence': policy.confidence,
                    'sections_found': policy.sections_found,
                    'total_sections': len(policy.sections),
                }
                for policy in result.detected_policies
            ],
            compliance_gaps=[
                {
                    'element': element,
                    'recommendation': f"Add {element} section or clause to improve compliance",
                }
                for element in result.missing_elements
            ],
            recommendations=[
                r for r in result.recommendations if r.priority in ('high', 'medium')
            ],
            next_steps=self._next_steps(result),
        )

    def _next_steps(self, result: StructureScanResult) -> list[str]:
        steps = []
        if result.completeness_score < 60:
            steps.append("Address missing policy sections identified in the analysis")
        if len(result.compliance_references) < 2:
            steps.append("Add specific compliance framework references (GDPR, CCPA, etc.)")
        content = result.structured_content
        if not content.version or not content.effective_date:
            steps.append("Add document metadata (version, effective date, last updated)")
        steps.append("Review and update policy content based on recommendations")
        steps.append("Implement structured formatting for better machine readability")
        return steps

"""
End-to-end compliance analysis of a policy document.

The classifier gates the benchmark: only documents accepted as policies
are scored against regulatory frameworks. The structure scan always runs.
"""

import logging
from typing import Optional, Union

from .benchmarking.orchestrator import BenchmarkOrchestrator
from .classification.classifier import DocumentClassifier
from .ingestion.loaders import PolicyDocument
from .ingestion.normalizer import TextNormalizer
from .reports.summaries import ComplianceReport, ReportGenerator
from .scanning.structure_scanner import StructureScanner
from .utils import require_text

logger = logging.getLogger(__name__)


class ComplianceEngine:
    """Runs classification, benchmarking and structure scanning on a document."""

    def __init__(
        self,
        classifier: Optional[DocumentClassifier] = None,
        orchestrator: Optional[BenchmarkOrchestrator] = None,
        scanner: Optional[StructureScanner] = None,
        report_generator: Optional[ReportGenerator] = None,
        normalizer: Optional[TextNormalizer] = None
    ):
        """
        Initialize engine.

        Args:
            classifier: Gate deciding whether the text is a policy
            orchestrator: Cross-framework benchmark
            scanner: Policy structure scanner
            report_generator: Builds the merged report
            normalizer: Normalizes text of loaded documents
        """
        self.classifier = classifier or DocumentClassifier()
        self.orchestrator = orchestrator or BenchmarkOrchestrator()
        self.scanner = scanner or StructureScanner()
        self.report_generator = report_generator or ReportGenerator(scanner=self.scanner)
        self.normalizer = normalizer or TextNormalizer()

    def analyze(
        self,
        text: str,
        frameworks: Union[str, list[str], None] = None,
        industry: Optional[str] = None,
        is_pdf_source: bool = False,
        source: Optional[str] = None
    ) -> ComplianceReport:
        """
        Analyze policy text.

        Args:
            text: Document text
            frameworks: Framework ids to benchmark (orchestrator defaults when empty)
            industry: Industry for benchmark comparison
            is_pdf_source: True when the text was extracted from a PDF
            source: Optional path or label recorded on the report

        Returns:
            ComplianceReport; its benchmark is None when the gate rejected the text
        """
        require_text(text)

        classification = self.classifier.classify(text, is_pdf_source=is_pdf_source)

        benchmark = None
        if classification.is_valid:
            benchmark = self.orchestrator.benchmark(text, frameworks, industry)
        else:
            logger.info(
                "skipping benchmark: document rejected (%s, %s)",
                classification.document_type, classification.reason
            )

        structure_scan = self.scanner.scan(text)

        return self.report_generator.generate(
            classification=classification,
            structure_scan=structure_scan,
            benchmark=benchmark,
            source=source,
        )

    def analyze_document(
        self,
        document: PolicyDocument,
        frameworks: Union[str, list[str], None] = None,
        industry: Optional[str] = None
    ) -> ComplianceReport:
        """Normalize a loaded document and analyze it."""
        normalized = self.normalizer.normalize(document.content)
        return self.analyze(
            normalized.normalized,
            frameworks=frameworks,
            industry=industry,
            is_pdf_source=document.is_pdf_source,
            source=document.source_path,
        )

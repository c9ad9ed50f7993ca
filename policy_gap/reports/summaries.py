"""
Report generation for policy gap analysis.

Merges the three analyses of a document into one report:
- Classification gate decision
- Cross-framework benchmark (only when the gate accepted the document)
- Policy structure scan
"""

import itertools
import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..benchmarking.orchestrator import BenchmarkReport
from ..classification.classifier import ClassificationResult
from ..scanning.structure_scanner import StructureScanResult, StructureScanner


@dataclass
class ComplianceReport:
    """Merged compliance analysis of one document."""

    report_id: str
    generated_at: datetime
    classification: ClassificationResult
    structure_scan: StructureScanResult
    benchmark: Optional[BenchmarkReport] = None
    source: Optional[str] = None
    disclaimers: list[str] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        """True when the document passed the classification gate."""
        return self.classification.is_valid

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'report_id': self.report_id,
            'generated_at': self.generated_at.isoformat(),
            'source': self.source,
            'classification': self.classification.to_dict(),
            'benchmark': self.benchmark.to_dict() if self.benchmark else None,
            'structure_scan': self.structure_scan.to_dict(),
            'disclaimers': self.disclaimers,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)


class ReportGenerator:
    """
    Builds ComplianceReport objects and renders them as Markdown.

    Scores are heuristic keyword coverage, so every report carries
    disclaimers pointing readers to qualified review.
    """

    STANDARD_DISCLAIMERS = [
        "This report is for informational purposes only and does not constitute legal advice.",
        "Scores reflect keyword and pattern coverage, not a legal assessment of compliance.",
        "All findings require review by qualified compliance or legal professionals.",
    ]

    TOP_RECOMMENDATIONS = 10

    def __init__(self, report_prefix: str = "POLICY-GAP", scanner: Optional[StructureScanner] = None):
        """Initialize report generator."""
        self.report_prefix = report_prefix
        self.scanner = scanner or StructureScanner()
        self._report_ids = itertools.count(1)

    def generate(
        self,
        classification: ClassificationResult,
        structure_scan: StructureScanResult,
        benchmark: Optional[BenchmarkReport] = None,
        source: Optional[str] = None
    ) -> ComplianceReport:
        """
        Assemble a report from the individual analyses.

        Args:
            classification: Gate decision
            structure_scan: Structure scan of the document
            benchmark: Benchmark report, None when the gate rejected the document
            source: Optional path or label of the analyzed document

        Returns:
            ComplianceReport
        """
        return ComplianceReport(
            report_id=f"{self.report_prefix}-{next(self._report_ids):05d}",
            generated_at=datetime.now(),
            classification=classification,
            structure_scan=structure_scan,
            benchmark=benchmark,
            source=source,
            disclaimers=list(self.STANDARD_DISCLAIMERS),
        )

    def generate_markdown_report(self, report: ComplianceReport) -> str:
        """
        Generate a markdown-formatted report.

        Args:
            report: ComplianceReport to format

        Returns:
            Markdown string
        """
        lines = []

        lines.append("# Policy Compliance Report")
        lines.append(f"**Report ID:** {report.report_id}")
        lines.append(f"**Generated:** {report.generated_at.strftime('%Y-%m-%d %H:%M:%S')}")
        if report.source:
            lines.append(f"**Source:** {report.source}")
        lines.append("")

        lines.append("## Important Disclaimers")
        for disclaimer in report.disclaimers:
            lines.append(f"- {disclaimer}")
        lines.append("")

        c = report.classification
        lines.append("## Document Classification")
        lines.append(f"- **Accepted:** {'Yes' if c.is_valid else 'No'}")
        lines.append(f"- **Document Type:** {c.document_type}")
        if c.sub_type:
            lines.append(f"- **Sub-type:** {c.sub_type}")
        lines.append(f"- **Reason:** {c.reason}")
        lines.append(f"- **Confidence:** {c.confidence}%")
        if c.missing_sections:
            lines.append(f"- **Missing Privacy Sections:** {', '.join(c.missing_sections)}")
        lines.append("")

        if report.benchmark:
            lines.extend(self._benchmark_markdown(report.benchmark))
        else:
            lines.append("## Regulatory Benchmark")
            lines.append("*Skipped: the document did not pass classification.*")
            lines.append("")

        lines.extend(self._scan_markdown(report.structure_scan))

        lines.append("---")
        lines.append("*This report was generated by policy-gap. "
                     "It does not constitute legal advice.*")

        return "\n".join(lines)

    def _benchmark_markdown(self, benchmark: BenchmarkReport) -> list[str]:
        lines = ["## Regulatory Benchmark"]
        lines.append(f"- **Average Score:** {benchmark.average_score}/100")
        lines.append(
            f"- **Industry:** {benchmark.industry} "
            f"(average {benchmark.industry_benchmark.average}, "
            f"top 10% {benchmark.industry_benchmark.top10})"
        )
        lines.append(f"- **Comparison:** {benchmark.benchmark_comparison}")
        lines.append(
            f"- **Gaps:** {benchmark.critical_gaps} critical, "
            f"{benchmark.high_gaps} high, {benchmark.medium_gaps} medium"
        )
        lines.append(f"- **Strengths:** {benchmark.total_strengths}")
        if benchmark.skipped_frameworks:
            lines.append(f"- **Skipped Frameworks:** {', '.join(benchmark.skipped_frameworks)}")
        lines.append("")

        lines.append("### Compliance Matrix")
        lines.append("| Framework | Score | Maturity | Critical | High |")
        lines.append("|---|---|---|---|---|")
        for row in benchmark.compliance_matrix:
            lines.append(
                f"| {row.name} | {row.score} | {row.maturity.value} "
                f"| {row.critical_issues} | {row.high_issues} |"
            )
        lines.append("")

        if benchmark.prioritized_recommendations:
            lines.append("### Prioritized Recommendations")
            for rec in benchmark.prioritized_recommendations[:self.TOP_RECOMMENDATIONS]:
                gap = rec.gap
                lines.append(
                    f"{rec.priority}. **{gap.title}** ({gap.framework_id}, "
                    f"{gap.criticality.value}) - score {gap.current_score}, "
                    f"{rec.timeframe}, effort {rec.estimated_effort.value}"
                )
                for item in gap.recommendations:
                    lines.append(f"   - {item}")
            lines.append("")

        if benchmark.top_strengths:
            lines.append("### Top Strengths")
            for strength in benchmark.top_strengths:
                lines.append(f"- {strength.title} ({strength.framework_id}): {strength.score}")
            lines.append("")

        return lines

    def _scan_markdown(self, scan: StructureScanResult) -> list[str]:
        summary = self.scanner.summary_report(scan)
        lines = ["## Policy Structure"]
        lines.append(f"- **Format:** {scan.document_format.value}")
        lines.append(f"- **Overall Completeness:** {scan.completeness_score}%")
        if scan.structured_content.version:
            lines.append(f"- **Version:** {scan.structured_content.version}")
        if scan.structured_content.effective_date:
            lines.append(f"- **Effective Date:** {scan.structured_content.effective_date}")
        lines.append("")

        for item in summary.policy_breakdown:
            lines.append(
                f"- {item['name']}: {item['completeness']}% complete "
                f"({item['sections_found']}/{item['total_sections']} sections, "
                f"confidence {item['confidence']}%)"
            )
        if summary.policy_breakdown:
            lines.append("")

        if scan.compliance_references:
            lines.append(
                f"**Frameworks referenced:** {', '.join(scan.compliance_references)}"
            )
            lines.append("")

        if summary.recommendations:
            lines.append("### Structure Recommendations")
            for rec in summary.recommendations:
                lines.append(f"- [{rec.priority}] {rec.message}")
            lines.append("")

        lines.append("### Next Steps")
        for i, step in enumerate(summary.next_steps, 1):
            lines.append(f"{i}. {step}")
        lines.append("")

        return lines

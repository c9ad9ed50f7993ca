#!/usr/bin/env python3
"""
PolicyGap CLI

Command-line interface for policy compliance benchmarking.

Usage:
    policy-gap analyze <document_path> --frameworks GDPR HIPAA --industry Healthcare
    policy-gap benchmark <document_path> --frameworks SOX
    policy-gap scan <document_path>
    policy-gap frameworks
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .benchmarking import BenchmarkOrchestrator, UnknownFrameworkError
from .catalog import FRAMEWORKS, INDUSTRY_BENCHMARKS
from .engine import ComplianceEngine
from .ingestion import PolicyDocument, TextNormalizer, UniversalLoader
from .scanning import StructureScanner

logger = logging.getLogger(__name__)

DISCLAIMER = (
    "This analysis is for informational purposes only. "
    "It does not constitute legal advice."
)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="policy-gap",
        description="PolicyGap - Benchmark policy documents against regulatory frameworks",
        epilog=f"DISCLAIMER: {DISCLAIMER}"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Commands reading a document share these options
    for name, help_text in (
        ("analyze", "Classify, benchmark and scan a policy document"),
        ("benchmark", "Benchmark a document against frameworks without the classification gate"),
        ("scan", "Scan a document for policy types and section completeness"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "document",
            type=str,
            help="Path to the policy document (.pdf, .html, .docx, .txt, .md)"
        )
        sub.add_argument(
            "--output", "-o",
            type=str,
            help="Output file path (default: stdout)"
        )
        sub.add_argument(
            "--format", "-f",
            choices=["json", "markdown", "text"],
            default="text",
            help="Output format"
        )
        if name != "scan":
            sub.add_argument(
                "--frameworks", "-F",
                nargs="+",
                help="Framework ids (default: GDPR HIPAA SOX)"
            )
            sub.add_argument(
                "--industry", "-i",
                type=str,
                help="Industry for benchmark comparison (default: Technology)"
            )

    subparsers.add_parser(
        "frameworks",
        help="List supported frameworks and industries"
    )

    return parser


def load_document(path: str) -> PolicyDocument:
    """Load a document from disk."""
    logger.info("Loading: %s", path)
    return UniversalLoader().load(path)


def analyze_document(args) -> int:
    """Run the full analysis on a document."""
    doc = load_document(args.document)
    engine = ComplianceEngine()
    report = engine.analyze_document(doc, frameworks=args.frameworks, industry=args.industry)

    if args.format == "json":
        output = report.to_json()
    elif args.format == "markdown":
        output = engine.report_generator.generate_markdown_report(report)
    else:
        output = format_output(summarize_report(report.to_dict()), "text")

    write_output(output, args.output)
    return 0


def benchmark_document(args) -> int:
    """Benchmark a document without the classification gate."""
    doc = load_document(args.document)
    text = TextNormalizer().normalize(doc.content).normalized

    orchestrator = BenchmarkOrchestrator()
    frameworks = orchestrator.normalize_frameworks(args.frameworks)
    unknown = [f for f in frameworks if f not in FRAMEWORKS]
    if len(unknown) == len(frameworks):
        raise UnknownFrameworkError(unknown[0])

    report = orchestrator.benchmark(text, frameworks, args.industry)
    results = report.to_dict()
    results["disclaimer"] = DISCLAIMER

    write_output(format_output(results, args.format), args.output)
    return 0


def scan_document(args) -> int:
    """Scan a document's policy structure."""
    doc = load_document(args.document)
    text = TextNormalizer().normalize(doc.content).normalized

    scanner = StructureScanner()
    result = scanner.scan(text)
    results = {
        "document": args.document,
        "scan": result.to_dict(),
        "summary": scanner.summary_report(result).to_dict(),
    }

    write_output(format_output(results, args.format), args.output)
    return 0


def list_frameworks(args) -> int:
    """Print the supported frameworks and industries."""
    print("Frameworks:")
    for framework_id, framework in FRAMEWORKS.items():
        print(f"  {framework_id:<10} {framework.name} ({framework.jurisdiction}, "
              f"{len(framework.rules)} rules)")
    print("\nIndustries:")
    for industry in INDUSTRY_BENCHMARKS:
        print(f"  {industry}")
    return 0


def summarize_report(data: dict) -> dict:
    """Reduce a full report dictionary to the fields shown in text output."""
    classification = data["classification"]
    summary = {
        "report_id": data["report_id"],
        "source": data["source"],
        "classification": {
            "is_valid": classification["is_valid"],
            "document_type": classification["document_type"],
            "reason": classification["reason"],
            "confidence": classification["confidence"],
        },
    }

    benchmark = data["benchmark"]
    if benchmark:
        summary["benchmark"] = benchmark["overall_results"]
        summary["compliance_matrix"] = benchmark["compliance_matrix"]
        summary["top_recommendations"] = [
            f"{r['priority']}. {r['title']} ({r['framework']}, {r['criticality']})"
            for r in benchmark["prioritized_recommendations"][:10]
        ]

    scan = data["structure_scan"]
    summary["structure"] = {
        "document_format": scan["document_format"],
        "completeness_score": scan["completeness_score"],
        "detected_policies": ", ".join(p["name"] for p in scan["detected_policies"]) or "none",
    }
    summary["disclaimer"] = DISCLAIMER
    return summary


def write_output(output: str, path=None) -> None:
    if path:
        Path(path).write_text(output, encoding='utf-8')
        print(f"Results written to: {path}")
    else:
        print(output)


def format_output(data: dict, format_type: str) -> str:
    """Format output data according to requested format."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)

    elif format_type == "markdown":
        lines = ["# Policy Analysis Results\n"]

        def dict_to_md(d: dict, level: int = 2) -> list:
            result = []
            for key, value in d.items():
                heading = "#" * level
                if isinstance(value, dict):
                    result.append(f"{heading} {key.replace('_', ' ').title()}\n")
                    result.extend(dict_to_md(value, level + 1))
                elif isinstance(value, list):
                    result.append(f"{heading} {key.replace('_', ' ').title()}\n")
                    for item in value:
                        if isinstance(item, dict):
                            for k, v in item.items():
                                result.append(f"- **{k}**: {v}")
                            result.append("")
                        else:
                            result.append(f"- {item}")
                else:
                    result.append(f"- **{key.replace('_', ' ').title()}**: {value}")
            return result

        lines.extend(dict_to_md(data))
        return "\n".join(lines)

    else:  # text
        def dict_to_text(d: dict, indent: int = 0) -> list:
            result = []
            prefix = "  " * indent
            for key, value in d.items():
                if isinstance(value, dict):
                    result.append(f"{prefix}{key.replace('_', ' ').upper()}:")
                    result.extend(dict_to_text(value, indent + 1))
                elif isinstance(value, list):
                    result.append(f"{prefix}{key.replace('_', ' ').upper()}:")
                    for item in value:
                        if isinstance(item, dict):
                            for k, v in item.items():
                                result.append(f"{prefix}  - {k}: {v}")
                        else:
                            result.append(f"{prefix}  - {item}")
                else:
                    result.append(f"{prefix}{key.replace('_', ' ')}: {value}")
            return result

        return "\n".join(dict_to_text(data))


COMMANDS = {
    "analyze": analyze_document,
    "benchmark": benchmark_document,
    "scan": scan_document,
    "frameworks": list_frameworks,
}


def main(argv=None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return COMMANDS[args.command](args)
    except (FileNotFoundError, UnknownFrameworkError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

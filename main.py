#!/usr/bin/env python3
"""
Journal Template Compliance Checker
Checks an article against the three-language journal template
(UDC, title, authors, abstracts, keywords, sections, references).

Usage:
    python main.py <path_to_document> [--output <json_path>] [--quiet] [--strict]
"""

import sys
import argparse
import traceback
from pathlib import Path
from typing import Dict

# Import checker modules
from template_checker.extractor import DocumentExtractor
from template_checker.validator import DocumentValidator, summarize
from template_checker.output_generator import OutputGenerator


class ProgressIndicator:
    """Simple progress indicator for long operations."""

    def __init__(self, message: str):
        self.message = message

    def __enter__(self):
        print(f"{self.message}...", end=" ", flush=True)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            print("Done!")
        else:
            print("Failed!")


class DocumentComplianceAnalyzer:
    """Main analyzer: extraction, validation and output."""

    def __init__(self, show_report: bool = True):
        """
        Initialize analyzer.

        Args:
            show_report: Whether to print the console report
        """
        self.show_report = show_report
        self.extractor = DocumentExtractor()
        self.validator = DocumentValidator()

    def analyze(self, document_path: str, output_path: str = None) -> Dict:
        """
        Analyze a document for template compliance.

        Args:
            document_path: Path to document (DOCX, PDF or TXT)
            output_path: Optional path for JSON output

        Returns:
            Analysis results dictionary
        """
        print("\n" + "=" * 70)
        print("JOURNAL TEMPLATE COMPLIANCE CHECKER")
        print("=" * 70 + "\n")

        # Step 1: Extract text and page count
        with ProgressIndicator(f"Extracting text from {Path(document_path).name}"):
            content = self.extractor.extract(document_path)

        print(f"  Words: {len(content.text.split())}")
        print(f"  Pages: {content.pages}")

        # Step 2: Validate
        with ProgressIndicator("Validating template compliance"):
            validation_results = self.validator.validate(content)

        # Step 3: Display results
        if self.show_report:
            print("\n")
            print(self.validator.format_results_for_console(validation_results))

        # Step 4: Generate and save JSON output
        json_output = OutputGenerator.generate_json_output(
            document_path=document_path,
            content=content,
            validation_results=validation_results
        )

        if output_path is None:
            output_path = OutputGenerator.get_default_output_path(document_path)

        with ProgressIndicator(f"\nSaving JSON output to {output_path}"):
            OutputGenerator.save_json(json_output, output_path)

        summary = summarize(validation_results)
        print("\n" + "=" * 70)
        print(f"Analysis complete! {summary['passed_checks']}/{summary['total_checks']} "
              f"checks passed ({summary['percentage']}%)")
        print(f"JSON output saved to: {output_path}")
        print("=" * 70 + "\n")

        return json_output


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Check an article against the journal template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py article.docx
  python main.py article.docx --output result.json
  python main.py article.pdf --quiet
  python main.py article.docx --strict
        """
    )

    parser.add_argument(
        "document",
        help="Path to document (DOCX, PDF or TXT)"
    )

    parser.add_argument(
        "--output", "-o",
        help="Path for JSON output file (default: <document>_analysis.json)"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Do not print the detailed validation report"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 when any check fails"
    )

    args = parser.parse_args()

    # Validate input file exists
    if not Path(args.document).exists():
        print(f"Error: File not found: {args.document}", file=sys.stderr)
        sys.exit(1)

    try:
        analyzer = DocumentComplianceAnalyzer(show_report=not args.quiet)
        result = analyzer.analyze(
            document_path=args.document,
            output_path=args.output
        )

    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except RuntimeError as e:
        print(f"Error during extraction: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"Error during analysis: {e}", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)

    if args.strict and not result['validation']['all_passed']:
        sys.exit(2)

    sys.exit(0)


if __name__ == "__main__":
    main()

"""
Document Validator Module
Runs the four rule groups over extracted text and summarizes the report.
"""

import math
from typing import Any, Dict, List

from .models import DocumentContent, Severity, ValidationResult
from .multilingual_checker import MultilingualChecker
from .reference_checker import ReferenceChecker
from .section_checker import SectionChecker
from .structure_checker import StructureChecker
from .text_patterns import non_blank_lines


class DocumentValidator:
    """Validates document text against the journal template."""

    def __init__(self):
        """Initialize the rule groups."""
        self.structure_checker = StructureChecker()
        self.multilingual_checker = MultilingualChecker()
        self.section_checker = SectionChecker()
        self.reference_checker = ReferenceChecker()

    def validate(self, content: DocumentContent) -> List[ValidationResult]:
        """
        Validate extracted document content.

        Args:
            content: Document text and estimated page count

        Returns:
            One ValidationResult per rule group, in the order
            Structure, Multilingual, Sections, References
        """
        lines = non_blank_lines(content.text)

        return [
            self.structure_checker.check(lines, content.pages),
            self.multilingual_checker.check(content.text),
            self.section_checker.check(content.text),
            self.reference_checker.check(content.text),
        ]

    @staticmethod
    def format_results_for_console(results: List[ValidationResult]) -> str:
        """
        Format validation results for console output.

        Args:
            results: Validation report

        Returns:
            Formatted string for console display
        """
        symbols = {
            Severity.SUCCESS: "✓",
            Severity.WARNING: "⚠",
            Severity.ERROR: "✗",
        }
        summary = summarize(results)
        lines = []

        # Header
        lines.append("=" * 70)
        lines.append("РЕЗУЛЬТАТЫ ПРОВЕРКИ")
        lines.append("=" * 70)

        for group in results:
            lines.append("")
            lines.append(f"{group.category} ({group.passed_count}/{group.total_count})")
            lines.append("-" * 70)
            for check in group.checks:
                lines.append(f"  {symbols[check.severity]} {check.name}")
                lines.append(f"    {check.message}")
                if check.details and not check.passed:
                    lines.append(f"    {check.details}")

        # Summary statistics
        lines.append("")
        lines.append("=" * 70)
        lines.append("ИТОГО:")
        lines.append(f"  Всего проверок: {summary['total_checks']}")
        lines.append(f"  Пройдено: {summary['passed_checks']}")
        lines.append(f"  Ошибки: {summary['errors']}")
        lines.append(f"  Предупреждения: {summary['warnings']}")
        lines.append(f"  Соответствие: {summary['percentage']}%")
        lines.append("=" * 70)

        return "\n".join(lines)


def validate_document(text: str, pages: int) -> List[ValidationResult]:
    """
    Convenience function to validate document text.

    Args:
        text: Extracted document text
        pages: Estimated page count

    Returns:
        Validation report
    """
    return DocumentValidator().validate(DocumentContent(text=text, pages=pages))


def summarize(results: List[ValidationResult]) -> Dict[str, Any]:
    """
    Count checks across the report.

    Returns:
        Dictionary with total/passed/failed counts, errors, warnings,
        percentage (0-100, rounded half up) and all_passed
    """
    checks = [c for group in results for c in group.checks]
    total = len(checks)
    passed = sum(1 for c in checks if c.passed)
    percentage = math.floor(passed / total * 100 + 0.5) if total else 0

    return {
        "total_checks": total,
        "passed_checks": passed,
        "failed_checks": total - passed,
        "errors": sum(1 for c in checks if c.severity == Severity.ERROR),
        "warnings": sum(1 for c in checks if c.severity == Severity.WARNING),
        "percentage": percentage,
        "all_passed": passed == total,
    }

"""
Reference Checker Module
Validates the bibliography section, its numbered entries and the trailing
author information block.
"""

import re

from .languages import AUTHOR_INFO_MARKER, REFERENCE_REQUIREMENTS, REFERENCES_MARKER
from .models import Check, ValidationResult
from .text_patterns import anywhere_marker, capture_between


class ReferenceChecker:
    """Checks bibliography presence, numbering and author information."""

    CATEGORY = "Список литературы"

    REFERENCES_PATTERN = anywhere_marker(REFERENCES_MARKER)
    AUTHOR_INFO_PATTERN = anywhere_marker(AUTHOR_INFO_MARKER)
    # "1. Author A. Title...", "  12. ..."
    NUMBERED_ENTRY = re.compile(r'^[ \t]*\d+\.', re.MULTILINE)

    def check(self, text: str) -> ValidationResult:
        """
        Run the reference checks.

        The numbering check is only emitted when the bibliography was found,
        so the number of checks in this group depends on the input.

        Args:
            text: Full raw document text

        Returns:
            ValidationResult for the references group
        """
        checks = []

        has_references = bool(self.REFERENCES_PATTERN.search(text))
        checks.append(self._check_presence(has_references))

        if has_references:
            checks.append(self._check_numbering(text))

        checks.append(self._check_author_info(text))

        return ValidationResult(category=self.CATEGORY, checks=checks)

    def _check_presence(self, has_references: bool) -> Check:
        return Check.evaluate(
            'references',
            name="Список литературы",
            passed=has_references,
            message=(
                "Раздел со списком литературы присутствует."
                if has_references else
                "Требуется раздел со списком литературы (Գրականություն/References/Литература)."
            ),
        )

    def count_numbered_entries(self, text: str) -> int:
        """Count numbered bibliography lines between the references and author-info markers."""
        section = capture_between(text, self.REFERENCES_PATTERN, self.AUTHOR_INFO_PATTERN)
        if section is None:
            return 0
        return len(self.NUMBERED_ENTRY.findall(section))

    def _check_numbering(self, text: str) -> Check:
        """Check the bibliography is a numbered list of at least 3 entries."""
        min_numbered = REFERENCE_REQUIREMENTS['min_numbered']
        count = self.count_numbered_entries(text)
        valid = count >= min_numbered

        return Check.evaluate(
            'reference_format',
            name="Оформление списка литературы",
            passed=valid,
            message=(
                f"Список литературы пронумерован: {count} источников."
                if valid else
                f"Найдено {count} пронумерованных источников, требуется не менее {min_numbered}."
            ),
            details="Формат записи: «1. Автор. Название...»",
        )

    def _check_author_info(self, text: str) -> Check:
        found = bool(self.AUTHOR_INFO_PATTERN.search(text))
        return Check.evaluate(
            'author_info',
            name="Сведения об авторах",
            passed=found,
            message=(
                "Сведения об авторах присутствуют в конце статьи."
                if found else
                "Рекомендуется добавить сведения об авторах в конце статьи."
            ),
        )

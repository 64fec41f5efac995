"""
Section Checker Module
Validates presence of the introduction, analysis and conclusion sections.
"""

from .languages import (
    ANALYSIS_MARKER,
    CONCLUSION_MARKER,
    CONCLUSION_REQUIREMENTS,
    INTRODUCTION_MARKER,
    REFERENCES_MARKER,
)
from .models import Check, ValidationResult
from .text_patterns import (
    anywhere_marker,
    capture_between,
    count_words,
    line_start_marker,
    word_marker,
)


class SectionChecker:
    """Checks the body sections of the article."""

    CATEGORY = "Разделы статьи"

    INTRODUCTION_PATTERN = word_marker(INTRODUCTION_MARKER)
    ANALYSIS_PATTERN = word_marker(ANALYSIS_MARKER)
    # The conclusion opens a capture, so its heading must start a line
    CONCLUSION_PATTERN = line_start_marker(CONCLUSION_MARKER, numbered=True)
    REFERENCES_PATTERN = anywhere_marker(REFERENCES_MARKER)

    def check(self, text: str) -> ValidationResult:
        checks = [
            self._check_presence(
                text, 'introduction', self.INTRODUCTION_PATTERN,
                name="Введение",
                found_message="Раздел «Введение» присутствует.",
                missing_message="Рекомендуется включить раздел «Введение».",
            ),
            self._check_presence(
                text, 'analysis', self.ANALYSIS_PATTERN,
                name="Анализ",
                found_message="Раздел с анализом присутствует.",
                missing_message="Рекомендуется включить раздел с анализом.",
            ),
            self._check_conclusion(text),
        ]
        return ValidationResult(category=self.CATEGORY, checks=checks)

    @staticmethod
    def _check_presence(text, rule, pattern, name, found_message, missing_message) -> Check:
        found = bool(pattern.search(text))
        return Check.evaluate(
            rule,
            name=name,
            passed=found,
            message=found_message if found else missing_message,
        )

    def _check_conclusion(self, text: str) -> Check:
        """Check the conclusion exists and stays within 150 words."""
        name = "Заключение"
        max_words = CONCLUSION_REQUIREMENTS['max_words']

        conclusion = capture_between(text, self.CONCLUSION_PATTERN, self.REFERENCES_PATTERN)
        if conclusion is None:
            return Check.failure(
                'conclusion', name,
                message="Рекомендуется включить раздел «Заключение».",
                details=f"Заключение до {max_words} слов",
            )

        word_count = count_words(conclusion)
        if word_count <= max_words:
            return Check.success(
                name,
                message=f"Заключение присутствует: {word_count} слов.",
                details=f"Не более {max_words} слов",
            )

        return Check.failure(
            'conclusion', name,
            message=f"Заключение содержит {word_count} слов, допускается не более {max_words}.",
            details=f"Найдено {word_count}, максимум {max_words}",
        )

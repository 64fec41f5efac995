"""
Structure Checker Module
Validates page count, the UDC line, the uppercase title and the author line.
"""

import re
from typing import List, Optional
from dataclasses import dataclass

from .languages import (
    AUTHOR_REQUIREMENTS,
    AUTHOR_SCRIPTS_LOWER,
    AUTHOR_SCRIPTS_UPPER,
    IDENTIFIER_TOKENS,
    LABEL_SEPARATORS,
    PAGE_REQUIREMENTS,
    TITLE_REQUIREMENTS,
    TITLE_SCRIPTS_LOWER,
    TITLE_SCRIPTS_UPPER,
)
from .models import Check, ValidationResult
from .text_patterns import count_letters


@dataclass(frozen=True)
class TitleMatch:
    """Outcome of the title search; `index` anchors the author search."""
    found: bool
    index: Optional[int] = None
    line: Optional[str] = None


NO_TITLE = TitleMatch(found=False)


class StructureChecker:
    """Checks the document head: volume, UDC, title and author."""

    CATEGORY = "Структура документа"

    # "УДК: 336.5", "ՀՏԴ՝ 811", "UDC 004.9"
    IDENTIFIER_PATTERN = re.compile(
        rf'^(?:{IDENTIFIER_TOKENS})[{re.escape(LABEL_SEPARATORS)}]?\s*\d'
    )
    IDENTIFIER_PREFIX = re.compile(rf'^(?:{IDENTIFIER_TOKENS})')
    AUTHOR_LETTER = re.compile(f'[{AUTHOR_SCRIPTS_UPPER}{AUTHOR_SCRIPTS_LOWER}]')
    AUTHOR_CAPITAL = re.compile(f'[{AUTHOR_SCRIPTS_UPPER}]')

    def check(self, lines: List[str], page_count: int) -> ValidationResult:
        """
        Run the structure checks.

        Args:
            lines: Non-blank document lines in reading order
            page_count: Estimated number of pages

        Returns:
            ValidationResult for the structure group
        """
        title = self.find_title(lines)
        checks = [
            self._check_page_count(page_count),
            self._check_identifier(lines),
            self._check_title(title),
            self._check_author(lines, title),
        ]
        return ValidationResult(category=self.CATEGORY, checks=checks)

    def _check_page_count(self, page_count: int) -> Check:
        """Check document is 8-12 pages."""
        min_pages = PAGE_REQUIREMENTS['min_pages']
        max_pages = PAGE_REQUIREMENTS['max_pages']
        valid = min_pages <= page_count <= max_pages

        if valid:
            verdict = f"Соответствует требованию {min_pages}-{max_pages} страниц."
        else:
            verdict = f"Требуется {min_pages}-{max_pages} страниц."

        return Check.evaluate(
            'page_count',
            name="Объем документа",
            passed=valid,
            message=f"Документ содержит {page_count} страниц. {verdict}",
        )

    def _check_identifier(self, lines: List[str]) -> Check:
        """Check the first non-blank line carries the UDC code."""
        first_line = lines[0].strip() if lines else ""
        has_udc = bool(self.IDENTIFIER_PATTERN.match(first_line))

        return Check.evaluate(
            'identifier',
            name="УДК в первой строке",
            passed=has_udc,
            message=(
                "УДК корректно указан в первой строке."
                if has_udc else
                "УДК должен быть указан в первой строке (ՀՏԴ/UDC/УДК)."
            ),
            details="" if has_udc else f"Первая строка: «{first_line[:60]}»",
        )

    def find_title(self, lines: List[str]) -> TitleMatch:
        """
        Find the uppercase title among the first lines.

        A line qualifies when its length is within the title bounds and more
        than 80% of its letters (Latin, Cyrillic, Armenian, Greek) are
        uppercase. Lines starting with the UDC marker are skipped.

        Args:
            lines: Non-blank document lines

        Returns:
            TitleMatch with the index of the first qualifying line
        """
        req = TITLE_REQUIREMENTS

        for index, raw in enumerate(lines[:req['scan_lines']]):
            line = raw.strip()
            if self.IDENTIFIER_PREFIX.match(line):
                continue
            if not req['min_length'] < len(line) < req['max_length']:
                continue

            upper = count_letters(line, TITLE_SCRIPTS_UPPER)
            letters = upper + count_letters(line, TITLE_SCRIPTS_LOWER)
            if letters < req['min_letters']:
                continue
            if upper / letters > req['min_upper_ratio']:
                return TitleMatch(found=True, index=index, line=line)

        return NO_TITLE

    def _check_title(self, title: TitleMatch) -> Check:
        return Check.evaluate(
            'title',
            name="Заголовок заглавными буквами",
            passed=title.found,
            message=(
                "Заголовок корректно оформлен заглавными буквами."
                if title.found else
                "Заголовок должен быть написан ЗАГЛАВНЫМИ БУКВАМИ."
            ),
            details=title.line[:80] if title.found else "",
        )

    def _is_author_line(self, raw: str) -> bool:
        req = AUTHOR_REQUIREMENTS
        line = raw.strip()
        if not req['min_length'] < len(line) < req['max_length']:
            return False
        if not self.AUTHOR_LETTER.search(line):
            return False

        tokens = line.split()
        if not req['min_tokens'] <= len(tokens) <= req['max_tokens']:
            return False
        return any(self.AUTHOR_CAPITAL.match(token) for token in tokens)

    def _check_author(self, lines: List[str], title: TitleMatch) -> Check:
        """Check an author line follows the title directly."""
        author_line = None
        if title.found:
            start = title.index + 1
            for line in lines[start:start + AUTHOR_REQUIREMENTS['scan_lines']]:
                if self._is_author_line(line):
                    author_line = line.strip()
                    break

        found = author_line is not None
        return Check.evaluate(
            'author',
            name="Информация об авторе",
            passed=found,
            message=(
                "Информация об авторе присутствует под заголовком."
                if found else
                "Необходимо указать автора под заголовком."
            ),
            details=author_line or "",
        )

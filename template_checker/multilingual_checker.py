"""
Multilingual Content Checker Module
Validates abstracts, keyword lists and translated titles in the three
template languages. Every language is driven by its LanguageProfile.
"""

import re
from typing import Dict, List, Optional, Pattern

from .languages import KEYWORD_DELIMITERS, LANGUAGES, TITLE_REQUIREMENTS, LanguageProfile
from .models import Check, ValidationResult
from .text_patterns import (
    capture_between,
    capture_paragraph,
    count_words,
    line_start_marker,
    strip_label,
    word_marker,
)


class MultilingualChecker:
    """Checks abstracts, keywords and translated titles per language."""

    CATEGORY = "Многоязычное оформление"

    KEYWORD_SPLIT = re.compile(f'[{re.escape(KEYWORD_DELIMITERS)}]')

    def __init__(self, languages: Optional[List[LanguageProfile]] = None):
        """
        Initialize checker and compile per-language markers.

        Args:
            languages: Language profiles in emission order (default: template table)
        """
        self.languages = languages if languages is not None else LANGUAGES

        self.abstract_markers: Dict[str, Pattern] = {}
        self.keywords_markers: Dict[str, Pattern] = {}
        self.keywords_presence: Dict[str, Pattern] = {}
        self.title_patterns: Dict[str, Pattern] = {}
        for lang in self.languages:
            self.abstract_markers[lang.code] = line_start_marker(lang.abstract_marker)
            self.keywords_markers[lang.code] = line_start_marker(lang.keywords_marker)
            self.keywords_presence[lang.code] = word_marker(lang.keywords_marker)
            self.title_patterns[lang.code] = re.compile(
                f'[{lang.script_upper}{lang.script_lower}\\s]+'
            )

        # Abstracts and keyword lists end where any abstract or keywords block begins
        boundary = '|'.join(
            marker
            for lang in self.languages
            for marker in (lang.abstract_marker, lang.keywords_marker)
        )
        self.section_boundary = line_start_marker(boundary)

    def check(self, text: str) -> ValidationResult:
        """
        Run abstract and keyword checks per language, then title checks.

        Args:
            text: Full raw document text

        Returns:
            ValidationResult for the multilingual group
        """
        checks = []

        for lang in self.languages:
            checks.append(self._check_abstract(text, lang))

            if lang.keywords_policy == 'count':
                checks.append(self._check_keyword_count(text, lang))
            elif lang.keywords_policy == 'presence':
                checks.append(self._check_keyword_presence(text, lang))

        for lang in self.languages:
            if lang.check_title:
                checks.append(self._check_title(text, lang))

        return ValidationResult(category=self.CATEGORY, checks=checks)

    def _check_abstract(self, text: str, lang: LanguageProfile) -> Check:
        """Check the abstract exists and its word count is within the language band."""
        name = f"Аннотация на {lang.name}"
        min_words, max_words = lang.abstract_words
        band = f"{min_words}-{max_words} слов"

        abstract = capture_between(text, self.abstract_markers[lang.code], self.section_boundary)
        if abstract is None:
            return Check.failure(
                'abstract', name,
                message=f"Аннотация на {lang.name} языке не найдена.",
                details=f"Требуется аннотация объемом {band}",
            )

        word_count = count_words(abstract)
        if min_words <= word_count <= max_words:
            return Check.success(
                name,
                message=f"Аннотация на {lang.name} языке присутствует: {word_count} слов.",
                details=f"В пределах {band}",
            )

        return Check.failure(
            'abstract', name,
            message=(
                f"Аннотация на {lang.name} языке содержит {word_count} слов, "
                f"требуется {band}."
            ),
            details=f"Найдено {word_count}, требуется {band}",
        )

    def split_keywords(self, keywords_text: str) -> List[str]:
        """Split a keyword paragraph on comma-family delimiters, dropping empties."""
        parts = self.KEYWORD_SPLIT.split(strip_label(keywords_text))
        return [p.strip() for p in parts if p.strip()]

    def _check_keyword_count(self, text: str, lang: LanguageProfile) -> Check:
        name = f"Ключевые слова на {lang.name}"
        min_count, max_count = lang.keywords_count
        band = f"{min_count}-{max_count} ключевых слов"

        keywords_text = capture_paragraph(
            text, self.keywords_markers[lang.code], self.section_boundary
        )
        if keywords_text is None:
            return Check.failure(
                'keywords_count', name,
                message=f"Ключевые слова на {lang.name} языке не найдены.",
                details=f"Требуется {band}",
            )

        keywords = self.split_keywords(keywords_text)
        count = len(keywords)
        if min_count <= count <= max_count:
            return Check.success(
                name,
                message=f"Ключевые слова на {lang.name} языке присутствуют: {count}.",
                details=f"В пределах {band}",
            )

        return Check.failure(
            'keywords_count', name,
            message=f"Указано {count} ключевых слов на {lang.name} языке, требуется {band}.",
            details=f"Найдено {count}, требуется {band}",
        )

    def _check_keyword_presence(self, text: str, lang: LanguageProfile) -> Check:
        found = bool(self.keywords_presence[lang.code].search(text))
        return Check.evaluate(
            'keywords_presence',
            name=f"Ключевые слова на {lang.name}",
            passed=found,
            message=(
                f"Ключевые слова на {lang.name} языке присутствуют."
                if found else
                f"Требуется указать ключевые слова на {lang.name} языке."
            ),
        )

    def find_title(self, text: str, lang: LanguageProfile) -> Optional[str]:
        """
        Find an uppercase title written only in the language's script.

        Returns:
            The first qualifying line (trimmed), or None
        """
        min_length = TITLE_REQUIREMENTS['foreign_min_length']
        pattern = self.title_patterns[lang.code]

        for raw in text.split('\n'):
            line = raw.strip()
            if len(line) <= min_length:
                continue
            if line == line.upper() and pattern.fullmatch(line):
                return line
        return None

    def _check_title(self, text: str, lang: LanguageProfile) -> Check:
        title = self.find_title(text, lang)
        found = title is not None
        return Check.evaluate(
            'foreign_title',
            name=f"Заголовок на {lang.name}",
            passed=found,
            message=(
                f"Заголовок на {lang.name} языке оформлен заглавными буквами."
                if found else
                f"Требуется заголовок на {lang.name} языке ЗАГЛАВНЫМИ БУКВАМИ."
            ),
            details=title[:80] if found else "",
        )

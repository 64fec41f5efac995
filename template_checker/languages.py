"""
Language and Requirement Tables
Declarative marker sets, script letter classes and numeric requirements
for the three-language journal template (Armenian, English, Russian).
"""

from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass


# Script letter classes (regex character-class bodies)
LATIN_UPPER = 'A-Z'
LATIN_LOWER = 'a-z'
CYRILLIC_UPPER = 'А-ЯЁ'
CYRILLIC_LOWER = 'а-яё'
ARMENIAN_UPPER = 'Ա-Ֆ'
ARMENIAN_LOWER = 'ա-ֆև'
GREEK_UPPER = 'Α-Ω'
GREEK_LOWER = 'α-ω'

# Scripts counted by the uppercase-ratio title heuristic
TITLE_SCRIPTS_UPPER = LATIN_UPPER + CYRILLIC_UPPER + ARMENIAN_UPPER + GREEK_UPPER
TITLE_SCRIPTS_LOWER = LATIN_LOWER + CYRILLIC_LOWER + ARMENIAN_LOWER + GREEK_LOWER

# Scripts an author line may be written in
AUTHOR_SCRIPTS_UPPER = LATIN_UPPER + CYRILLIC_UPPER + ARMENIAN_UPPER
AUTHOR_SCRIPTS_LOWER = LATIN_LOWER + CYRILLIC_LOWER + ARMENIAN_LOWER


@dataclass(frozen=True)
class LanguageProfile:
    """Markers and bands for one language of the template."""
    code: str
    name: str
    identifier: str
    abstract_marker: str
    keywords_marker: str
    script_upper: str
    script_lower: str
    abstract_words: Tuple[int, int]
    keywords_policy: Optional[str] = None  # 'count', 'presence' or None
    keywords_count: Tuple[int, int] = (5, 10)
    check_title: bool = False


LANGUAGES: List[LanguageProfile] = [
    LanguageProfile(
        code='hy',
        name='армянском',
        identifier='ՀՏԴ',
        abstract_marker=r'Ամփոփում|Համառոտագիր',
        keywords_marker=r'Հիմնաբառեր|Բանալի բառեր',
        script_upper=ARMENIAN_UPPER,
        script_lower=ARMENIAN_LOWER,
        abstract_words=(50, 150),
        keywords_policy='count',
        keywords_count=(5, 10),
    ),
    LanguageProfile(
        code='en',
        name='английском',
        identifier='UDC',
        abstract_marker=r'Abstract',
        keywords_marker=r'Key\s?words?',
        script_upper=LATIN_UPPER,
        script_lower=LATIN_LOWER,
        abstract_words=(50, 200),
        keywords_policy='presence',
        check_title=True,
    ),
    LanguageProfile(
        code='ru',
        name='русском',
        identifier='УДК',
        abstract_marker=r'Аннотация|Анотация',
        keywords_marker=r'Ключевые слова',
        script_upper=CYRILLIC_UPPER,
        script_lower=CYRILLIC_LOWER,
        abstract_words=(30, 150),
        check_title=True,
    ),
]

LANGUAGES_BY_CODE: Dict[str, LanguageProfile] = {lang.code: lang for lang in LANGUAGES}

IDENTIFIER_TOKENS = '|'.join(lang.identifier for lang in LANGUAGES)

# Separator punctuation that may follow a label ("УДК:", "ՀՏԴ՝", "Ամփոփում։", "Abstract.")
LABEL_SEPARATORS = ':.՝։-–—'

# Section and back-matter markers (all three languages)
INTRODUCTION_MARKER = r'Ներածություն|Introduction|Введение'
ANALYSIS_MARKER = r'Վերլուծություն|Analysis|Анализ'
CONCLUSION_MARKER = r'Եզրակացություն(?:ներ)?|Conclusions?|Заключение|Выводы'
REFERENCES_MARKER = (
    r'Գրականություն|References|Bibliography|'
    r'Список литературы|Список источников|Литература|Библиография'
)
AUTHOR_INFO_MARKER = (
    r'Տեղեկություններ հեղինակ(?:ի|ների) մասին|Հեղինակ(?:ի|ների) մասին|'
    r'Information about the authors?|About the authors?|'
    r'Сведения об автор(?:е|ах)|Информация об автор(?:е|ах)'
)

# Comma-family delimiters separating keywords
KEYWORD_DELIMITERS = ',;،，、'


# Numeric requirements
PAGE_REQUIREMENTS = {
    'min_pages': 8,
    'max_pages': 12,
    'words_per_page': 450,  # page estimate for formats without real pages
}

TITLE_REQUIREMENTS = {
    'scan_lines': 15,
    'min_length': 15,       # exclusive
    'max_length': 200,      # exclusive
    'min_upper_ratio': 0.8,  # exclusive
    'min_letters': 10,
    'foreign_min_length': 20,  # exclusive, second/third language titles
}

AUTHOR_REQUIREMENTS = {
    'scan_lines': 5,
    'min_length': 5,   # exclusive
    'max_length': 80,  # exclusive
    'min_tokens': 1,
    'max_tokens': 5,
}

CONCLUSION_REQUIREMENTS = {
    'max_words': 150,
}

REFERENCE_REQUIREMENTS = {
    'min_numbered': 3,
}

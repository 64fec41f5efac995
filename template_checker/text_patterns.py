"""
Text Pattern Helpers
Marker compilation, bounded section capture and word/letter counting
shared by the rule groups.
"""

import re
from typing import List, Optional, Pattern

from .languages import LABEL_SEPARATORS

# Optional section number before a heading: "1.", "2 ", "1.1.", "IV."
_HEADING_NUMBER = r'(?:\d+(?:\.\d+)*\.?|[IVXLC]+\.)[ \t]*'

_LEADING_LABEL = re.compile(f'[\\s{re.escape(LABEL_SEPARATORS)}]*')
_BLANK_LINE = re.compile(r'\n[ \t]*\n')


def line_start_marker(marker: str, numbered: bool = False) -> Pattern:
    """
    Compile a case-insensitive marker anchored at the start of a line.

    Args:
        marker: Regex alternation of marker words
        numbered: Allow a section number before the marker

    Returns:
        Compiled pattern
    """
    prefix = f'(?:{_HEADING_NUMBER})?' if numbered else ''
    return re.compile(rf'^[ \t]*{prefix}(?:{marker})\b', re.IGNORECASE | re.MULTILINE)


def anywhere_marker(marker: str) -> Pattern:
    """Compile a case-insensitive marker matched anywhere in the text."""
    return re.compile(rf'(?:{marker})', re.IGNORECASE)


def word_marker(marker: str) -> Pattern:
    """Compile a case-insensitive marker matched as a whole word anywhere in the text."""
    return re.compile(rf'\b(?:{marker})\b', re.IGNORECASE)


def capture_between(
    text: str,
    start: Pattern,
    end: Optional[Pattern] = None
) -> Optional[str]:
    """
    Capture the text after the first `start` match up to the nearest `end` match.

    Two anchored searches instead of one lazy expression keep matching
    linear on long or adversarial input.

    Args:
        text: Full document text
        start: Start marker pattern
        end: End marker pattern; end of text when None or unmatched

    Returns:
        Captured text, or None if the start marker is absent
    """
    start_match = start.search(text)
    if not start_match:
        return None

    begin = start_match.end()
    if end is not None:
        end_match = end.search(text, begin)
        if end_match:
            return text[begin:end_match.start()]
    return text[begin:]


def capture_paragraph(text: str, start: Pattern, end: Pattern) -> Optional[str]:
    """
    Capture the paragraph following the first `start` match.

    Label punctuation and blank lines right after the marker are skipped,
    so a heading on its own line still owns the list below it. The
    paragraph ends at the next blank line, the nearest `end` match or
    the end of text.

    Returns:
        Captured text, or None if the start marker is absent
    """
    start_match = start.search(text)
    if not start_match:
        return None

    begin = _LEADING_LABEL.match(text, start_match.end()).end()
    stops = [len(text)]
    blank_line = _BLANK_LINE.search(text, begin)
    if blank_line:
        stops.append(blank_line.start())
    end_match = end.search(text, begin)
    if end_match:
        stops.append(end_match.start())
    return text[begin:min(stops)]


def strip_label(text: str) -> str:
    """Drop label separator punctuation (':', '՝', '—') and surrounding whitespace."""
    return text.strip().lstrip(LABEL_SEPARATORS).strip()


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens."""
    return len(strip_label(text).split())


def non_blank_lines(text: str) -> List[str]:
    """Split text into lines, dropping blank ones and keeping order."""
    return [line for line in text.split('\n') if line.strip()]


def count_letters(text: str, letter_class: str) -> int:
    """Count characters of `text` belonging to a regex character-class body."""
    return len(re.findall(f'[{letter_class}]', text))

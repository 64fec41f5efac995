"""Shared fixtures: a template-compliant article and a factory to vary it."""

import pytest

from template_checker.validator import DocumentValidator


def words(word: str, count: int) -> str:
    return " ".join([word] * count)


def make_article(
    hy_abstract_words: int = 80,
    en_abstract_words: int = 100,
    ru_abstract_words: int = 60,
    hy_keywords: int = 6,
    conclusion_words: int = 60,
    references: int = 5,
    include_references: bool = True,
    include_author_info: bool = True,
) -> str:
    """Build article text that satisfies every rule with the default arguments."""
    hy_keyword_pool = [
        "ֆինանսներ", "շուկա", "բանկ", "ներդրում", "ռիսկ", "կապիտալ",
        "վարկ", "եկամուտ", "ակտիվ", "պարտք", "տոկոս", "բորսա",
    ]

    lines = [
        "ՀՏԴ՝ 336.5",
        "",
        "ՖԻՆԱՆՍԱԿԱՆ ՇՈՒԿԱՆԵՐԻ ԶԱՐԳԱՑՄԱՆ ՀԻՄՆԱԽՆԴԻՐՆԵՐԸ",
        "Արամ Պետրոսյան",
        "Երևանի պետական համալսարան",
        "Ամփոփում",
        words("տնտեսություն", hy_abstract_words),
        "Հիմնաբառեր՝ " + ", ".join(hy_keyword_pool[:hy_keywords]),
        "",
        "FINANCIAL MARKET DEVELOPMENT IN ARMENIA",
        "Aram Petrosyan",
        "Abstract",
        words("market", en_abstract_words),
        "Keywords: finance, market, bank, investment, risk",
        "",
        "ПРОБЛЕМЫ РАЗВИТИЯ ФИНАНСОВЫХ РЫНКОВ В АРМЕНИИ",
        "Арам Петросян",
        "Аннотация",
        words("рынок", ru_abstract_words),
        "Ключевые слова: финансы, рынок, банк, инвестиции, риск",
        "",
        "1. Introduction",
        "This paper studies the development of financial markets.",
        "2. Analysis",
        "The data covers ten years of banking activity.",
        "3. Conclusion",
        words("result", conclusion_words),
    ]

    if include_references:
        lines.append("References")
        for n in range(1, references + 1):
            lines.append(f"{n}. Petrosyan A. Financial markets, volume {n}. Yerevan, 2020.")

    if include_author_info:
        lines.append("Information about the author")
        lines.append("Aram Petrosyan, PhD, Yerevan State University")

    return "\n".join(lines)


@pytest.fixture
def article_factory():
    """Factory building article text with adjustable sections."""
    return make_article


@pytest.fixture
def article_text() -> str:
    """Article text passing every check."""
    return make_article()


@pytest.fixture
def validator() -> DocumentValidator:
    return DocumentValidator()

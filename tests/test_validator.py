"""DocumentValidator and report summary tests."""

import time

import pytest

from template_checker.models import Check, DocumentContent, Severity, ValidationResult
from template_checker.validator import DocumentValidator, summarize, validate_document


CATEGORIES = [
    "Структура документа",
    "Многоязычное оформление",
    "Разделы статьи",
    "Список литературы",
]


class TestEndToEnd:
    def test_compliant_article_passes_everything(self, validator, article_text: str) -> None:
        results = validator.validate(DocumentContent(text=article_text, pages=10))
        summary = summarize(results)

        assert [r.category for r in results] == CATEGORIES
        assert summary["total_checks"] == 17
        assert summary["passed_checks"] == summary["total_checks"]
        assert summary["percentage"] == 100
        assert summary["all_passed"] is True
        assert summary["errors"] == 0
        assert summary["warnings"] == 0

    def test_page_count_failure_only(self, article_text: str) -> None:
        summary = summarize(validate_document(article_text, 13))
        assert summary["failed_checks"] == 1
        assert summary["errors"] == 1
        assert summary["percentage"] == 94

    def test_validation_is_deterministic(self, validator, article_factory) -> None:
        content = DocumentContent(text=article_factory(hy_abstract_words=10), pages=5)
        assert validator.validate(content) == validator.validate(content)


class TestConditionalEmission:
    def test_check_count_varies_with_references(self, article_factory) -> None:
        with_refs = summarize(validate_document(article_factory(), 10))
        without_refs = summarize(validate_document(article_factory(include_references=False), 10))
        assert with_refs["total_checks"] - without_refs["total_checks"] == 1

    def test_empty_text_degrades_gracefully(self) -> None:
        results = validate_document("", 0)
        summary = summarize(results)
        assert [r.category for r in results] == CATEGORIES
        assert summary["total_checks"] == 16
        assert summary["passed_checks"] == 0
        assert summary["percentage"] == 0
        assert all(not c.passed for c in results[0].checks)


class TestInvariants:
    @pytest.mark.parametrize("overrides,pages", [
        ({}, 10),
        ({"hy_abstract_words": 10}, 3),
        ({"include_references": False}, 20),
        ({"references": 2, "include_author_info": False}, 9),
        ({"conclusion_words": 400, "hy_keywords": 2}, 11),
    ])
    def test_counts_and_severity(self, article_factory, overrides, pages: int) -> None:
        results = validate_document(article_factory(**overrides), pages)
        summary = summarize(results)

        assert summary["total_checks"] == sum(r.total_count for r in results)
        assert 0 <= summary["passed_checks"] <= summary["total_checks"]
        assert 0 <= summary["percentage"] <= 100
        for group in results:
            for check in group.checks:
                assert check.passed == (check.severity == Severity.SUCCESS)

    def test_failure_severity_is_fixed_per_rule(self, article_factory) -> None:
        short = validate_document(article_factory(hy_abstract_words=49), 10)[1].checks[0]
        missing = validate_document("", 10)[1].checks[0]
        assert short.severity == missing.severity == Severity.ERROR

    @pytest.mark.parametrize("text", [
        "1. " * 200000 + "Abstract " * 50000,
        "Abstract\n" + "Ամփոփում։ \n" * 100000,
        "Հիմնաբառեր՝ " + ", " * 200000 + "\n" + " \t\n" * 100000,
        "Conclusion\n" + "References\n" + "1.\n" * 100000,
        "ՀՏԴ" * 100000 + "\n" + "A" * 200000,
    ])
    def test_large_repetitive_input_stays_fast(self, text: str) -> None:
        started = time.perf_counter()
        results = validate_document(text, 0)
        assert time.perf_counter() - started < 5
        assert [r.category for r in results] == CATEGORIES


class TestSummary:
    def test_percentage_rounds_half_up(self) -> None:
        checks = [Check.success("a", "ok")] + [
            Check.failure("introduction", "b", "missing") for _ in range(7)
        ]
        # 1/8 = 12.5%
        assert summarize([ValidationResult("c", checks)])["percentage"] == 13

    def test_empty_report(self) -> None:
        summary = summarize([])
        assert summary["total_checks"] == 0
        assert summary["percentage"] == 0

    def test_console_report(self, validator, article_factory) -> None:
        results = validator.validate(DocumentContent(article_factory(hy_abstract_words=49), 10))
        text = validator.format_results_for_console(results)
        for category in CATEGORIES:
            assert category in text
        assert "✗ Аннотация на армянском" in text
        assert "Всего проверок: 17" in text
        assert "Соответствие: 94%" in text

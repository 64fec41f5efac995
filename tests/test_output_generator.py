"""OutputGenerator tests."""

import json
from pathlib import Path

from template_checker.models import DocumentContent
from template_checker.output_generator import OutputGenerator
from template_checker.validator import validate_document


class TestOutputGenerator:
    def test_json_structure(self, article_factory) -> None:
        text = article_factory(references=2)
        content = DocumentContent(text=text, pages=10)
        output = OutputGenerator.generate_json_output(
            "papers/article.docx", content, validate_document(text, 10)
        )

        assert output["document_info"]["file_name"] == "article.docx"
        assert output["document_info"]["pages"] == 10
        assert output["validation"]["total_checks"] == 17
        assert output["validation"]["warnings"] == 1
        assert [c["category"] for c in output["categories"]][-1] == "Список литературы"

        numbering = output["categories"][3]["checks"][1]
        assert numbering["passed"] is False
        assert numbering["severity"] == "warning"

    def test_save_json_keeps_unicode(self, tmp_path: Path, article_text: str) -> None:
        content = DocumentContent(text=article_text, pages=10)
        output = OutputGenerator.generate_json_output(
            "article.docx", content, validate_document(article_text, 10)
        )
        path = tmp_path / "out.json"
        OutputGenerator.save_json(output, str(path))

        raw = path.read_text(encoding="utf-8")
        assert "Структура документа" in raw
        assert json.loads(raw)["validation"] == output["validation"]

    def test_default_output_path(self) -> None:
        path = OutputGenerator.get_default_output_path("/data/papers/article.docx")
        assert Path(path) == Path("/data/papers/article_analysis.json")

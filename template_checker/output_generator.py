"""
Output Generator Module
Formats validation reports as JSON.
"""

import json
from typing import Dict, List
from datetime import datetime
from pathlib import Path

from .models import DocumentContent, ValidationResult
from .validator import summarize


ANALYSIS_VERSION = "template_checker_v1.0"


class OutputGenerator:
    """Generates JSON output with the validation report and document metadata."""

    @staticmethod
    def generate_json_output(
        document_path: str,
        content: DocumentContent,
        validation_results: List[ValidationResult]
    ) -> Dict:
        """
        Generate comprehensive JSON output.

        Args:
            document_path: Path to analyzed document
            content: Extracted document content
            validation_results: Validation report

        Returns:
            Dictionary ready for JSON serialization
        """
        return {
            "document_info": {
                "file_path": str(Path(document_path).absolute()),
                "file_name": Path(document_path).name,
                "analysis_timestamp": datetime.now().isoformat(),
                "analysis_version": ANALYSIS_VERSION,
                "pages": content.pages,
                "word_count": len(content.text.split()),
            },
            "validation": summarize(validation_results),
            "categories": OutputGenerator.serialize_results(validation_results),
        }

    @staticmethod
    def serialize_results(validation_results: List[ValidationResult]) -> List[Dict]:
        """Convert the report to plain dictionaries."""
        return [
            {
                "category": group.category,
                "passed": group.passed_count,
                "total": group.total_count,
                "checks": [
                    {
                        "name": c.name,
                        "passed": c.passed,
                        "severity": c.severity.value,
                        "message": c.message,
                        "details": c.details,
                    }
                    for c in group.checks
                ],
            }
            for group in validation_results
        ]

    @staticmethod
    def to_json(output_dict: Dict) -> str:
        return json.dumps(output_dict, indent=2, ensure_ascii=False)

    @staticmethod
    def save_json(output_dict: Dict, output_path: str):
        """
        Save JSON output to file.

        Args:
            output_dict: Dictionary to save
            output_path: Path for output file
        """
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(output_dict, f, indent=2, ensure_ascii=False)

    @staticmethod
    def get_default_output_path(document_path: str) -> str:
        """
        Get default output path for JSON file.

        Args:
            document_path: Path to input document

        Returns:
            Path for output JSON file
        """
        document_path = Path(document_path)
        output_path = document_path.parent / f"{document_path.stem}_analysis.json"
        return str(output_path)

"""
Document Extractor Module
Extracts plain text and a page count from Word (.docx), PDF and text files.
"""

import math
from io import BytesIO
from pathlib import Path
from typing import Tuple, Union

import docx
from docx.table import Table
import fitz  # PyMuPDF

from .languages import PAGE_REQUIREMENTS
from .models import DocumentContent


class DocumentExtractor:
    """Turns an uploaded document into DocumentContent."""

    SUPPORTED_FORMATS = ('.docx', '.pdf', '.txt')

    def __init__(self, words_per_page: int = PAGE_REQUIREMENTS['words_per_page']):
        """
        Initialize extractor.

        Args:
            words_per_page: Words per page used to estimate page count
                for formats without real pages (.docx, .txt)
        """
        self.words_per_page = words_per_page

    def extract(self, input_path: str) -> DocumentContent:
        """
        Extract text and page count from a file.

        Args:
            input_path: Path to the input document

        Returns:
            DocumentContent with text and page count

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If file format is not supported
            RuntimeError: If the file cannot be read
        """
        input_path = Path(input_path)

        if not input_path.exists():
            raise FileNotFoundError(f"Input file not found: {input_path}")

        return self.extract_bytes(input_path.read_bytes(), input_path.name)

    def extract_bytes(self, data: bytes, filename: str) -> DocumentContent:
        """
        Extract text and page count from an in-memory upload.

        Args:
            data: Raw file contents
            filename: Original file name, used to detect the format

        Returns:
            DocumentContent with text and page count
        """
        extension = Path(filename).suffix.lower()

        if extension == '.docx':
            text = self._extract_docx(data)
            pages = self.estimate_pages(text)

        elif extension == '.pdf':
            text, pages = self._extract_pdf(data)

        elif extension == '.txt':
            text = self._decode_text(data)
            pages = self.estimate_pages(text)

        else:
            raise ValueError(
                f"Unsupported file format: {extension or filename}. "
                f"Supported formats: {', '.join(self.SUPPORTED_FORMATS)}"
            )

        return DocumentContent(text=text, pages=pages)

    def estimate_pages(self, text: str) -> int:
        """Estimate page count from the word count."""
        word_count = len(text.split())
        return math.ceil(word_count / self.words_per_page)

    @staticmethod
    def _extract_docx(data: bytes) -> str:
        """
        Extract raw text from a Word document.

        Body paragraphs and table cell paragraphs are returned in
        document order, one paragraph per line.
        """
        try:
            document = docx.Document(BytesIO(data))
        except Exception as e:
            raise RuntimeError(f"Could not read Word document: {str(e)}")

        paragraphs = []
        for block in document.iter_inner_content():
            if isinstance(block, Table):
                for row in block.rows:
                    for cell in row.cells:
                        paragraphs.extend(p.text for p in cell.paragraphs)
            else:
                paragraphs.append(block.text)

        return "\n".join(paragraphs)

    @staticmethod
    def _extract_pdf(data: bytes) -> Tuple[str, int]:
        """Extract text and the real page count from a PDF."""
        try:
            with fitz.open(stream=data, filetype="pdf") as doc:
                text = "\n".join(page.get_text() for page in doc)
                page_count = doc.page_count
        except Exception as e:
            raise RuntimeError(f"Could not read PDF document: {str(e)}")

        return text, page_count

    @staticmethod
    def _decode_text(data: bytes) -> str:
        try:
            return data.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise RuntimeError(f"Text file is not valid UTF-8: {str(e)}")


def extract_document(input_path: Union[str, Path]) -> DocumentContent:
    """
    Convenience function to extract a document.

    Args:
        input_path: Path to input document

    Returns:
        DocumentContent
    """
    return DocumentExtractor().extract(str(input_path))

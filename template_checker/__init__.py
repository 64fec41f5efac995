"""
Journal template compliance checker.

This package contains the core functionality for document checking:
- extractor: Text and page count extraction (Word/PDF/text)
- structure_checker: Page count, UDC, title and author
- multilingual_checker: Abstracts, keywords and titles in three languages
- section_checker: Introduction, analysis and conclusion
- reference_checker: Bibliography and author information
- validator: Rule group aggregation and report summary
- output_generator: JSON output formatting
"""

from .models import Check, DocumentContent, Severity, ValidationResult
from .structure_checker import StructureChecker, TitleMatch
from .multilingual_checker import MultilingualChecker
from .section_checker import SectionChecker
from .reference_checker import ReferenceChecker
from .validator import DocumentValidator, summarize, validate_document
from .extractor import DocumentExtractor, extract_document
from .output_generator import OutputGenerator

__all__ = [
    'Check',
    'DocumentContent',
    'Severity',
    'ValidationResult',
    'StructureChecker',
    'TitleMatch',
    'MultilingualChecker',
    'SectionChecker',
    'ReferenceChecker',
    'DocumentValidator',
    'summarize',
    'validate_document',
    'DocumentExtractor',
    'extract_document',
    'OutputGenerator',
]

__version__ = '1.0.0'

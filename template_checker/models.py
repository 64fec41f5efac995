"""
Validation Data Model
Severity levels, per-check results, grouped results and the validator input.
"""

from typing import Dict, List
from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    """Validation result severity levels."""
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


# Severity emitted when a rule fails. Fixed per rule, never derived from content.
FAILURE_SEVERITY: Dict[str, Severity] = {
    'page_count': Severity.ERROR,
    'identifier': Severity.ERROR,
    'title': Severity.ERROR,
    'author': Severity.ERROR,
    'abstract': Severity.ERROR,
    'keywords_count': Severity.WARNING,
    'keywords_presence': Severity.WARNING,
    'foreign_title': Severity.ERROR,
    'introduction': Severity.WARNING,
    'analysis': Severity.WARNING,
    'conclusion': Severity.WARNING,
    'references': Severity.ERROR,
    'reference_format': Severity.WARNING,
    'author_info': Severity.WARNING,
}


@dataclass
class Check:
    """Result of a single validation check."""
    name: str
    passed: bool
    severity: Severity
    message: str
    details: str = ""

    @classmethod
    def success(cls, name: str, message: str, details: str = "") -> 'Check':
        return cls(name=name, passed=True, severity=Severity.SUCCESS,
                   message=message, details=details)

    @classmethod
    def failure(cls, rule: str, name: str, message: str, details: str = "") -> 'Check':
        """Build a failed check with the severity the policy table assigns to `rule`."""
        return cls(name=name, passed=False, severity=FAILURE_SEVERITY[rule],
                   message=message, details=details)

    @classmethod
    def evaluate(
        cls,
        rule: str,
        name: str,
        passed: bool,
        message: str,
        details: str = ""
    ) -> 'Check':
        if passed:
            return cls.success(name, message, details)
        return cls.failure(rule, name, message, details)


@dataclass
class ValidationResult:
    """Checks of one rule group, in evaluation order."""
    category: str
    checks: List[Check] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.checks)

    @property
    def passed_count(self) -> int:
        return sum(1 for c in self.checks if c.passed)


@dataclass(frozen=True)
class DocumentContent:
    """Extracted document text plus an estimated page count."""
    text: str
    pages: int

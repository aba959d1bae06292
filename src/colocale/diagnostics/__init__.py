"""Diagnostic system for colocale.

Provides the exception hierarchy, structured validation results and
report formatting.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    CatalogLoadError,
    ColocaleError,
    InvalidPlaceholderError,
    UndeclaredKeyError,
)
from .formatter import OutputFormat, ValidationFormatter
from .validation import ValidationIssue, ValidationResult

__all__ = [
    "CatalogLoadError",
    "ColocaleError",
    "InvalidPlaceholderError",
    "OutputFormat",
    "UndeclaredKeyError",
    "ValidationFormatter",
    "ValidationIssue",
    "ValidationResult",
]

"""Unified validation result for catalog validation.

Consolidates feedback from both validation stages:
- Catalog-level: per-namespace shape checks for one locale
- Cross-locale: key-set consistency against a reference locale

Python 3.13+.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from colocale.constants import SANITIZE_MAX_CONTENT_LENGTH
from colocale.enums import IssueType

__all__ = [
    "ValidationIssue",
    "ValidationResult",
]


# ============================================================================
# VALIDATION ISSUE
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Single validation error or warning.

    The same type is used for errors and warnings; which list it sits in
    decides its severity.

    Attributes:
        type: Taxonomy tag (e.g., IssueType.MISSING_PLURAL_OTHER)
        namespace: Namespace containing the offending key
        key: Offending key path (plural base name for plural checks)
        message: Human-readable description
        locale: Offending locale (cross-locale and locale-aware checks)
        reference_locale: Reference locale (cross-locale checks only)
    """

    type: IssueType
    namespace: str
    key: str
    message: str
    locale: str | None = None
    reference_locale: str | None = None

    def format(self, *, sanitize: bool = False) -> str:
        """Format issue as a single human-readable line.

        Args:
            sanitize: If True, truncate the message. Catalog values are
                quoted in some messages and may be long.

        Returns:
            Formatted issue string

        Example:
            >>> ValidationIssue(IssueType.MISSING_KEY, "common", "cancel",
            ...     "missing", locale="ja", reference_locale="en").format()
            '[missing-key] [common] [ja <- en] cancel: missing'
        """
        message = self.message
        if sanitize and len(message) > SANITIZE_MAX_CONTENT_LENGTH:
            message = message[:SANITIZE_MAX_CONTENT_LENGTH] + "..."

        locale_info = ""
        if self.locale is not None and self.reference_locale is not None:
            locale_info = f" [{self.locale} <- {self.reference_locale}]"
        elif self.locale is not None:
            locale_info = f" [{self.locale}]"

        return f"[{self.type}] [{self.namespace}]{locale_info} {self.key}: {message}"

    def to_dict(self) -> dict[str, str | None]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "type": str(self.type),
            "namespace": self.namespace,
            "key": self.key,
            "message": self.message,
            "locale": self.locale,
            "reference_locale": self.reference_locale,
        }


# ============================================================================
# UNIFIED VALIDATION RESULT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Unified validation result for all validation stages.

    Immutable result object; safe to share between threads.

    Attributes:
        errors: Validation errors, in detection order
        warnings: Validation warnings, in detection order

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[ValidationIssue, ...]
    warnings: tuple[ValidationIssue, ...]

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors).

        Warnings do not affect validity - they're informational.
        """
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Get number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Get number of warnings."""
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())

    @staticmethod
    def from_issues(
        errors: Iterable[ValidationIssue] = (),
        warnings: Iterable[ValidationIssue] = (),
    ) -> "ValidationResult":
        """Create a result from collected issues.

        Args:
            errors: Errors in detection order
            warnings: Warnings in detection order

        Returns:
            ValidationResult holding tuples of the given issues
        """
        return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))

    @staticmethod
    def combine(results: Iterable["ValidationResult"]) -> "ValidationResult":
        """Concatenate several results, preserving order.

        Args:
            results: Results to merge (e.g., one per namespace)

        Returns:
            ValidationResult with all errors and all warnings
        """
        errors: list[ValidationIssue] = []
        warnings: list[ValidationIssue] = []
        for result in results:
            errors.extend(result.errors)
            warnings.extend(result.warnings)
        return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))

    def errors_of_type(self, issue_type: IssueType) -> tuple[ValidationIssue, ...]:
        """Get errors carrying the given tag."""
        return tuple(error for error in self.errors if error.type == issue_type)

    def format(self, *, sanitize: bool = False, include_warnings: bool = True) -> str:
        """Format validation result as human-readable string.

        Args:
            sanitize: If True, truncate long issue messages.
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                lines.append(f"  {error.format(sanitize=sanitize)}")

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                lines.append(f"  {warning.format(sanitize=sanitize)}")

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)

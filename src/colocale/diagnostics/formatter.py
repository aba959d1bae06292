"""Validation result formatting service.

Centralizes report output for the ``colocale check`` command and for
callers that want the same rendering.
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from colocale.constants import SANITIZE_MAX_CONTENT_LENGTH

from .validation import ValidationIssue, ValidationResult

__all__ = [
    "OutputFormat",
    "ValidationFormatter",
]


class OutputFormat(StrEnum):
    """Output format options for validation reports."""

    TEXT = "text"  # Indented human-readable report (default)
    JSON = "json"  # One JSON document per result for tooling integration


@dataclass(frozen=True, slots=True)
class ValidationFormatter:
    """Validation report formatting service.

    Attributes:
        output_format: Output style (text, json)
        sanitize: Truncate long issue messages
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = ValidationFormatter()
        >>> print(formatter.format_result("en", ValidationResult.valid()))
        [en]
          OK: no errors

        >>> formatter = ValidationFormatter(output_format=OutputFormat.JSON)
        >>> formatter.format_result("en", ValidationResult.valid())
        '{"label": "en", "valid": true, "errors": [], "warnings": []}'
    """

    output_format: OutputFormat = OutputFormat.TEXT
    sanitize: bool = False
    color: bool = False

    def format_result(self, label: str, result: ValidationResult) -> str:
        """Format one validation result.

        Args:
            label: Locale name or a stage name such as "cross-locale"
            result: ValidationResult to format

        Returns:
            Formatted report
        """
        match self.output_format:
            case OutputFormat.TEXT:
                return self._format_text(label, result)
            case OutputFormat.JSON:
                return self._format_json(label, result)

    def format_summary(self, *, has_errors: bool, locale_count: int) -> str:
        """Format the closing summary line of a check run."""
        if self.output_format is OutputFormat.JSON:
            return json.dumps({"valid": not has_errors, "locales": locale_count})
        if has_errors:
            return self._paint("Validation failed: errors found", "31")
        plural = "" if locale_count == 1 else "s"
        return self._paint(
            f"Validation passed: all catalogs are valid ({locale_count} locale{plural})",
            "32",
        )

    def _format_text(self, label: str, result: ValidationResult) -> str:
        """Format result as an indented text block.

        Example output:
            [ja]
              Errors (1):
                - [common] [ja <- en] cancel
                  Key "cancel" exists in "en" but missing in "ja"
        """
        parts = [f"[{label}]"]

        if not result.errors and not result.warnings:
            parts.append(f"  {self._paint('OK', '32')}: no errors")
            return "\n".join(parts)

        if result.errors:
            parts.append(f"  {self._paint('Errors', '1;31')} ({result.error_count}):")
            parts.extend(self._format_issue(error) for error in result.errors)

        if result.warnings:
            parts.append(f"  {self._paint('Warnings', '1;33')} ({result.warning_count}):")
            parts.extend(self._format_issue(warning) for warning in result.warnings)

        return "\n".join(parts)

    def _format_issue(self, issue: ValidationIssue) -> str:
        locale_info = ""
        if issue.locale is not None and issue.reference_locale is not None:
            locale_info = f" [{issue.locale} <- {issue.reference_locale}]"
        message = self._maybe_sanitize(issue.message)
        return f"    - [{issue.namespace}]{locale_info} {issue.key}\n      {message}"

    def _format_json(self, label: str, result: ValidationResult) -> str:
        data = {
            "label": label,
            "valid": result.is_valid,
            "errors": [self._issue_dict(error) for error in result.errors],
            "warnings": [self._issue_dict(warning) for warning in result.warnings],
        }
        return json.dumps(data, ensure_ascii=False)

    def _issue_dict(self, issue: ValidationIssue) -> dict[str, str | None]:
        data = issue.to_dict()
        data["message"] = self._maybe_sanitize(issue.message)
        return data

    def _paint(self, text: str, code: str) -> str:
        if not self.color:
            return text
        return f"\033[{code}m{text}\033[0m"

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > SANITIZE_MAX_CONTENT_LENGTH:
            return text[:SANITIZE_MAX_CONTENT_LENGTH] + "..."
        return text

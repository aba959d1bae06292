"""Catalog validation for one locale.

Provides standalone validation of catalog shape without resolving
anything. Useful for CI pipelines and the ``colocale check`` command.

Architecture:
    - validate_catalog(): Main entry point, validates every namespace
    - CatalogValidator.validate_namespace(): runs all checks on one namespace
    - _check_plural_families(): Pass 1 - _other (and optionally _one) present
    - _check_nesting(): Pass 2 - values must be strings
    - _check_key_names(): Pass 3 - key naming rule
    - _check_placeholders(): Pass 4 - placeholder identifier syntax
    - _check_locale_categories(): Pass 5 - locale-aware warnings (optional)

Every pass runs regardless of earlier failures; issues accumulate.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from colocale.catalog.types import LocaleCatalog, LocaleCode, NamespaceEntries, NamespaceName
from colocale.constants import (
    KEY_NAME_PATTERN,
    PLACEHOLDER_NAME_PATTERN,
    PLACEHOLDER_SPAN_PATTERN,
    PLURAL_CATEGORIES,
    PLURAL_FALLBACK_CATEGORY,
    PLURAL_KEY_PATTERN,
    PLURAL_SUFFIX_SEPARATOR,
)
from colocale.diagnostics import ValidationIssue, ValidationResult
from colocale.enums import IssueType
from colocale.runtime.plural_rules import get_plural_categories
from colocale.validation.cross_locale import collect_keys

logger = logging.getLogger(__name__)

__all__ = [
    "CatalogValidator",
    "ValidationConfig",
    "collect_plural_families",
    "validate_catalog",
    "validate_namespace",
]


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Immutable configuration for CatalogValidator.

    Attributes:
        require_plural_one: Also require a ``_one`` sibling in every plural
            family (``missing-plural-one``). Off by default: only ``_other``
            is universal across CLDR locales.
        check_locale_categories: When a locale is given, warn about family
            siblings the locale never selects and categories it selects but
            the family lacks (default: True).
        debug: Log each detected issue at WARNING level instead of DEBUG.
    """

    require_plural_one: bool = False
    check_locale_categories: bool = True
    debug: bool = False


def collect_plural_families(entries: NamespaceEntries) -> dict[str, list[str]]:
    """Group plural-suffixed string keys by base name.

    Args:
        entries: Namespace entries

    Returns:
        Mapping of base name to the categories present, in entry order

    Example:
        >>> collect_plural_families({"n_one": "1", "n_other": "x", "title": "T"})
        {'n': ['one', 'other']}
    """
    families: dict[str, list[str]] = {}
    for key, value in entries.items():
        if not isinstance(value, str):
            continue
        match = PLURAL_KEY_PATTERN.match(key)
        if match:
            families.setdefault(match.group(1), []).append(match.group(2))
    return families


def _check_plural_families(
    namespace: NamespaceName,
    families: Mapping[str, list[str]],
    config: ValidationConfig,
) -> list[ValidationIssue]:
    errors: list[ValidationIssue] = []
    for base_key, categories in families.items():
        if config.require_plural_one and "one" not in categories:
            errors.append(
                ValidationIssue(
                    type=IssueType.MISSING_PLURAL_ONE,
                    namespace=namespace,
                    key=base_key,
                    message=f'Plural key "{base_key}_one" is required',
                )
            )
        if PLURAL_FALLBACK_CATEGORY not in categories:
            errors.append(
                ValidationIssue(
                    type=IssueType.MISSING_PLURAL_OTHER,
                    namespace=namespace,
                    key=base_key,
                    message=(
                        f'Plural key "{base_key}_other" is required '
                        f"(it is the fallback for every locale)"
                    ),
                )
            )
    return errors


def _check_nesting(namespace: NamespaceName, entries: NamespaceEntries) -> list[ValidationIssue]:
    errors: list[ValidationIssue] = []
    for key, value in entries.items():
        if not isinstance(value, str):
            errors.append(
                ValidationIssue(
                    type=IssueType.INVALID_NESTING,
                    namespace=namespace,
                    key=key,
                    message=(
                        "Nested structures are not allowed. Use a flat structure with "
                        f'dot notation (e.g., "profile.name"): "{key}"'
                    ),
                )
            )
    return errors


def _check_key_names(namespace: NamespaceName, entries: NamespaceEntries) -> list[ValidationIssue]:
    errors: list[ValidationIssue] = []
    for key in entries:
        if not isinstance(key, str) or not KEY_NAME_PATTERN.match(key):
            errors.append(
                ValidationIssue(
                    type=IssueType.INVALID_KEY_NAME,
                    namespace=namespace,
                    key=str(key),
                    message=(
                        f'Invalid key name: "{key}" '
                        "(must start with a letter or underscore; only letters, digits, "
                        "underscores and dots allowed)"
                    ),
                )
            )
    return errors


def _check_placeholders(namespace: NamespaceName, entries: NamespaceEntries) -> list[ValidationIssue]:
    errors: list[ValidationIssue] = []
    for key, value in entries.items():
        if not isinstance(value, str):
            continue
        for match in PLACEHOLDER_SPAN_PATTERN.finditer(value):
            name = match.group(1)
            if not PLACEHOLDER_NAME_PATTERN.match(name):
                errors.append(
                    ValidationIssue(
                        type=IssueType.INVALID_PLACEHOLDER,
                        namespace=namespace,
                        key=key,
                        message=(
                            f'Invalid placeholder: "{{{{{name}}}}}" '
                            "(only letters, digits and underscores allowed)"
                        ),
                    )
                )
    return errors


def _check_locale_categories(
    namespace: NamespaceName,
    families: Mapping[str, list[str]],
    locale: LocaleCode,
    reference_entries: object = None,
) -> list[ValidationIssue]:
    warnings: list[ValidationIssue] = []
    locale_categories = get_plural_categories(locale)
    reference_keys = collect_keys(reference_entries)

    for base_key, categories in families.items():
        for category in categories:
            sibling = f"{base_key}{PLURAL_SUFFIX_SEPARATOR}{category}"
            # Cross-locale consistency requires siblings the reference defines
            if category not in locale_categories and sibling not in reference_keys:
                warnings.append(
                    ValidationIssue(
                        type=IssueType.UNUSED_PLURAL_CATEGORY,
                        namespace=namespace,
                        key=sibling,
                        message=(
                            f'Plural category "{category}" is never selected for '
                            f'locale "{locale}"'
                        ),
                        locale=locale,
                    )
                )
        # Canonical order keeps warning output stable
        for category in PLURAL_CATEGORIES:
            if (
                category != PLURAL_FALLBACK_CATEGORY
                and category in locale_categories
                and category not in categories
            ):
                warnings.append(
                    ValidationIssue(
                        type=IssueType.MISSING_PLURAL_CATEGORY,
                        namespace=namespace,
                        key=f"{base_key}{PLURAL_SUFFIX_SEPARATOR}{category}",
                        message=(
                            f'Locale "{locale}" selects plural category "{category}"; '
                            f'"{base_key}_other" will be used instead'
                        ),
                        locale=locale,
                    )
                )
    return warnings


class CatalogValidator:
    """Validates the namespaces of one locale's catalog.

    Stateless apart from its configuration; safe to share between threads.

    Example:
        >>> validator = CatalogValidator(ValidationConfig(require_plural_one=True))
        >>> result = validator.validate({"common": {"n_other": "{{count}} items"}})
        >>> [str(e.type) for e in result.errors]
        ['missing-plural-one']
    """

    __slots__ = ("_config",)

    def __init__(self, config: ValidationConfig | None = None) -> None:
        """Initialize validator.

        Args:
            config: Validation configuration (default: ValidationConfig())
        """
        self._config = config if config is not None else ValidationConfig()

    @property
    def config(self) -> ValidationConfig:
        """Get the validation configuration."""
        return self._config

    def __repr__(self) -> str:
        return f"CatalogValidator(config={self._config!r})"

    def validate_namespace(
        self,
        namespace: NamespaceName,
        entries: NamespaceEntries,
        *,
        locale: LocaleCode | None = None,
        reference_entries: object = None,
    ) -> ValidationResult:
        """Run every check on one namespace.

        Args:
            namespace: Namespace name (reported in issues)
            entries: Namespace entries
            locale: Locale of the catalog; enables locale-aware warnings
            reference_entries: Same namespace in the cross-locale reference.
                Siblings it defines are not reported as unused categories,
                since key consistency requires them.

        Returns:
            ValidationResult for the namespace
        """
        if not isinstance(entries, Mapping):
            error = ValidationIssue(
                type=IssueType.INVALID_NESTING,
                namespace=namespace,
                key="",
                message=f"Namespace must be an object of entries, got {type(entries).__name__}",
            )
            self._log_issues([error])
            return ValidationResult.from_issues(errors=[error])

        families = collect_plural_families(entries)

        errors: list[ValidationIssue] = []
        errors.extend(_check_plural_families(namespace, families, self._config))
        errors.extend(_check_nesting(namespace, entries))
        errors.extend(_check_key_names(namespace, entries))
        errors.extend(_check_placeholders(namespace, entries))

        warnings: list[ValidationIssue] = []
        if locale is not None and self._config.check_locale_categories:
            warnings.extend(
                _check_locale_categories(namespace, families, locale, reference_entries)
            )

        self._log_issues(errors)
        return ValidationResult.from_issues(errors=errors, warnings=warnings)

    def validate(
        self,
        catalog: LocaleCatalog,
        *,
        locale: LocaleCode | None = None,
        reference_catalog: LocaleCatalog | None = None,
    ) -> ValidationResult:
        """Validate every namespace of one locale's catalog.

        Args:
            catalog: Mapping of namespace to entries for a single locale
            locale: Locale of the catalog; enables locale-aware warnings
            reference_catalog: Catalog of the cross-locale reference locale
                (see validate_namespace)

        Returns:
            Aggregated ValidationResult, namespaces in iteration order
        """
        result = ValidationResult.combine(
            self.validate_namespace(
                namespace,
                entries,
                locale=locale,
                reference_entries=(
                    reference_catalog.get(namespace) if reference_catalog is not None else None
                ),
            )
            for namespace, entries in catalog.items()
        )
        logger.debug(
            "Validated %d namespace(s)%s: %d error(s), %d warning(s)",
            len(catalog),
            f" for locale '{locale}'" if locale else "",
            result.error_count,
            result.warning_count,
        )
        return result

    def _log_issues(self, issues: list[ValidationIssue]) -> None:
        level = logging.WARNING if self._config.debug else logging.DEBUG
        for issue in issues:
            logger.log(level, "%s", issue.format())


def validate_namespace(
    namespace: NamespaceName,
    entries: NamespaceEntries,
    *,
    locale: LocaleCode | None = None,
    reference_entries: object = None,
    config: ValidationConfig | None = None,
) -> ValidationResult:
    """Validate one namespace. Convenience wrapper around CatalogValidator."""
    return CatalogValidator(config).validate_namespace(
        namespace, entries, locale=locale, reference_entries=reference_entries
    )


def validate_catalog(
    catalog: LocaleCatalog,
    *,
    locale: LocaleCode | None = None,
    reference_catalog: LocaleCatalog | None = None,
    config: ValidationConfig | None = None,
) -> ValidationResult:
    """Validate one locale's catalog (all namespaces).

    Args:
        catalog: Mapping of namespace to entries for a single locale
        locale: Locale of the catalog; enables locale-aware warnings
        reference_catalog: Catalog of the cross-locale reference locale;
            siblings it defines are not reported as unused categories
        config: Optional validation configuration

    Returns:
        ValidationResult; ``is_valid`` is False if any error was found

    Example:
        >>> validate_catalog({"common": {"submit-button": "Submit"}}).errors[0].type
        <IssueType.INVALID_KEY_NAME: 'invalid-key-name'>
    """
    return CatalogValidator(config).validate(
        catalog, locale=locale, reference_catalog=reference_catalog
    )

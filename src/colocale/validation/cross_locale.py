"""Cross-locale key consistency validation.

Compares every locale's key set, namespace by namespace, against a
reference locale (the first locale unless given explicitly). Only string
entries count as keys; nested objects are reported by the per-locale
validator instead.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from colocale.catalog.types import Catalog, LocaleCode, MessageKey, NamespaceName
from colocale.diagnostics import ValidationIssue, ValidationResult
from colocale.enums import IssueType

logger = logging.getLogger(__name__)

__all__ = ["collect_keys", "validate_cross_locale"]


def collect_keys(entries: object) -> dict[MessageKey, None]:
    """Collect the string-valued keys of a namespace, in entry order.

    A missing or malformed namespace yields an empty key set.

    Returns:
        Insertion-ordered key set (dict with None values)
    """
    if not isinstance(entries, Mapping):
        return {}
    return {key: None for key, value in entries.items() if isinstance(value, str)}


def _namespace_union(catalogs: Catalog) -> list[NamespaceName]:
    seen: dict[NamespaceName, None] = {}
    for locale_catalog in catalogs.values():
        for namespace in locale_catalog:
            seen.setdefault(namespace, None)
    return list(seen)


def validate_cross_locale(
    catalogs: Catalog,
    *,
    reference_locale: LocaleCode | None = None,
) -> ValidationResult:
    """Check that every locale exposes the same keys per namespace.

    A namespace absent from a locale is compared as an empty key set, so
    all of its reference keys are reported as ``missing-key``.

    Args:
        catalogs: Locale-grouped catalog with two or more locales
        reference_locale: Locale holding the ground-truth key sets
            (default: first locale in iteration order)

    Returns:
        ValidationResult with ``missing-key`` / ``extra-key`` errors carrying
        the target ``locale`` and the ``reference_locale``. Valid with no
        issues when fewer than two locales are present.

    Raises:
        ValueError: If reference_locale is given but absent from catalogs

    Example:
        >>> result = validate_cross_locale({
        ...     "en": {"common": {"submit": "Submit", "cancel": "Cancel"}},
        ...     "ja": {"common": {"submit": "Soushin"}},
        ... })
        >>> [(str(e.type), e.key, e.locale) for e in result.errors]
        [('missing-key', 'cancel', 'ja')]
    """
    locales = list(catalogs)
    if len(locales) < 2:
        return ValidationResult.valid()

    if reference_locale is None:
        reference_locale = locales[0]
    elif reference_locale not in catalogs:
        msg = f"Reference locale '{reference_locale}' not present (available: {', '.join(locales)})"
        raise ValueError(msg)

    errors: list[ValidationIssue] = []
    reference_catalog = catalogs[reference_locale]

    for namespace in _namespace_union(catalogs):
        reference_keys = collect_keys(reference_catalog.get(namespace))

        for target_locale in locales:
            if target_locale == reference_locale:
                continue
            target_keys = collect_keys(catalogs[target_locale].get(namespace))

            for key in reference_keys:
                if key not in target_keys:
                    errors.append(
                        ValidationIssue(
                            type=IssueType.MISSING_KEY,
                            namespace=namespace,
                            key=key,
                            message=(
                                f'Key "{key}" exists in "{reference_locale}" '
                                f'but missing in "{target_locale}"'
                            ),
                            locale=target_locale,
                            reference_locale=reference_locale,
                        )
                    )

            for key in target_keys:
                if key not in reference_keys:
                    errors.append(
                        ValidationIssue(
                            type=IssueType.EXTRA_KEY,
                            namespace=namespace,
                            key=key,
                            message=(
                                f'Key "{key}" exists in "{target_locale}" '
                                f'but not in "{reference_locale}"'
                            ),
                            locale=target_locale,
                            reference_locale=reference_locale,
                        )
                    )

    logger.debug(
        "Cross-locale check of %d locale(s) against '%s': %d error(s)",
        len(locales),
        reference_locale,
        len(errors),
    )
    return ValidationResult.from_issues(errors=errors)

"""Catalog shape normalization at the system boundary.

Raw catalog input arrives either locale-grouped
(``{locale: {namespace: {key: value}}}``) or, for a single locale,
namespace-grouped (``{namespace: {key: value}}``). The engine only accepts
the canonical locale-grouped form; callers decide the shape once, here,
instead of the resolver re-detecting it on every call.

Also provides flatten_namespace() to migrate legacy one-level nested files
(``{"profile": {"name": ...}}``) to dot keys (``{"profile.name": ...}``).

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from colocale.catalog.types import Catalog, LocaleCode, NamespaceEntries
from colocale.constants import KEY_SEPARATOR
from colocale.enums import CatalogShape

logger = logging.getLogger(__name__)

__all__ = [
    "detect_catalog_shape",
    "flatten_namespace",
    "normalize_catalog",
]


def _is_namespace_level(value: object) -> bool:
    """Check if a value looks like a namespace: a mapping of string values."""
    return isinstance(value, Mapping) and all(isinstance(v, str) for v in value.values())


def detect_catalog_shape(data: Mapping[str, object]) -> CatalogShape:
    """Decide whether raw catalog data is locale- or namespace-grouped.

    Data is locale-grouped when every top-level value is a mapping whose
    values are all namespace-like mappings (mappings of strings). Anything
    else, including an empty mapping, is treated as namespace-grouped.

    Legacy nested namespace files can look locale-grouped; pass an explicit
    locale to normalize_catalog() when the input is known to be one locale.

    Args:
        data: Raw decoded catalog

    Returns:
        Detected CatalogShape

    Example:
        >>> detect_catalog_shape({"en": {"common": {"submit": "Submit"}}})
        <CatalogShape.LOCALE_GROUPED: 'locale'>
        >>> detect_catalog_shape({"common": {"submit": "Submit"}})
        <CatalogShape.NAMESPACE_GROUPED: 'namespace'>
    """
    if not data:
        return CatalogShape.NAMESPACE_GROUPED
    for value in data.values():
        if not isinstance(value, Mapping) or not value:
            return CatalogShape.NAMESPACE_GROUPED
        if not all(_is_namespace_level(namespace) for namespace in value.values()):
            return CatalogShape.NAMESPACE_GROUPED
    return CatalogShape.LOCALE_GROUPED


def normalize_catalog(
    data: Mapping[str, object],
    *,
    locale: LocaleCode | None = None,
    shape: CatalogShape | None = None,
) -> Catalog:
    """Convert raw catalog data to the canonical locale-grouped shape.

    Args:
        data: Raw decoded catalog
        locale: Locale of namespace-grouped data. Required when the data is
            (or is detected as) namespace-grouped.
        shape: Known shape; detected with detect_catalog_shape() if omitted

    Returns:
        Locale-grouped catalog (a new outer mapping; entries are shared)

    Raises:
        ValueError: If the data is namespace-grouped and no locale is given
    """
    if shape is None:
        shape = CatalogShape.NAMESPACE_GROUPED if locale is not None else detect_catalog_shape(data)

    match shape:
        case CatalogShape.LOCALE_GROUPED:
            return dict(data)  # type: ignore[arg-type]
        case CatalogShape.NAMESPACE_GROUPED:
            if locale is None:
                msg = "locale is required to normalize a namespace-grouped catalog"
                raise ValueError(msg)
            return {locale: dict(data)}  # type: ignore[dict-item]


def flatten_namespace(entries: NamespaceEntries) -> dict[str, str]:
    """Flatten one level of nesting into dot-notation keys.

    Values nested deeper than one level, and non-string leaves, cannot be
    represented and are skipped with a warning.

    Args:
        entries: Namespace entries, possibly with one-level nested objects

    Returns:
        Flat key -> string mapping

    Example:
        >>> flatten_namespace({"title": "Hi", "profile": {"name": "Name"}})
        {'title': 'Hi', 'profile.name': 'Name'}
    """
    flat: dict[str, str] = {}
    for key, value in entries.items():
        if isinstance(value, str):
            flat[key] = value
        elif isinstance(value, Mapping):
            for nested_key, nested_value in value.items():
                full_key = f"{key}{KEY_SEPARATOR}{nested_key}"
                if isinstance(nested_value, str):
                    flat[full_key] = nested_value
                else:
                    logger.warning("Skipping deeply nested value at '%s'", full_key)
        else:
            logger.warning("Skipping non-string value at '%s'", key)
    return flat

"""Catalog validation.

Provides per-locale shape validation and cross-locale key consistency
checks. Results are values; nothing here raises on invalid catalogs.

Python 3.13+.
"""

from .catalog import (
    CatalogValidator,
    ValidationConfig,
    collect_plural_families,
    validate_catalog,
    validate_namespace,
)
from .cross_locale import collect_keys, validate_cross_locale

__all__ = [
    "CatalogValidator",
    "ValidationConfig",
    "collect_keys",
    "collect_plural_families",
    "validate_catalog",
    "validate_cross_locale",
    "validate_namespace",
]

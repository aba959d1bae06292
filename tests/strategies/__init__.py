"""Hypothesis strategies for colocale property-based testing.

Usage:
    from tests.strategies import catalogs, key_names, placeholder_values
"""

from .catalogs import (
    LOCALE_POOL,
    catalogs,
    counts,
    key_names,
    namespace_entries,
    namespace_names,
    placeholder_names,
    placeholder_values,
    plural_families,
    requirements_for,
)

__all__ = [
    "LOCALE_POOL",
    "catalogs",
    "counts",
    "key_names",
    "namespace_entries",
    "namespace_names",
    "placeholder_names",
    "placeholder_values",
    "plural_families",
    "requirements_for",
]

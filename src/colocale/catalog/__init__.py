"""Catalog package: requirements, resolution, loading and shape handling.

Submodules:
    types        - PEP 695 type aliases (Catalog, LocaleCode, NamespaceName, ...)
    requirements - Requirement, define_requirement, merge_requirements
    picking      - pick_messages, MessageResolver, ResolvedMessages
    loading      - JSON directory loading
    shape        - Boundary shape detection/normalization, flattening

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from colocale.catalog.loading import (
    find_locale_directories,
    load_catalog,
    load_namespace_directory,
)
from colocale.catalog.picking import (
    MessageResolver,
    ResolvedMessages,
    ResolverConfig,
    extract_plural_keys,
    make_message_key,
    pick_messages,
    split_message_key,
)
from colocale.catalog.requirements import (
    Requirement,
    define_requirement,
    merge_requirements,
)
from colocale.catalog.shape import detect_catalog_shape, flatten_namespace, normalize_catalog
from colocale.catalog.types import (
    Catalog,
    LocaleCatalog,
    LocaleCode,
    MessageKey,
    NamespaceEntries,
    NamespaceName,
)

__all__ = [
    # Requirements
    "Requirement",
    "define_requirement",
    "merge_requirements",
    # Resolution
    "MessageResolver",
    "ResolvedMessages",
    "ResolverConfig",
    "extract_plural_keys",
    "make_message_key",
    "pick_messages",
    "split_message_key",
    # Loading and shape
    "detect_catalog_shape",
    "find_locale_directories",
    "flatten_namespace",
    "load_catalog",
    "load_namespace_directory",
    "normalize_catalog",
    # Type aliases
    "Catalog",
    "LocaleCatalog",
    "LocaleCode",
    "MessageKey",
    "NamespaceEntries",
    "NamespaceName",
]

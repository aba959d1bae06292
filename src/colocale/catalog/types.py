"""Type aliases for the catalog domain.

Provides semantic type aliases used throughout the catalog package and by
user code when annotating resolver and validator call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "Catalog",
    "LocaleCatalog",
    "LocaleCode",
    "MessageKey",
    "NamespaceEntries",
    "NamespaceName",
]

type LocaleCode = str
"""Locale identifier (e.g., 'en', 'ja', 'pt-BR')."""

type NamespaceName = str
"""Namespace grouping related keys (e.g., 'common', 'user')."""

type MessageKey = str
"""Flat entry key; dots group logically (e.g., 'profile.name', 'itemCount_one')."""

type NamespaceEntries = Mapping[MessageKey, object]
"""Entries of one namespace. Canonical values are strings; anything else is
reported by the validator as invalid nesting and ignored by the resolver."""

type LocaleCatalog = Mapping[NamespaceName, NamespaceEntries]
"""All namespaces of one locale (one JSON file per namespace on disk)."""

type Catalog = Mapping[LocaleCode, LocaleCatalog]
"""Canonical locale-grouped catalog: locale -> namespace -> key -> string."""

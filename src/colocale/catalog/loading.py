"""Catalog loading from JSON directories.

Expected layout: ``<base>/<locale>/<namespace>.json``, each file a flat JSON
object mapping keys to strings. Loading only decodes files; shape problems
(nesting, key names, plurals) are left for the validators to report.

Components:
    load_namespace_directory - One locale directory -> {namespace: entries}
    load_catalog - Base directory -> {locale: {namespace: entries}}
    find_locale_directories - Subdirectories that hold JSON files

Directory entries are visited in sorted order, so the first locale (the
cross-locale reference by default) is stable across platforms.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from colocale.catalog.types import LocaleCode, NamespaceName
from colocale.diagnostics.errors import CatalogLoadError

logger = logging.getLogger(__name__)

__all__ = [
    "CATALOG_FILE_SUFFIX",
    "find_locale_directories",
    "load_catalog",
    "load_namespace_directory",
]

CATALOG_FILE_SUFFIX = ".json"


def _read_namespace_file(path: Path) -> dict[str, object]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Failed to read file ({e.strerror or e})"
        raise CatalogLoadError(msg, path=str(path)) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        msg = f"JSON parse error at line {e.lineno}, column {e.colno} ({e.msg})"
        raise CatalogLoadError(msg, path=str(path)) from e

    if not isinstance(data, dict):
        msg = f"Catalog file must contain a JSON object, got {type(data).__name__}"
        raise CatalogLoadError(msg, path=str(path))
    return data


def load_namespace_directory(directory: str | Path) -> dict[NamespaceName, dict[str, object]]:
    """Load every namespace file of one locale directory.

    Args:
        directory: Directory containing ``<namespace>.json`` files

    Returns:
        Mapping of namespace (file stem) to decoded entries

    Raises:
        CatalogLoadError: If the directory or a file cannot be read, or a
            file is not a JSON object

    Example:
        >>> load_namespace_directory("locales/en")
        {'common': {'submit': 'Submit'}, 'user': {'profile.name': 'Name'}}
    """
    path = Path(directory)
    try:
        files = sorted(
            child
            for child in path.iterdir()
            if child.is_file() and child.suffix == CATALOG_FILE_SUFFIX
        )
    except OSError as e:
        msg = f"Failed to read directory ({e.strerror or e})"
        raise CatalogLoadError(msg, path=str(path)) from e

    namespaces: dict[NamespaceName, dict[str, object]] = {}
    for file in files:
        namespaces[file.stem] = _read_namespace_file(file)
        logger.debug("Loaded namespace '%s' from %s", file.stem, file)
    return namespaces


def find_locale_directories(base_directory: str | Path) -> list[Path]:
    """Find locale subdirectories (those holding at least one JSON file).

    Args:
        base_directory: Directory that may contain locale subdirectories

    Returns:
        Sorted list of locale directory paths; empty if none or unreadable
    """
    base = Path(base_directory)
    try:
        children = sorted(child for child in base.iterdir() if child.is_dir())
    except OSError:
        logger.debug("Cannot list %s; no locale directories", base)
        return []

    found: list[Path] = []
    for child in children:
        try:
            has_catalog = any(
                entry.is_file() and entry.suffix == CATALOG_FILE_SUFFIX
                for entry in child.iterdir()
            )
        except OSError:
            logger.debug("Skipping unreadable directory %s", child)
            continue
        if has_catalog:
            found.append(child)
    return found


def load_catalog(base_directory: str | Path) -> dict[LocaleCode, dict[NamespaceName, dict[str, object]]]:
    """Load a locale-grouped catalog from ``<base>/<locale>/<namespace>.json``.

    Subdirectories without JSON files are not locales and are skipped.

    Args:
        base_directory: Directory containing one subdirectory per locale

    Returns:
        Canonical locale-grouped catalog (empty if no locale directory found)

    Raises:
        CatalogLoadError: If a locale directory holds an unreadable or
            malformed file
    """
    catalog: dict[LocaleCode, dict[NamespaceName, dict[str, object]]] = {}
    for locale_dir in find_locale_directories(base_directory):
        catalog[locale_dir.name] = load_namespace_directory(locale_dir)
    logger.debug("Loaded %d locale(s) from %s", len(catalog), base_directory)
    return catalog

"""Filesystem helpers for tests that exercise catalog loading and the CLI."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


def write_catalog(base: Path, catalog: dict) -> Path:
    """Write a locale-grouped catalog as ``<base>/<locale>/<namespace>.json``.

    Returns:
        ``base``, for chaining in fixtures
    """
    for locale, namespaces in catalog.items():
        locale_dir = base / locale
        locale_dir.mkdir(parents=True, exist_ok=True)
        for namespace, entries in namespaces.items():
            (locale_dir / f"{namespace}.json").write_text(
                json.dumps(entries, ensure_ascii=False), encoding="utf-8"
            )
    return base

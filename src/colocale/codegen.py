"""Key type generation from a catalog's shape.

Emits a Python module declaring ``Literal`` aliases for the namespaces and
the base keys of each namespace, so static type checkers can verify
requirement declarations:

    type Namespace = Literal["common", "user"]
    type CommonKey = Literal["cancel", "itemCount", "submit"]

Plural siblings collapse to their base key (``itemCount_one`` and
``itemCount_other`` both declare ``itemCount``), matching how requirements
name plural families.

Namespaces whose alias names collide (``user-settings`` and ``user_settings``
both map to ``UserSettingsKey``) are numbered in sorted namespace order:
the first keeps the plain name, later ones get ``UserSettingsKey2``, ...

Python 3.13+.
"""

from __future__ import annotations

import json
import re

from colocale.catalog.types import LocaleCatalog, MessageKey, NamespaceName
from colocale.constants import PLURAL_KEY_PATTERN
from colocale.validation.cross_locale import collect_keys

__all__ = [
    "base_keys",
    "generate_key_types",
    "namespace_type_name",
]

_WORD_SPLIT_PATTERN = re.compile(r"[^0-9A-Za-z]+")

_HEADER = '''"""Auto-generated message key types.

DO NOT EDIT MANUALLY. Regenerate with: colocale codegen <catalog-dir> <output>
"""

from typing import Literal
'''


def namespace_type_name(namespace: NamespaceName) -> str:
    """Build the alias name for a namespace's key type.

    Example:
        >>> namespace_type_name("common")
        'CommonKey'
        >>> namespace_type_name("user-settings")
        'UserSettingsKey'
        >>> namespace_type_name("2fa")
        'N2faKey'
    """
    words = [word for word in _WORD_SPLIT_PATTERN.split(namespace) if word]
    stem = "".join(word[0].upper() + word[1:] for word in words) or "Unnamed"
    if stem[0].isdigit():
        stem = f"N{stem}"
    return f"{stem}Key"


def base_keys(entries: object) -> list[MessageKey]:
    """Collapse plural siblings to base keys, sorted and unique.

    Example:
        >>> base_keys({"submit": "S", "n_one": "1", "n_other": "x"})
        ['n', 'submit']
    """
    keys: set[MessageKey] = set()
    for key in collect_keys(entries):
        match = PLURAL_KEY_PATTERN.match(key)
        keys.add(match.group(1) if match else key)
    return sorted(keys)


def _unique_type_names(namespaces: list[NamespaceName]) -> dict[NamespaceName, str]:
    """Assign alias names, numbering later namespaces whose name is taken.

    Example:
        >>> _unique_type_names(["user-settings", "user_settings"])
        {'user-settings': 'UserSettingsKey', 'user_settings': 'UserSettingsKey2'}
    """
    names: dict[NamespaceName, str] = {}
    taken: set[str] = set()
    for namespace in namespaces:
        name = namespace_type_name(namespace)
        if name in taken:
            stem = name.removesuffix("Key")
            suffix = 2
            while f"{stem}Key{suffix}" in taken:
                suffix += 1
            name = f"{stem}Key{suffix}"
        taken.add(name)
        names[namespace] = name
    return names


def _literal(values: list[str]) -> str:
    if not values:
        # Literal[()] is invalid; an empty namespace admits no keys
        return "Never"
    return "Literal[" + ", ".join(json.dumps(value, ensure_ascii=False) for value in values) + "]"


def generate_key_types(catalog: LocaleCatalog) -> str:
    """Generate a Python module of key type aliases for one locale's catalog.

    Args:
        catalog: Mapping of namespace to entries for a single locale

    Returns:
        Python source text
    """
    namespaces = sorted(catalog)
    lines: list[str] = [_HEADER]

    uses_never = False
    lines.append(f"type Namespace = {_literal(namespaces)}")
    lines.append("")

    type_names = _unique_type_names(namespaces)
    keys_by_namespace: dict[NamespaceName, list[MessageKey]] = {}
    for namespace in namespaces:
        keys = base_keys(catalog[namespace])
        keys_by_namespace[namespace] = keys
        uses_never = uses_never or not keys
        lines.append(f"type {type_names[namespace]} = {_literal(keys)}")

    lines.append("")
    lines.append("KEYS_BY_NAMESPACE: dict[str, frozenset[str]] = {")
    for namespace, keys in keys_by_namespace.items():
        members = ", ".join(json.dumps(key, ensure_ascii=False) for key in keys)
        value = f"frozenset({{{members}}})" if keys else "frozenset()"
        lines.append(f"    {json.dumps(namespace, ensure_ascii=False)}: {value},")
    lines.append("}")
    lines.append("")

    source = "\n".join(lines)
    if uses_never or not namespaces:
        source = source.replace("from typing import Literal", "from typing import Literal, Never")
    return source

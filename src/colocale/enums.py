"""Enumerations for colocale type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they compare equal to the
plain tags used in catalogs, JSON output and tests.

Python 3.13+.
"""

from enum import StrEnum


class IssueType(StrEnum):
    """Taxonomy tag of a validation error or warning.

    StrEnum provides automatic string conversion: str(IssueType.MISSING_KEY) == "missing-key"
    """

    MISSING_PLURAL_ONE = "missing-plural-one"
    """Plural family without a ``_one`` sibling (strict configurations only)."""

    MISSING_PLURAL_OTHER = "missing-plural-other"
    """Plural family without the mandatory ``_other`` sibling."""

    INVALID_NESTING = "invalid-nesting"
    """Entry value is a nested object instead of a string."""

    INVALID_KEY_NAME = "invalid-key-name"
    """Entry key violates the key naming rule."""

    INVALID_PLACEHOLDER = "invalid-placeholder"
    """``{{...}}`` span does not enclose a valid identifier."""

    MISSING_KEY = "missing-key"
    """Key present in the reference locale but absent from another locale."""

    EXTRA_KEY = "extra-key"
    """Key present in a locale but absent from the reference locale."""

    UNUSED_PLURAL_CATEGORY = "unused-plural-category"
    """Plural sibling whose category the locale's rules never select."""

    MISSING_PLURAL_CATEGORY = "missing-plural-category"
    """Category the locale's rules select but the family does not define."""


class CatalogShape(StrEnum):
    """Top-level grouping of raw catalog input.

    StrEnum provides automatic string conversion: str(CatalogShape.LOCALE_GROUPED) == "locale"
    """

    LOCALE_GROUPED = "locale"
    """{locale: {namespace: {key: value}}}"""

    NAMESPACE_GROUPED = "namespace"
    """{namespace: {key: value}} for a single locale"""


__all__ = [
    "CatalogShape",
    "IssueType",
]

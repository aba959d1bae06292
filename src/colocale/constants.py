"""Shared constants for colocale.

Centralizes the catalog grammar (key names, plural suffixes, placeholder
delimiters) so the resolver, translator, validators and code generator agree
on a single definition.

Constants are grouped by domain:
- Plural families: CLDR categories and the suffix separator
- Key grammar: namespace/key separator and key name pattern
- Placeholders: delimiter-based patterns for substitution and validation
- Caches and output limits

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Plural families
    "PLURAL_CATEGORIES",
    "PLURAL_FALLBACK_CATEGORY",
    "PLURAL_SUFFIX_SEPARATOR",
    "PLURAL_KEY_PATTERN",
    # Key grammar
    "KEY_SEPARATOR",
    "KEY_NAME_PATTERN",
    # Placeholders
    "PLACEHOLDER_PATTERN",
    "PLACEHOLDER_SPAN_PATTERN",
    "PLACEHOLDER_NAME_PATTERN",
    # Limits
    "MAX_LOCALE_CACHE_SIZE",
    "SANITIZE_MAX_CONTENT_LENGTH",
]

# ============================================================================
# PLURAL FAMILIES
# ============================================================================

# CLDR plural categories in canonical order. Probing and code generation
# iterate in this order so output is deterministic.
PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# Every locale's rule set can produce "other"; it is the universal fallback.
PLURAL_FALLBACK_CATEGORY: str = "other"

PLURAL_SUFFIX_SEPARATOR: str = "_"

# Matches "itemCount_one" -> ("itemCount", "one"). Greedy base so that
# "a_b_other" splits as ("a_b", "other").
PLURAL_KEY_PATTERN: re.Pattern[str] = re.compile(
    r"^(.+)_(" + "|".join(PLURAL_CATEGORIES) + r")$"
)

# ============================================================================
# KEY GRAMMAR
# ============================================================================

# Separator between namespace and key in resolved message keys.
KEY_SEPARATOR: str = "."

# Dots are allowed inside keys for logical grouping ("profile.name").
KEY_NAME_PATTERN: re.Pattern[str] = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_.]*$")

# ============================================================================
# PLACEHOLDERS
# ============================================================================

# Substitution only considers bare identifiers between the delimiters.
PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"\{\{([A-Za-z0-9_]+)\}\}")

# Validation captures any delimited span so malformed names can be reported.
PLACEHOLDER_SPAN_PATTERN: re.Pattern[str] = re.compile(r"\{\{([^{}]+)\}\}")

PLACEHOLDER_NAME_PATTERN: re.Pattern[str] = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

# ============================================================================
# LIMITS
# ============================================================================

# Parsed Babel locales kept by locale_utils.get_babel_locale().
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum issue message length before truncation when sanitizing output.
SANITIZE_MAX_CONTENT_LENGTH: int = 100

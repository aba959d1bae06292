"""CLDR plural rules implementation using Babel.

Provides plural category selection for all locales using Babel's CLDR data.
Catalog plural families are keyed by the categories returned here
(``itemCount_one``, ``itemCount_few``, ...).

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

import math
from decimal import Decimal

from babel.core import UnknownLocaleError

from colocale.constants import PLURAL_FALLBACK_CATEGORY
from colocale.locale_utils import get_babel_locale

__all__ = ["get_plural_categories", "select_plural_category"]

type PluralOperand = int | float | Decimal


def _is_finite(n: PluralOperand) -> bool:
    if isinstance(n, Decimal):
        return n.is_finite()
    if isinstance(n, float):
        return math.isfinite(n)
    return True


def select_plural_category(n: PluralOperand, locale: str) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "en", "pl_PL", "ar-SA")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en")
        'one'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(2, "ar_SA")
        'two'
        >>> select_plural_category(42, "ja")
        'other'
        >>> select_plural_category(float("nan"), "en")
        'other'

    Edge cases:
        - NaN and infinities have no CLDR operands and always map to "other".
        - Negative numbers are classified by magnitude (CLDR operand n = |x|).
        - Fractions follow CLDR visible-digit operands (1.5 in "en" is "other").
        - Unknown or malformed locales fall back to the one/other rule.
    """
    if not _is_finite(n):
        return PLURAL_FALLBACK_CATEGORY

    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError, TypeError):
        # Most common pattern: n == 1 -> "one", else -> "other"
        return "one" if abs(n) == 1 else PLURAL_FALLBACK_CATEGORY

    return locale_obj.plural_form(n)


def get_plural_categories(locale: str) -> frozenset[str]:
    """Get the plural categories a locale's rules can produce.

    Args:
        locale: Locale code

    Returns:
        Category set, always containing "other". Unknown locales report the
        one/other fallback set.

    Examples:
        >>> sorted(get_plural_categories("en"))
        ['one', 'other']
        >>> sorted(get_plural_categories("ja"))
        ['other']
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError, TypeError):
        return frozenset({"one", PLURAL_FALLBACK_CATEGORY})

    # PluralRule.tags excludes the implicit "other" rule
    return frozenset(locale_obj.plural_form.tags) | {PLURAL_FALLBACK_CATEGORY}

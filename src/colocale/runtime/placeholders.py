"""Placeholder substitution for resolved messages.

Placeholders use double-brace delimiters around a bare identifier:
``"{{count}} items"``. Two disciplines are provided:

- substitute(): partial and silent. Placeholders without a value stay
  verbatim so a missing value is visible in rendered output.
- substitute_strict(): raises InvalidPlaceholderError listing every
  placeholder without a value, for catalogs authored to be complete.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

import re
from collections.abc import Mapping
from decimal import Decimal

from colocale.constants import PLACEHOLDER_PATTERN
from colocale.diagnostics.errors import InvalidPlaceholderError

__all__ = [
    "PlaceholderValue",
    "PlaceholderValues",
    "extract_placeholders",
    "substitute",
    "substitute_strict",
]

type PlaceholderValue = str | int | float | Decimal
"""Value accepted for a placeholder; rendered as in substitute()."""

type PlaceholderValues = Mapping[str, PlaceholderValue]
"""Placeholder name to value map supplied at lookup time."""


def _render(value: PlaceholderValue) -> str:
    # Whole-number floats render like integers: 1.0 -> "1"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def extract_placeholders(template: str) -> tuple[str, ...]:
    """Get placeholder names used in a template.

    Args:
        template: Message template

    Returns:
        Unique names in order of first appearance

    Example:
        >>> extract_placeholders("{{a}} and {{b}} and {{a}}")
        ('a', 'b')
    """
    return tuple(dict.fromkeys(PLACEHOLDER_PATTERN.findall(template)))


def substitute(template: str, values: PlaceholderValues) -> str:
    """Replace known placeholders, leaving unknown ones verbatim.

    Every occurrence of a placeholder whose name is in ``values`` is
    replaced. Values render with str(), except whole-number floats, which
    render without a fractional part (``1.0`` -> ``"1"``). Replacement text
    is never rescanned, so a value that itself looks like a placeholder is
    inserted literally.

    Args:
        template: Message template
        values: Placeholder values

    Returns:
        Substituted string

    Example:
        >>> substitute("{{count}} items for {{user}}", {"count": 5})
        '5 items for {{user}}'
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in values:
            return _render(values[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def substitute_strict(template: str, values: PlaceholderValues) -> str:
    """Replace placeholders, requiring a value for each of them.

    Args:
        template: Message template
        values: Placeholder values

    Returns:
        Fully substituted string

    Raises:
        InvalidPlaceholderError: If any placeholder has no value. The error
            lists every missing name, not only the first.
    """
    missing = [name for name in extract_placeholders(template) if name not in values]
    if missing:
        raise InvalidPlaceholderError(missing, template)
    return substitute(template, values)

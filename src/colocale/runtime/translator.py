"""Translator factory and message resolution protocol.

A translator is bound to one requirement's namespace and looks messages up
in a ResolvedMessages set:

    1. ``count`` present and numeric -> CLDR category -> ``key_<category>``
    2. literal ``key``
    3. ``key_other``
    4. nothing found -> the key itself is returned (visible miss indicator)
    5. found and values supplied -> placeholders substituted

Lookup misses never raise. Opt-in strictness is available through
TranslatorConfig: declared-key enforcement (a programming error guard) and
strict placeholder substitution.

Thread Safety:
    Translators are immutable; calls share no state.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from colocale.catalog.picking import ResolvedMessages, make_message_key
from colocale.catalog.requirements import Requirement
from colocale.catalog.types import MessageKey
from colocale.constants import PLURAL_FALLBACK_CATEGORY, PLURAL_SUFFIX_SEPARATOR
from colocale.diagnostics.errors import UndeclaredKeyError
from colocale.runtime.placeholders import (
    PlaceholderValues,
    substitute,
    substitute_strict,
)
from colocale.runtime.plural_rules import select_plural_category

logger = logging.getLogger(__name__)

__all__ = [
    "Translator",
    "TranslatorConfig",
    "create_translator",
]

# Name of the placeholder value that drives plural selection.
_COUNT_FIELD = "count"


@dataclass(frozen=True, slots=True)
class TranslatorConfig:
    """Immutable configuration for Translator.

    Attributes:
        enforce_declared_keys: Raise UndeclaredKeyError when a key outside
            the requirement's declared keys is requested (default: False,
            such keys follow the normal miss path).
        strict_placeholders: Use strict substitution, raising
            InvalidPlaceholderError when a placeholder has no value
            (default: False, unknown placeholders stay verbatim).
        debug: Log lookup misses at WARNING level instead of DEBUG.
    """

    enforce_declared_keys: bool = False
    strict_placeholders: bool = False
    debug: bool = False


def _plural_count(values: PlaceholderValues | None) -> int | float | Decimal | None:
    """Extract a usable numeric ``count`` from placeholder values."""
    if not values or _COUNT_FIELD not in values:
        return None
    count = values[_COUNT_FIELD]
    # bool is an int subclass but never a count
    if isinstance(count, bool) or not isinstance(count, (int, float, Decimal)):
        return None
    return count


class Translator:
    """Lookup function scoped to one requirement.

    Created by create_translator(); call it like a function:

        >>> t = create_translator(resolved, Requirement("common", ["itemCount"]))
        >>> t("itemCount", {"count": 5})
        '5 items'

    Attributes:
        namespace: Namespace all lookups are made in
        locale: Locale used for plural classification
        keys: Keys declared by the requirement
    """

    __slots__ = ("_config", "_messages", "_requirement")

    def __init__(
        self,
        messages: ResolvedMessages,
        requirement: Requirement,
        config: TranslatorConfig | None = None,
    ) -> None:
        """Initialize translator.

        Args:
            messages: Resolved message set to read from
            requirement: Requirement defining namespace and declared keys
            config: Translator configuration (default: TranslatorConfig())
        """
        self._messages = messages
        self._requirement = requirement
        self._config = config if config is not None else TranslatorConfig()

    @property
    def namespace(self) -> str:
        """Get the namespace lookups are scoped to."""
        return self._requirement.namespace

    @property
    def locale(self) -> str:
        """Get the locale used for plural classification."""
        return self._messages.locale

    @property
    def keys(self) -> tuple[MessageKey, ...]:
        """Get the keys declared by the requirement."""
        return self._requirement.keys

    @property
    def config(self) -> TranslatorConfig:
        """Get the translator configuration."""
        return self._config

    def __repr__(self) -> str:
        return (
            f"Translator(namespace={self.namespace!r}, locale={self.locale!r}, "
            f"keys={self.keys!r})"
        )

    def __call__(self, key: MessageKey, values: PlaceholderValues | None = None) -> str:
        """Translate a key.

        Args:
            key: Declared base key
            values: Placeholder values; a numeric ``count`` selects the
                plural variant

        Returns:
            Resolved and substituted message, or ``key`` when no message
            exists

        Raises:
            UndeclaredKeyError: If enforce_declared_keys is set and ``key``
                is not declared by the requirement
            InvalidPlaceholderError: If strict_placeholders is set and a
                placeholder in the message has no value
        """
        if self._config.enforce_declared_keys and key not in self._requirement:
            raise UndeclaredKeyError(self.namespace, key, self.keys)

        message = self.resolve(key, values)
        if message is None:
            level = logging.WARNING if self._config.debug else logging.DEBUG
            logger.log(
                level,
                "Message '%s' not resolved in namespace '%s' for locale '%s'",
                key,
                self.namespace,
                self.locale,
            )
            return key

        if values is None:
            return message
        if self._config.strict_placeholders:
            return substitute_strict(message, values)
        return substitute(message, values)

    def resolve(self, key: MessageKey, values: PlaceholderValues | None = None) -> str | None:
        """Find the raw message template for a key without substitution.

        Args:
            key: Base key
            values: Placeholder values (only ``count`` is consulted)

        Returns:
            Message template, or None when no candidate exists
        """
        message: str | None = None

        count = _plural_count(values)
        if count is not None:
            category = select_plural_category(count, self.locale)
            message = self._lookup(f"{key}{PLURAL_SUFFIX_SEPARATOR}{category}")

        if message is None:
            message = self._lookup(key)

        if message is None:
            message = self._lookup(f"{key}{PLURAL_SUFFIX_SEPARATOR}{PLURAL_FALLBACK_CATEGORY}")

        return message

    def _lookup(self, key: MessageKey) -> str | None:
        return self._messages.get(make_message_key(self.namespace, key))


def create_translator(
    messages: ResolvedMessages,
    requirement: Requirement,
    *,
    config: TranslatorConfig | None = None,
) -> Translator:
    """Create a translator bound to a requirement's namespace.

    Args:
        messages: Resolved message set (see pick_messages())
        requirement: Requirement defining namespace and declared keys
        config: Optional translator configuration

    Returns:
        Callable Translator

    Example:
        >>> catalog = {"en": {"common": {"itemCount_one": "1 item",
        ...                              "itemCount_other": "{{count}} items"}}}
        >>> req = Requirement("common", ["itemCount"])
        >>> t = create_translator(pick_messages(catalog, req, "en"), req)
        >>> t("itemCount", {"count": 1})
        '1 item'
        >>> t("itemCount", {"count": 5})
        '5 items'
        >>> t("doesNotExist")
        'doesNotExist'
    """
    return Translator(messages, requirement, config)

"""Requirement resolution: extracting the entries a set of requirements needs.

Given a full multi-locale catalog, a list of requirements and a target
locale, produces a compact ResolvedMessages set keyed ``"namespace.key"``.
Plural families are expanded automatically: declaring ``"itemCount"``
also copies every existing ``itemCount_<category>`` sibling.

Architecture:
    - extract_plural_keys(): existence probe for plural siblings of a base key
    - MessageResolver.pick(): per-requirement extraction (literal + plural)
    - pick_messages(): module-level convenience with the default config
    - ResolvedMessages: immutable locale-tagged result

Thread Safety:
    Resolution is a pure function of its inputs. Results own their data and
    never alias the source catalog.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from colocale.catalog.requirements import RequirementGroup, iter_requirements
from colocale.catalog.types import (
    Catalog,
    LocaleCode,
    MessageKey,
    NamespaceEntries,
    NamespaceName,
)
from colocale.constants import KEY_SEPARATOR, PLURAL_CATEGORIES, PLURAL_SUFFIX_SEPARATOR

logger = logging.getLogger(__name__)

__all__ = [
    "MessageResolver",
    "ResolvedMessages",
    "ResolverConfig",
    "extract_plural_keys",
    "make_message_key",
    "pick_messages",
    "split_message_key",
]


def make_message_key(namespace: NamespaceName, key: MessageKey) -> str:
    """Build the resolved-set key for an entry.

    Example:
        >>> make_message_key("common", "itemCount_one")
        'common.itemCount_one'
    """
    return f"{namespace}{KEY_SEPARATOR}{key}"


def split_message_key(message_key: str) -> tuple[NamespaceName, MessageKey]:
    """Decompose a resolved-set key into (namespace, key).

    Splits at the FIRST separator, so dotted keys survive intact:
    ``"user.profile.name"`` -> ``("user", "profile.name")``. A namespace that
    itself contains a dot cannot be recovered; such namespaces are ambiguous
    and should not be used.

    Args:
        message_key: Key of the form "namespace.key"

    Returns:
        Tuple of namespace and entry key

    Raises:
        ValueError: If the key has no separator or an empty namespace/key

    Example:
        >>> split_message_key("user.profile.name")
        ('user', 'profile.name')
    """
    namespace, separator, key = message_key.partition(KEY_SEPARATOR)
    if not separator or not namespace or not key:
        msg = f"Not a namespaced message key: {message_key!r}"
        raise ValueError(msg)
    return namespace, key


def extract_plural_keys(entries: NamespaceEntries, base_key: MessageKey) -> list[MessageKey]:
    """Find the plural siblings of a base key that exist in a namespace.

    Probes every CLDR category suffix in canonical order. Only string values
    count as existing; nested objects are not messages.

    Args:
        entries: Entry map of one namespace
        base_key: Base key name (e.g., "itemCount")

    Returns:
        Existing suffixed keys (e.g., ["itemCount_one", "itemCount_other"])

    Example:
        >>> extract_plural_keys({"n_one": "1", "n_other": "many", "n": "x"}, "n")
        ['n_one', 'n_other']
    """
    found: list[MessageKey] = []
    for category in PLURAL_CATEGORIES:
        candidate = f"{base_key}{PLURAL_SUFFIX_SEPARATOR}{category}"
        if isinstance(entries.get(candidate), str):
            found.append(candidate)
    return found


@dataclass(frozen=True, slots=True)
class ResolvedMessages(Mapping[str, str]):
    """Immutable, locale-tagged set of resolved messages.

    Behaves as a read-only mapping from ``"namespace.key"`` to string. The
    constructor copies the given messages, so the result never aliases
    caller data.

    Attributes:
        locale: Locale the messages were resolved for
        messages: Read-only view of the resolved entries

    Example:
        >>> resolved = ResolvedMessages("en", {"common.submit": "Submit"})
        >>> resolved["common.submit"]
        'Submit'
        >>> resolved.locale
        'en'
    """

    locale: LocaleCode
    messages: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze a private copy of the messages."""
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def __getitem__(self, message_key: str) -> str:
        return self.messages[message_key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResolvedMessages):
            return self.locale == other.locale and dict(self.messages) == dict(other.messages)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.locale, frozenset(self.messages.items())))

    def lookup(self, namespace: NamespaceName, key: MessageKey) -> str | None:
        """Get an entry by namespace and key, or None when absent."""
        return self.messages.get(make_message_key(namespace, key))

    def to_dict(self) -> dict[str, str]:
        """Get a mutable copy of the messages (e.g., for JSON serialization)."""
        return dict(self.messages)


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for MessageResolver.

    Attributes:
        debug: Log requirement keys that resolve to nothing at WARNING level
            instead of DEBUG. Scoped to the resolver instance using it.
    """

    debug: bool = False


class MessageResolver:
    """Extracts requirement-relevant entries from full catalogs.

    Stateless apart from its configuration; one instance can serve any
    number of threads.

    Example:
        >>> catalog = {"en": {"common": {"n_one": "1 item", "n_other": "{{count}} items"}}}
        >>> resolver = MessageResolver()
        >>> resolver.pick(catalog, Requirement("common", ["n"]), "en").to_dict()
        {'common.n_one': '1 item', 'common.n_other': '{{count}} items'}
    """

    __slots__ = ("_config",)

    def __init__(self, config: ResolverConfig | None = None) -> None:
        """Initialize resolver.

        Args:
            config: Resolver configuration (default: ResolverConfig())
        """
        self._config = config if config is not None else ResolverConfig()

    @property
    def config(self) -> ResolverConfig:
        """Get the resolver configuration."""
        return self._config

    def __repr__(self) -> str:
        return f"MessageResolver(config={self._config!r})"

    def pick(
        self,
        catalog: Catalog,
        requirements: RequirementGroup,
        locale: LocaleCode,
    ) -> ResolvedMessages:
        """Resolve requirements against one locale of a catalog.

        For each declared key, the literal entry is copied when it is a
        string, and independently every existing plural sibling is copied.
        A key can therefore contribute both a literal and a plural family.

        A locale or namespace missing from the catalog is not an error: it
        contributes no entries (the catalog may simply not be loaded yet).

        Args:
            catalog: Full locale-grouped catalog
            requirements: Requirement or (nested) iterable of requirements
            locale: Target locale; must match a catalog key exactly

        Returns:
            Freshly allocated ResolvedMessages tagged with ``locale``
        """
        locale_catalog = catalog.get(locale)
        if locale_catalog is None:
            logger.debug("Locale '%s' not present in catalog; resolving to empty set", locale)
            return ResolvedMessages(locale)

        resolved: dict[str, str] = {}
        for requirement in iter_requirements(requirements):
            namespace = requirement.namespace
            entries = locale_catalog.get(namespace)
            if not isinstance(entries, Mapping):
                self._report_missing(
                    "Namespace '%s' not present for locale '%s'", namespace, locale
                )
                continue

            for key in requirement.keys:
                found = False

                value = entries.get(key)
                if isinstance(value, str):
                    resolved[make_message_key(namespace, key)] = value
                    found = True

                for plural_key in extract_plural_keys(entries, key):
                    resolved[make_message_key(namespace, plural_key)] = entries[plural_key]
                    found = True

                if not found:
                    self._report_missing(
                        "Key '%s' not found in namespace '%s' for locale '%s'",
                        key,
                        namespace,
                        locale,
                    )

        return ResolvedMessages(locale, resolved)

    def _report_missing(self, message: str, *args: object) -> None:
        level = logging.WARNING if self._config.debug else logging.DEBUG
        logger.log(level, message, *args)


_DEFAULT_RESOLVER = MessageResolver()


def pick_messages(
    catalog: Catalog,
    requirements: RequirementGroup,
    locale: LocaleCode,
    *,
    config: ResolverConfig | None = None,
) -> ResolvedMessages:
    """Extract only the entries required by ``requirements`` for ``locale``.

    Convenience wrapper around MessageResolver.pick().

    Args:
        catalog: Full locale-grouped catalog
        requirements: Requirement or (nested) iterable of requirements
        locale: Target locale
        config: Optional resolver configuration

    Returns:
        ResolvedMessages for the locale

    Example:
        >>> catalog = {"en": {"common": {"submit": "Submit", "cancel": "Cancel"}}}
        >>> pick_messages(catalog, [Requirement("common", ["submit"])], "en").to_dict()
        {'common.submit': 'Submit'}
    """
    resolver = _DEFAULT_RESOLVER if config is None else MessageResolver(config)
    return resolver.pick(catalog, requirements, locale)

"""Requirement declarations.

A requirement is the (namespace, keys) pair a UI component declares next
to its code. Requirements are combined with merge_requirements() and handed
to the resolver, which extracts exactly those entries from a full catalog.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from colocale.catalog.types import MessageKey, NamespaceName

__all__ = [
    "Requirement",
    "RequirementGroup",
    "define_requirement",
    "iter_requirements",
    "merge_requirements",
]


@dataclass(frozen=True, slots=True)
class Requirement:
    """Immutable declaration of the keys a component needs from a namespace.

    Keys are base names: a plural family is requested by its base
    (``"itemCount"``), never by a suffixed sibling.

    Attributes:
        namespace: Namespace to read from
        keys: Declared keys, in declaration order

    Example:
        >>> req = Requirement("common", ["submit", "cancel"])
        >>> req.keys
        ('submit', 'cancel')
        >>> "submit" in req
        True
    """

    namespace: NamespaceName
    keys: tuple[MessageKey, ...]

    def __post_init__(self) -> None:
        """Normalize keys to a tuple and reject malformed declarations.

        Raises:
            ValueError: If namespace is empty
            TypeError: If namespace is not a string, or keys is a bare
                string or contains non-string items
        """
        if not isinstance(self.namespace, str):
            msg = f"namespace must be a string, got {type(self.namespace).__name__}"
            raise TypeError(msg)
        if not self.namespace:
            msg = "namespace cannot be empty"
            raise ValueError(msg)
        # A bare string is iterable; tuple("submit") would silently split it.
        if isinstance(self.keys, str):
            msg = f"keys must be a sequence of strings, got the string {self.keys!r}"
            raise TypeError(msg)

        keys = tuple(self.keys)
        for key in keys:
            if not isinstance(key, str):
                msg = f"keys must contain strings, got {type(key).__name__}"
                raise TypeError(msg)
        object.__setattr__(self, "keys", keys)

    def __contains__(self, key: object) -> bool:
        return key in self.keys


type RequirementGroup = Requirement | Iterable[RequirementGroup]
"""A requirement or an arbitrarily nested iterable of requirements."""


def define_requirement(namespace: NamespaceName, keys: Iterable[MessageKey]) -> Requirement:
    """Declare the keys a component needs from a namespace.

    Args:
        namespace: Namespace name
        keys: Base key names

    Returns:
        Requirement

    Example:
        >>> define_requirement("user", ["profile.name", "profile.email"])
        Requirement(namespace='user', keys=('profile.name', 'profile.email'))
    """
    return Requirement(namespace, tuple(keys))


def iter_requirements(group: RequirementGroup) -> Iterable[Requirement]:
    """Yield requirements from a requirement or nested group, depth first."""
    if isinstance(group, Requirement):
        yield group
        return
    if isinstance(group, (str, bytes)):
        msg = f"expected Requirement or iterable of Requirement, got {type(group).__name__}"
        raise TypeError(msg)
    for item in group:
        yield from iter_requirements(item)


def merge_requirements(*groups: RequirementGroup) -> list[Requirement]:
    """Flatten requirements and requirement groups into one ordered list.

    No deduplication is performed: a requirement appearing twice is returned
    twice, and the resolver simply copies the same entries again.

    Args:
        *groups: Requirements or (nested) iterables of requirements

    Returns:
        Flat list in declaration order

    Example:
        >>> header = Requirement("common", ["title"])
        >>> page = [Requirement("shop", ["cart"]), header]
        >>> [r.namespace for r in merge_requirements(header, page)]
        ['common', 'shop', 'common']
    """
    merged: list[Requirement] = []
    for group in groups:
        merged.extend(iter_requirements(group))
    return merged

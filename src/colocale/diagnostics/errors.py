"""colocale exception hierarchy.

Lookup misses and validation problems are values, not exceptions. The
classes here cover the remaining opt-in and collaborator failure surfaces.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

__all__ = [
    "CatalogLoadError",
    "ColocaleError",
    "InvalidPlaceholderError",
    "UndeclaredKeyError",
]


class ColocaleError(Exception):
    """Base exception for all colocale errors."""


class InvalidPlaceholderError(ColocaleError):
    """Required placeholder values are missing during strict substitution.

    Raised only by the strict substitution discipline; the default
    substitution leaves unknown placeholders verbatim and never raises.

    Attributes:
        missing_placeholders: Every placeholder name absent from the values,
            in order of first appearance in the template
        template: The message template that was being substituted

    Example:
        >>> try:
        ...     substitute_strict("Hi {{name}}", {})
        ... except InvalidPlaceholderError as e:
        ...     e.missing_placeholders
        ('name',)
    """

    def __init__(self, missing_placeholders: Sequence[str], template: str) -> None:
        """Initialize InvalidPlaceholderError.

        Args:
            missing_placeholders: Names of the placeholders without values
            template: The original message template
        """
        self.missing_placeholders: tuple[str, ...] = tuple(missing_placeholders)
        self.template = template
        placeholder_list = ", ".join(self.missing_placeholders)
        super().__init__(
            f'Missing required placeholder(s): {placeholder_list}. Message: "{template}"'
        )


class UndeclaredKeyError(ColocaleError, LookupError):
    """Translator asked for a key its requirement never declared.

    This is a programming error in the calling component, not a lookup miss.
    Only raised when the translator enforces declared keys.

    Attributes:
        namespace: Namespace the translator is bound to
        key: The undeclared key
        declared_keys: Keys the requirement declares
    """

    def __init__(self, namespace: str, key: str, declared_keys: Sequence[str]) -> None:
        """Initialize UndeclaredKeyError.

        Args:
            namespace: Namespace the translator is bound to
            key: The undeclared key
            declared_keys: Keys the requirement declares
        """
        self.namespace = namespace
        self.key = key
        self.declared_keys: tuple[str, ...] = tuple(declared_keys)
        declared = ", ".join(self.declared_keys) or "(none)"
        super().__init__(
            f"Key '{key}' is not declared by the requirement for namespace "
            f"'{namespace}' (declared: {declared})"
        )


class CatalogLoadError(ColocaleError):
    """Catalog files could not be read or decoded.

    Attributes:
        path: Filesystem path that failed to load
    """

    def __init__(self, message: str, *, path: str) -> None:
        """Initialize CatalogLoadError.

        Args:
            message: Error description
            path: Filesystem path that failed to load
        """
        self.path = path
        super().__init__(f"{message}: {path}")

"""colocale - requirement-driven message catalog resolution and validation.

Components declare the keys they need as requirements; the resolver extracts
exactly those entries (plus their plural families) from a full multi-locale
catalog, and translators look them up with CLDR plural selection and
``{{placeholder}}`` substitution. Validators check catalog shape and
cross-locale key consistency.

Public API:
    Requirement / define_requirement / merge_requirements - Declarations
    pick_messages / MessageResolver - Extract required entries for a locale
    ResolvedMessages - Immutable locale-tagged result of resolution
    create_translator / Translator - Namespace-scoped lookup function
    select_plural_category - CLDR plural category of a number
    substitute / substitute_strict - Placeholder substitution
    validate_catalog / validate_cross_locale - Catalog validation

Exceptions:
    ColocaleError - Base exception class
    InvalidPlaceholderError - Strict substitution with missing values
    UndeclaredKeyError - Translator key guard violation
    CatalogLoadError - Catalog files cannot be read

Submodules:
    colocale.catalog - Requirements, resolution, loading, shape normalization
    colocale.runtime - Plural rules, placeholders, translators
    colocale.validation - Catalog and cross-locale validators
    colocale.diagnostics - Errors, validation results, report formatting
    colocale.codegen - Literal key type generation
"""

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("colocale")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Essential Public API
from .catalog import (
    MessageResolver,
    Requirement,
    ResolvedMessages,
    ResolverConfig,
    define_requirement,
    merge_requirements,
    pick_messages,
)
from .diagnostics import (
    CatalogLoadError,
    ColocaleError,
    InvalidPlaceholderError,
    UndeclaredKeyError,
    ValidationIssue,
    ValidationResult,
)
from .enums import IssueType
from .runtime import (
    Translator,
    TranslatorConfig,
    create_translator,
    select_plural_category,
    substitute,
    substitute_strict,
)
from .validation import ValidationConfig, validate_catalog, validate_cross_locale

__all__ = [
    "CatalogLoadError",
    "ColocaleError",
    "InvalidPlaceholderError",
    "IssueType",
    "MessageResolver",
    "Requirement",
    "ResolvedMessages",
    "ResolverConfig",
    "Translator",
    "TranslatorConfig",
    "UndeclaredKeyError",
    "ValidationConfig",
    "ValidationIssue",
    "ValidationResult",
    "__version__",
    "create_translator",
    "define_requirement",
    "merge_requirements",
    "pick_messages",
    "select_plural_category",
    "substitute",
    "substitute_strict",
    "validate_catalog",
    "validate_cross_locale",
]

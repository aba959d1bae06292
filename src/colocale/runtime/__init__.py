"""Runtime lookup: plural classification, placeholder substitution, translators.

Python 3.13+.
"""

from .placeholders import extract_placeholders, substitute, substitute_strict
from .plural_rules import get_plural_categories, select_plural_category
from .translator import Translator, TranslatorConfig, create_translator

__all__ = [
    "Translator",
    "TranslatorConfig",
    "create_translator",
    "extract_placeholders",
    "get_plural_categories",
    "select_plural_category",
    "substitute",
    "substitute_strict",
]

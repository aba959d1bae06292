"""Pytest configuration for the colocale test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from colocale.locale_utils import clear_locale_cache

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def en_ja_catalog() -> dict[str, dict[str, dict[str, str]]]:
    """Two-locale catalog with literal, dotted and plural keys."""
    return {
        "en": {
            "common": {
                "submit": "Submit",
                "cancel": "Cancel",
                "itemCount_one": "1 item",
                "itemCount_other": "{{count}} items",
            },
            "user": {
                "profile.name": "Name",
                "profile.email": "Email",
                "greeting": "Hello, {{name}}!",
            },
        },
        "ja": {
            "common": {
                "submit": "送信",
                "cancel": "キャンセル",
                "itemCount_other": "{{count}}件のアイテム",
            },
            "user": {
                "profile.name": "名前",
                "profile.email": "メールアドレス",
                "greeting": "こんにちは、{{name}}さん！",
            },
        },
    }


@pytest.fixture(autouse=True)
def _fresh_locale_cache() -> None:
    """Isolate tests from each other's cached Babel locales."""
    clear_locale_cache()

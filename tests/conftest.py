"""
Shared fixtures for translator tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so 'phrasebook' and 'core' are importable
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def fresh_translators():
    """Drop memoized per-language translators between tests."""
    from core.i18n import get_translator

    get_translator.cache_clear()
    yield
    get_translator.cache_clear()


@pytest.fixture
def messages():
    return {
        "welcome": {
            "en": "Welcome back, {{username}}!",
            "es": "¡Bienvenido, {{username}}!",
        },
        "greet": {"en": "Hi"},
        "hello": {"en": "Hi {{name}}!"},
        "hello_single": {"en": "Hi {name}!"},
        "pair": {"en": "{{n}} and {{n}}"},
        "count": {"en": "{{count}} items"},
    }


@pytest.fixture
def observed():
    """Error observer that records every call."""
    calls = []

    def on_error(error, message):
        calls.append((error, message))

    on_error.calls = calls
    return on_error

"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides a small ``Post`` record and two-locale settings shared by the
  form tests.
"""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from admin_translate.forms.records import TranslatedRecord, Translation  # noqa: E402
from admin_translate.locales import LocaleSettings  # noqa: E402


class Post(TranslatedRecord):
    """Record used throughout the form tests."""


@pytest.fixture
def settings() -> LocaleSettings:
    return LocaleSettings(("en", "fr"), "en")


@pytest.fixture
def post() -> Post:
    return Post(
        translations=[
            Translation("en", title="Hello", body="English body"),
            Translation("fr", title="Bonjour", body="Corps"),
        ]
    )


@pytest.fixture
def identity():
    """Fixed instance identity so DOM ids are predictable."""
    return lambda record: 7

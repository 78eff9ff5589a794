"""Shared fixtures for langstore tests."""

from pathlib import Path

import pytest

from tests.factories.i18n import make_translation_store

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def lang_dir() -> Path:
    """Root of the shipped translation fixtures.

    Layout:
    - dir1/en/test.yml: value, fallback, message, data.{val1,val2,val3}
    - dir2/en/test.yml: value = Alternate
    - dir2/en_au/test.yml: value = Localized
    """
    return FIXTURES_DIR / "lang"


@pytest.fixture
def dir1(lang_dir) -> Path:
    return lang_dir / "dir1"


@pytest.fixture
def dir2(lang_dir) -> Path:
    return lang_dir / "dir2"


@pytest.fixture
def store():
    """TranslationStore with default locale "en" and no search paths."""
    return make_translation_store(default_locale="en")

"""Unit tests for langstore.services.providers module."""

import pytest

from langstore.configuration import Settings
from langstore.i18n import TranslationStore
from langstore.services import get_settings, get_translation_store


@pytest.fixture(autouse=True)
def reset_provider_caches():
    get_settings.cache_clear()
    get_translation_store.cache_clear()
    yield
    get_settings.cache_clear()
    get_translation_store.cache_clear()


class TestProviders:
    """Tests for process-scoped providers."""

    def test_get_settings_singleton(self):
        settings = get_settings()
        assert isinstance(settings, Settings)
        assert get_settings() is settings

    def test_get_translation_store_singleton(self):
        store = get_translation_store()
        assert isinstance(store, TranslationStore)
        assert get_translation_store() is store

    def test_get_translation_store_uses_settings(self, monkeypatch, dir1):
        monkeypatch.setenv("LANG_PATHS", f'["{dir1}"]')
        monkeypatch.setenv("LANG_DEFAULT_LOCALE", "en")
        monkeypatch.delenv("LANG_LOCALE", raising=False)

        store = get_translation_store()

        assert store.get_paths() == (str(dir1.resolve()),)
        assert store.get("test.value") == "Value"

"""Unit tests for langstore.configuration module."""

import pytest
from pydantic import ValidationError

from langstore.configuration import LangSettings, Settings


@pytest.fixture(autouse=True)
def clean_lang_env(monkeypatch):
    for name in (
        "LANG_DEFAULT_LOCALE",
        "LANG_LOCALE",
        "LANG_PATHS",
        "LANG_FORMAT",
        "LANG_INVALIDATE_ON_PATH_CHANGE",
        "PREFIX",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLangSettings:
    """Test suite for LangSettings configuration."""

    def test_defaults(self):
        lang = LangSettings()

        assert lang.DEFAULT_LOCALE is None
        assert lang.LOCALE is None
        assert lang.PATHS == []
        assert lang.FORMAT == "yaml"
        assert lang.INVALIDATE_ON_PATH_CHANGE is False

    def test_custom_values(self, monkeypatch):
        monkeypatch.setenv("LANG_DEFAULT_LOCALE", "en")
        monkeypatch.setenv("LANG_LOCALE", "en_AU")
        monkeypatch.setenv("LANG_PATHS", '["/srv/lang", "/opt/lang"]')
        monkeypatch.setenv("LANG_FORMAT", "json")
        monkeypatch.setenv("LANG_INVALIDATE_ON_PATH_CHANGE", "true")

        lang = LangSettings()

        assert lang.DEFAULT_LOCALE == "en"
        assert lang.LOCALE == "en_AU"
        assert lang.PATHS == ["/srv/lang", "/opt/lang"]
        assert lang.FORMAT == "json"
        assert lang.INVALIDATE_ON_PATH_CHANGE is True

    def test_blank_locale_is_unset(self, monkeypatch):
        monkeypatch.setenv("LANG_DEFAULT_LOCALE", "  ")
        assert LangSettings().DEFAULT_LOCALE is None

    def test_invalid_format_rejected(self, monkeypatch):
        monkeypatch.setenv("LANG_FORMAT", "ini")
        with pytest.raises(ValidationError):
            LangSettings()

    def test_init_by_field_name(self):
        lang = LangSettings(DEFAULT_LOCALE="ru")
        assert lang.DEFAULT_LOCALE == "ru"


class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_subsettings_instantiated(self):
        settings = Settings()
        assert isinstance(settings.lang, LangSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_override_subsettings(self):
        lang = LangSettings(LANG_DEFAULT_LOCALE="fr")
        settings = Settings(lang=lang)
        assert settings.lang.DEFAULT_LOCALE == "fr"

    def test_is_production(self, monkeypatch):
        assert Settings().is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

"""Feature-level fixtures for i18n system tests."""

import pytest

from langstore.i18n import (
    JSONTranslationSourceLoader,
    NamespaceLoader,
    YAMLTranslationSourceLoader,
)
from tests.factories.i18n import write_translation_source


@pytest.fixture
def yaml_source_loader():
    return YAMLTranslationSourceLoader()


@pytest.fixture
def json_source_loader():
    return JSONTranslationSourceLoader()


@pytest.fixture
def namespace_loader(yaml_source_loader):
    return NamespaceLoader(yaml_source_loader)


@pytest.fixture
def layered_paths(tmp_path):
    """Two search paths with overlapping locales.

    Returns a tuple (base, extra) where:
    - base/en/app.yml:    title, greeting, nested.{a,b}
    - base/en_au/app.yml: greeting
    - extra/en/app.yml:   title, nested.c
    - extra/en_au/app.yml: nested.a
    """
    base = tmp_path / "base"
    extra = tmp_path / "extra"

    write_translation_source(
        base,
        "en",
        "app",
        {
            "title": "Base title",
            "greeting": "Hello",
            "nested": {"a": "base a", "b": "base b"},
        },
    )
    write_translation_source(base, "en_au", "app", {"greeting": "G'day"})
    write_translation_source(
        extra, "en", "app", {"title": "Extra title", "nested": {"c": "extra c"}}
    )
    write_translation_source(extra, "en_au", "app", {"nested": {"a": "extra au a"}})

    return base, extra

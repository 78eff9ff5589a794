"""
Factory functions for dependency injection.

Provides process-scoped singleton providers for the hosting application.
"""

from functools import lru_cache

from langstore.configuration import Settings
from langstore.i18n import TranslationStore, create_translation_store


@lru_cache
def get_settings() -> Settings:
    """
    Get process-scoped settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_store() -> TranslationStore:
    """
    Get process-scoped translation store singleton.

    Code that needs an isolated configuration (tests, per-tenant stores)
    should build its own with ``create_translation_store()``.

    Returns:
        TranslationStore: Cached store configured from ``settings.lang``.

    Usage:
        store = get_translation_store()
        store.get("errors.not_found", {"name": name})
    """
    return create_translation_store(get_settings().lang)

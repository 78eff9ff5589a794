"""Factory functions for creating i18n components.

Builds a TranslationStore from LangSettings so hosting applications can
configure search paths and locales through the environment.
"""

from typing import Optional

from langstore.configuration import LangSettings
from langstore.i18n.formatter import MessageFormatter
from langstore.i18n.loader import (
    JSONTranslationSourceLoader,
    NamespaceLoader,
    TranslationSourceLoader,
    YAMLTranslationSourceLoader,
)
from langstore.i18n.store import TranslationStore
from langstore.logging import get_module_logger

logger = get_module_logger()

SOURCE_LOADERS = {
    "yaml": YAMLTranslationSourceLoader,
    "json": JSONTranslationSourceLoader,
}


def create_source_loader(source_format: str = "yaml") -> TranslationSourceLoader:
    """Create the data-source loader for a file format.

    Args:
        source_format: "yaml" or "json".

    Returns:
        TranslationSourceLoader instance.

    Raises:
        ValueError: If the format is not supported.
    """
    try:
        loader_class = SOURCE_LOADERS[source_format.lower()]
    except KeyError as e:
        raise ValueError(f"Unsupported translation format: {source_format}") from e
    return loader_class()


def create_translation_store(
    lang_settings: Optional[LangSettings] = None,
    formatter: Optional[MessageFormatter] = None,
) -> TranslationStore:
    """Create and configure a TranslationStore.

    Args:
        lang_settings: Translation settings (default: read from environment).
        formatter: Optional MessageFormatter replacing the default
            ``str.format`` based one.

    Returns:
        TranslationStore: Configured store with paths and locales applied.

    Usage:
        # Use environment configuration
        store = create_translation_store()

        # Explicit configuration
        store = create_translation_store(
            LangSettings(LANG_PATHS=["/srv/lang"], LANG_DEFAULT_LOCALE="en")
        )
    """
    lang_settings = lang_settings or LangSettings()

    store = TranslationStore(
        loader=NamespaceLoader(create_source_loader(lang_settings.FORMAT)),
        formatter=formatter,
        invalidate_on_path_change=lang_settings.INVALIDATE_ON_PATH_CHANGE,
    )

    if lang_settings.DEFAULT_LOCALE:
        store.set_default_locale(lang_settings.DEFAULT_LOCALE)
    if lang_settings.LOCALE:
        store.set_locale(lang_settings.LOCALE)

    for path in lang_settings.PATHS:
        store.add_path(path)

    logger.info(
        "translation_store_created",
        paths=list(store.get_paths()),
        source_format=lang_settings.FORMAT,
        default_locale=lang_settings.DEFAULT_LOCALE,
    )
    return store

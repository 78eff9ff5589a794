"""i18n system - localized message lookup.

Resolves dotted keys against translation files laid out as
``{search_path}/{locale}/{namespace}.yml``, merging every locale in the
fallback chain and every registered search path.

Main components:
- models: TranslationKey, LocaleSetting
- resolvers: LocaleResolver for building the locale candidate chain
- loader: TranslationSourceLoader implementations and NamespaceLoader
- formatter: MessageFormatter for parameterized messages
- store: TranslationStore, the public lookup API
- factory: create_translation_store() from settings
"""

from langstore.i18n.exceptions import (
    InvalidTranslationSourceError,
    LangError,
    MessageFormatError,
    TranslationSourceError,
)
from langstore.i18n.factory import create_source_loader, create_translation_store
from langstore.i18n.formatter import MessageFormatter, StringMessageFormatter
from langstore.i18n.loader import (
    JSONTranslationSourceLoader,
    NamespaceLoader,
    TranslationSourceLoader,
    YAMLTranslationSourceLoader,
    deep_merge,
)
from langstore.i18n.models import LocaleSetting, TranslationKey
from langstore.i18n.resolvers import LocaleResolver
from langstore.i18n.store import TranslationStore

__all__ = [
    "TranslationKey",
    "LocaleSetting",
    "LocaleResolver",
    "TranslationSourceLoader",
    "YAMLTranslationSourceLoader",
    "JSONTranslationSourceLoader",
    "NamespaceLoader",
    "deep_merge",
    "MessageFormatter",
    "StringMessageFormatter",
    "TranslationStore",
    "create_translation_store",
    "create_source_loader",
    "LangError",
    "TranslationSourceError",
    "InvalidTranslationSourceError",
    "MessageFormatError",
]

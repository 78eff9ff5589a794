"""langstore - locale-aware translation lookup with fallback chains."""

from langstore.i18n import TranslationStore, create_translation_store

__all__ = ["TranslationStore", "create_translation_store"]

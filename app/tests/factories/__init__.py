"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_translation_key,
    make_translation_store,
    make_translation_tree,
    write_translation_source,
)

__all__ = [
    "make_translation_key",
    "make_translation_store",
    "make_translation_tree",
    "write_translation_source",
]

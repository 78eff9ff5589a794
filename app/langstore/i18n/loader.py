"""Translation loading interface and implementations.

Defines the data-source contract, the YAML and JSON file loaders, and the
NamespaceLoader that merges every matching source for a namespace.
"""

import json
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

import yaml

from langstore.i18n.exceptions import (
    InvalidTranslationSourceError,
    TranslationSourceError,
)
from langstore.i18n.models import TranslationTree
from langstore.logging import get_module_logger

logger = get_module_logger()


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> TranslationTree:
    """Recursively merge two translation trees.

    Nested mappings present on both sides are merged key by key; any other
    collision is won by ``override``. Neither input is mutated.

    Args:
        base: Accumulated tree.
        override: Tree merged on top of ``base``.

    Returns:
        A new merged tree.
    """
    merged: TranslationTree = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        elif isinstance(value, Mapping):
            merged[key] = deep_merge({}, value)
        else:
            merged[key] = value
    return merged


def is_safe_namespace(namespace: str) -> bool:
    """Check that a namespace names a file inside its locale directory."""
    if namespace in ("", ".", ".."):
        return False
    return not any(char in namespace for char in ("/", "\\", "\0"))


def _normalize_tree(data: Any, source: Path, trail: tuple = ()) -> TranslationTree:
    if not isinstance(data, Mapping):
        where = ".".join(trail) or "the top level"
        raise InvalidTranslationSourceError(
            f"Expected a mapping at {where} of {source}", path=str(source)
        )

    tree: TranslationTree = {}
    for key, value in data.items():
        key = _scalar_to_str(key)
        if isinstance(value, Mapping):
            tree[key] = _normalize_tree(value, source, trail + (key,))
        elif isinstance(value, (list, tuple, set)):
            dotted = ".".join(trail + (key,))
            raise InvalidTranslationSourceError(
                f"Translation value at {dotted} in {source} must be a string "
                f"or mapping, got {type(value).__name__}",
                path=str(source),
            )
        else:
            tree[key] = _scalar_to_str(value)
    return tree


def _scalar_to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class _StringYAMLLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as written.

    ``yes``, ``no``, ``on``, ``off``, ``1.0`` and ``~`` stay strings instead
    of becoming booleans, numbers or null. Merge keys (``<<``) still work.
    """

    yaml_implicit_resolvers: dict = {}


_StringYAMLLoader.add_implicit_resolver(
    "tag:yaml.org,2002:merge", re.compile(r"^(?:<<)$"), ["<"]
)


class TranslationSourceLoader(ABC):
    """Abstract base for translation data-source loaders.

    A data source is one file per locale per namespace. Implementations
    decide the file extension(s) and how to parse them.
    """

    extensions: Sequence[str] = ()

    def find(self, directory: Path, namespace: str) -> Optional[Path]:
        """Locate the source file for a namespace inside a locale directory.

        Args:
            directory: ``{search_path}/{locale}`` directory.
            namespace: Namespace name.

        Returns:
            Path to the first existing candidate file, or None. Namespaces
            that would leave the directory (``../x``, ``/etc/x``) never match.
        """
        if not is_safe_namespace(namespace):
            logger.warning("unsafe_namespace_rejected", namespace=namespace)
            return None

        for extension in self.extensions:
            candidate = directory / f"{namespace}{extension}"
            if candidate.is_file():
                return candidate
        return None

    def load(self, directory: Path, namespace: str) -> Optional[TranslationTree]:
        """Load a namespace from a locale directory.

        Args:
            directory: ``{search_path}/{locale}`` directory.
            namespace: Namespace name.

        Returns:
            Nested mapping of messages, or None if no source exists there.
            Scalar keys and leaves are returned as strings.

        Raises:
            TranslationSourceError: If the file cannot be read or parsed.
            InvalidTranslationSourceError: If the top level is not a mapping
                or a value is a list.
        """
        source = self.find(directory, namespace)
        if source is None:
            return None

        try:
            with open(source, "r", encoding="utf-8") as f:
                data = self.parse(f.read(), source)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("translation_source_read_error", file=str(source), error=str(e))
            raise TranslationSourceError(
                f"Failed to read {source}: {e}", path=str(source)
            ) from e

        if data is None:
            return {}

        try:
            return _normalize_tree(data, source)
        except InvalidTranslationSourceError as e:
            logger.error("invalid_translation_source", file=str(source), error=str(e))
            raise

    @abstractmethod
    def parse(self, content: str, source: Path) -> Any:
        """Parse raw file content.

        Args:
            content: File content.
            source: File path (for error reporting).

        Returns:
            Parsed data; None for an empty document.

        Raises:
            TranslationSourceError: If parsing fails.
        """
        pass


class YAMLTranslationSourceLoader(TranslationSourceLoader):
    """Loader for YAML translation files (``{namespace}.yml`` or ``.yaml``).

    Expected format:
        value: Value
        message: This is a {0}
        data:
          val1: Value 1
    """

    extensions = (".yml", ".yaml")

    def parse(self, content: str, source: Path) -> Any:
        try:
            return yaml.load(content, Loader=_StringYAMLLoader)
        except yaml.YAMLError as e:
            logger.error("translation_source_parse_error", file=str(source), error=str(e))
            raise TranslationSourceError(
                f"Failed to parse {source}: {e}", path=str(source)
            ) from e


class JSONTranslationSourceLoader(TranslationSourceLoader):
    """Loader for JSON translation files (``{namespace}.json``)."""

    extensions = (".json",)

    def parse(self, content: str, source: Path) -> Any:
        if not content.strip():
            return None
        try:
            return json.loads(content, parse_int=str, parse_float=str)
        except json.JSONDecodeError as e:
            logger.error("translation_source_parse_error", file=str(source), error=str(e))
            raise TranslationSourceError(
                f"Failed to parse {source}: {e}", path=str(source)
            ) from e


class NamespaceLoader:
    """Merges every data source contributing to a namespace.

    Sources are visited locale by locale in candidate-chain order and,
    within a locale, path by path in registration order. Later sources
    override earlier ones at leaf level.

    Attributes:
        source_loader: Loader used to read individual data sources.
    """

    def __init__(self, source_loader: Optional[TranslationSourceLoader] = None):
        self.source_loader = source_loader or YAMLTranslationSourceLoader()

    def load_namespace(
        self,
        namespace: str,
        search_paths: Iterable[str],
        locale_candidates: Iterable[str],
    ) -> TranslationTree:
        """Load and merge a namespace.

        Args:
            namespace: Namespace name (first segment of a key).
            search_paths: Registered search paths, in registration order.
            locale_candidates: Locale chain, least specific first.

        Returns:
            The merged tree; empty if no source was found.

        Raises:
            TranslationSourceError: If a present source is unusable.
        """
        search_paths = list(search_paths)
        merged: TranslationTree = {}
        source_count = 0

        for locale in locale_candidates:
            for search_path in search_paths:
                data = self.source_loader.load(Path(search_path) / locale, namespace)
                if data is None:
                    continue

                merged = deep_merge(merged, data)
                source_count += 1

        logger.info(
            "namespace_loaded",
            namespace=namespace,
            source_count=source_count,
            key_count=len(merged),
        )
        return merged

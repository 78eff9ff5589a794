"""Translation store: the public lookup and configuration API.

Owns the registered search paths, the current/default locale settings and
the per-namespace cache of merged translation trees.
"""

import copy
import locale as system_locale
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, Union

from langstore.i18n.formatter import MessageFormatter, MessageParams, StringMessageFormatter
from langstore.i18n.loader import NamespaceLoader, is_safe_namespace
from langstore.i18n.models import LocaleProvider, LocaleSetting, TranslationKey, TranslationTree
from langstore.i18n.resolvers import LocaleResolver
from langstore.logging import get_module_logger

logger = get_module_logger()

FALLBACK_LOCALE = "en"

LocaleValue = Union[str, LocaleProvider, None]

CacheKey = Tuple[str, Tuple[str, ...]]


def get_system_locale() -> Optional[str]:
    """Return the platform locale tag (e.g., "en_US"), if one is configured."""
    tag = system_locale.getlocale()[0]
    if not tag or tag in ("C", "POSIX"):
        return None
    return tag


def normalize_path(path: Union[str, Path]) -> str:
    """Resolve a possibly relative path to its absolute canonical form."""
    return str(Path(path).expanduser().resolve())


class TranslationStore:
    """Resolves dotted keys to localized messages.

    A key such as ``"test.data.val1"`` names the namespace ``test``; the first
    lookup in a namespace merges every ``{path}/{locale}/test.<ext>`` source
    for the locale candidate chain and caches the result under the namespace
    and that chain, so a callable locale that changes from call to call is
    served the matching content. Changing either locale setting evicts every
    cached namespace. Adding or removing a path does not,
    unless ``invalidate_on_path_change`` is set: namespaces already loaded keep
    their content until the next locale change or ``clear_cache()``.

    All public methods are serialized on a reentrant lock.

    Usage:
        store = TranslationStore()
        store.add_path("lang")
        store.set_default_locale("en")
        store.set_locale(lambda: request_context.locale)

        store.get("test.value")              # "Value"
        store.get("test.message", ["test"])  # "This is a test"
        store.get("test.missing")            # None
        store.get("unknown")                 # {} (namespace without sources)
    """

    def __init__(
        self,
        loader: Optional[NamespaceLoader] = None,
        formatter: Optional[MessageFormatter] = None,
        resolver: Optional[LocaleResolver] = None,
        system_locale_provider: Callable[[], Optional[str]] = get_system_locale,
        invalidate_on_path_change: bool = False,
    ):
        """Initialize the store.

        Args:
            loader: NamespaceLoader used to read and merge sources
                (default: YAML sources).
            formatter: MessageFormatter applied to lookups with params.
            resolver: LocaleResolver building the candidate chain.
            system_locale_provider: Supplies the platform locale when no
                default locale is configured.
            invalidate_on_path_change: Evict cached namespaces whenever a
                search path is added or removed.
        """
        self.loader = loader or NamespaceLoader()
        self.formatter = formatter or StringMessageFormatter()
        self.resolver = resolver or LocaleResolver()
        self.system_locale_provider = system_locale_provider
        self.invalidate_on_path_change = invalidate_on_path_change

        self._paths: list[str] = []
        self._namespaces: Dict[CacheKey, TranslationTree] = {}
        self._locale = LocaleSetting()
        self._default_locale = LocaleSetting()
        self._lock = threading.RLock()

    # Search paths

    def add_path(self, path: Union[str, Path], prepend: bool = False) -> None:
        """Register a search path.

        Args:
            path: Directory holding ``{locale}/{namespace}`` sources.
            prepend: Insert at the front, giving the path the lowest
                precedence instead of the highest.
        """
        resolved = normalize_path(path)

        with self._lock:
            if resolved in self._paths:
                return

            if prepend:
                self._paths.insert(0, resolved)
            else:
                self._paths.append(resolved)

            logger.info("translation_path_added", path=resolved, prepend=prepend)
            if self.invalidate_on_path_change:
                self._namespaces.clear()

    def remove_path(self, path: Union[str, Path]) -> bool:
        """Unregister a search path.

        Args:
            path: Path to remove; normalized like ``add_path``.

        Returns:
            True if the path was registered and has been removed.
        """
        resolved = normalize_path(path)

        with self._lock:
            if resolved not in self._paths:
                return False

            self._paths.remove(resolved)
            logger.info("translation_path_removed", path=resolved)
            if self.invalidate_on_path_change:
                self._namespaces.clear()
            return True

    def get_paths(self) -> tuple[str, ...]:
        """Return the registered search paths in merge order."""
        with self._lock:
            return tuple(self._paths)

    # Locales

    def get_locale(self) -> str:
        """Return the effective current locale, falling back to the default."""
        with self._lock:
            return self._locale.resolve() or self.get_default_locale()

    def get_default_locale(self) -> str:
        """Return the effective default locale.

        Falls back to the platform locale, then to ``"en"``.
        """
        with self._lock:
            return (
                self._default_locale.resolve()
                or self.system_locale_provider()
                or FALLBACK_LOCALE
            )

    def set_locale(self, value: LocaleValue = None) -> None:
        """Set the current locale.

        Args:
            value: A locale tag, a callable returning one (evaluated on every
                access), or None to fall back to the default locale.
        """
        with self._lock:
            self._locale = LocaleSetting(value)
            self._namespaces.clear()
            logger.info("locale_changed", locale=_describe(self._locale))

    def set_default_locale(self, value: LocaleValue = None) -> None:
        """Set the default locale.

        Args:
            value: A locale tag, a callable returning one (evaluated on every
                access), or None to fall back to the platform locale.
        """
        with self._lock:
            self._default_locale = LocaleSetting(value)
            self._namespaces.clear()
            logger.info("default_locale_changed", locale=_describe(self._default_locale))

    # Cache

    def clear(self) -> None:
        """Remove all search paths and cached namespaces. Locales are kept."""
        with self._lock:
            self._paths.clear()
            self._namespaces.clear()
            logger.info("translation_store_cleared")

    def clear_cache(self) -> None:
        """Evict all cached namespaces, keeping the search paths."""
        with self._lock:
            self._namespaces.clear()
            logger.debug("translation_cache_cleared")

    def get_loaded_namespaces(self) -> tuple[str, ...]:
        """Return the names of the namespaces currently cached."""
        with self._lock:
            return tuple(dict.fromkeys(namespace for namespace, _ in self._namespaces))

    # Lookup

    def get(self, key: str, params: Optional[MessageParams] = None) -> Any:
        """Look up a translation.

        Args:
            key: Dotted key; the first segment is the namespace.
            params: Positional (sequence) or named (mapping) message params.

        Returns:
            The message (formatted when params are given), a nested mapping
            when the key addresses a subtree or namespace (empty when there is
            no content), or None when the key is missing.

        Raises:
            TranslationSourceError: If a contributing source is unusable.
            MessageFormatError: If params do not fit the message template.
        """
        translation_key = TranslationKey.from_string(key)
        if not is_safe_namespace(translation_key.namespace):
            logger.debug("invalid_translation_namespace", key=key)
            return None

        with self._lock:
            node: Any = self._load(translation_key.namespace)
            for segment in translation_key.path:
                if not isinstance(node, Mapping) or segment not in node:
                    logger.debug("translation_not_found", key=key)
                    return None
                node = node[segment]

            if isinstance(node, Mapping):
                return copy.deepcopy(node)

            if not node or not params:
                return node

            return self.formatter.format(self.get_locale(), node, params)

    def has(self, key: str) -> bool:
        """Check whether a key resolves to a message or a non-empty subtree."""
        value = self.get(key)
        return value is not None and value != {}

    def _load(self, namespace: str) -> TranslationTree:
        candidates = self.resolver.resolve_candidates(
            self.get_locale(), self.get_default_locale()
        )
        cache_key = (namespace, tuple(candidates))
        if cache_key not in self._namespaces:
            self._namespaces[cache_key] = self.loader.load_namespace(
                namespace, self._paths, candidates
            )
        return self._namespaces[cache_key]


def _describe(setting: LocaleSetting) -> Optional[str]:
    if not setting.is_set:
        return None
    if setting.is_dynamic:
        return f"<callable {getattr(setting.value, '__name__', type(setting.value).__name__)}>"
    return setting.value

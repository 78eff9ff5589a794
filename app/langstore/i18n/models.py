"""Translation models for the i18n system.

Defines the value types shared by the resolver, loader and store.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

# A merged namespace tree: leaves are message templates
TranslationTree = Dict[str, Union[str, "TranslationTree"]]

LocaleProvider = Callable[[], str]


@dataclass(frozen=True)
class TranslationKey:
    """Represents a dotted translation key.

    The first segment names the namespace, which is the unit of loading and
    caching. The remaining segments form the path inside the namespace tree.

    Attributes:
        namespace: Top-level namespace (e.g., "errors", "test").
        path: Remaining key segments, possibly empty.
    """

    namespace: str
    path: tuple[str, ...] = ()

    def __str__(self) -> str:
        return ".".join((self.namespace,) + self.path)

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from a dot-separated string.

        Args:
            key_string: Dotted key (e.g., "test.data.val1").

        Returns:
            TranslationKey instance. A key without dots addresses the whole
            namespace.
        """
        namespace, _, remainder = key_string.partition(".")
        path = tuple(remainder.split(".")) if remainder else ()
        return cls(namespace=namespace, path=path)


@dataclass(frozen=True)
class LocaleSetting:
    """A current or default locale setting.

    Holds either a fixed tag or a provider called on every access, so the
    effective locale can follow request or user context. An empty setting
    means "unset".
    """

    value: Union[str, LocaleProvider, None] = None

    @property
    def is_set(self) -> bool:
        return bool(self.value)

    @property
    def is_dynamic(self) -> bool:
        return callable(self.value)

    def resolve(self) -> Optional[str]:
        """Return the locale tag, invoking the provider if there is one.

        Returns:
            The locale tag, or None when unset.
        """
        if callable(self.value):
            return self.value()
        return self.value or None

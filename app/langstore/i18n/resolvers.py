"""Locale resolution logic for building the locale candidate chain.

A lookup consults every locale in the chain, from least to most specific,
so more specific locales override broader ones during the merge.
"""

from typing import List, Optional

from langstore.logging import get_module_logger

logger = get_module_logger()


class LocaleResolver:
    """Expands the current and default locales into a candidate chain.

    Each locale is lowercased and split on ``_`` and every progressive prefix
    becomes a candidate. Tags are pushed to the front of the chain, so for a
    current locale of ``en_au`` and a default of ``en`` the chain is
    ``["en", "en_au"]``, and for ``fr_ca`` / ``en_us`` it is
    ``["en", "en_us", "fr", "fr_ca"]``. The current locale's full tag is
    always last and therefore wins.
    """

    @staticmethod
    def split_locale(locale: str) -> List[str]:
        """Split a locale tag into lowercase segments.

        ``-`` is accepted as a separator so ``en-AU`` and ``en_AU`` resolve
        to the same directories. Empty segments are dropped.

        Args:
            locale: Locale tag (e.g., "en_AU_POSIX").

        Returns:
            Segments (e.g., ["en", "au", "posix"]).
        """
        normalized = locale.strip().lower().replace("-", "_")
        return [part for part in normalized.split("_") if part]

    def expand(self, locale: str) -> List[str]:
        """Return the prefixes of a single locale, most specific first.

        Args:
            locale: Locale tag.

        Returns:
            E.g. ["en_au_posix", "en_au", "en"] for "en_AU_POSIX".
        """
        parts = self.split_locale(locale)
        return ["_".join(parts[:size]) for size in range(len(parts), 0, -1)]

    def resolve_candidates(
        self,
        current_locale: Optional[str],
        default_locale: Optional[str] = None,
    ) -> List[str]:
        """Build the ordered candidate chain for a lookup.

        Args:
            current_locale: Effective current locale.
            default_locale: Effective default locale.

        Returns:
            Locale tags, least specific first, without duplicates.
        """
        candidates: List[str] = []

        for locale in (current_locale, default_locale):
            if not locale:
                continue

            for tag in self.expand(locale):
                # Broader prefixes of a known tag are already in the chain
                if tag in candidates:
                    break
                candidates.insert(0, tag)

        logger.debug(
            "resolved_locale_candidates",
            current_locale=current_locale,
            default_locale=default_locale,
            candidates=candidates,
        )
        return candidates

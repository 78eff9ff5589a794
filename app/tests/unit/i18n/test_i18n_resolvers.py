"""Tests for langstore.i18n.resolvers module."""

import pytest

from langstore.i18n import LocaleResolver


@pytest.fixture
def resolver():
    return LocaleResolver()


class TestSplitLocale:
    """Tests for LocaleResolver.split_locale()."""

    def test_lowercases_segments(self):
        assert LocaleResolver.split_locale("en_AU_POSIX") == ["en", "au", "posix"]

    def test_accepts_hyphen_separator(self):
        assert LocaleResolver.split_locale("en-AU") == ["en", "au"]

    def test_drops_empty_segments(self):
        assert LocaleResolver.split_locale("en__au_") == ["en", "au"]

    def test_blank_locale(self):
        assert LocaleResolver.split_locale("  ") == []


class TestExpand:
    """Tests for LocaleResolver.expand()."""

    def test_most_specific_first(self, resolver):
        assert resolver.expand("en_AU_POSIX") == ["en_au_posix", "en_au", "en"]

    def test_single_segment(self, resolver):
        assert resolver.expand("en") == ["en"]


class TestResolveCandidates:
    """Tests for LocaleResolver.resolve_candidates()."""

    def test_current_extends_default(self, resolver):
        """Current en_au with default en gives the current tag last."""
        assert resolver.resolve_candidates("en_au", "en") == ["en", "en_au"]

    def test_unrelated_locales(self, resolver):
        """Default locale tags form the least specific part of the chain."""
        assert resolver.resolve_candidates("fr_ca", "en_us") == [
            "en",
            "en_us",
            "fr",
            "fr_ca",
        ]

    def test_current_full_tag_is_last(self, resolver):
        candidates = resolver.resolve_candidates("en_AU_POSIX", "de")
        assert candidates[-1] == "en_au_posix"
        assert candidates == ["de", "en", "en_au", "en_au_posix"]

    def test_default_more_specific_than_current(self, resolver):
        """A current locale that is a prefix of the default still wins."""
        assert resolver.resolve_candidates("en", "en_au") == ["en_au", "en"]

    @pytest.mark.parametrize("locale", ["en", "en_au", "EN_au_Posix", "zz"])
    def test_same_locale_matches_single_expansion(self, resolver, locale):
        """resolve_candidates(L, L) equals the single-locale chain of L."""
        single = list(reversed(resolver.expand(locale)))
        assert resolver.resolve_candidates(locale, locale) == single
        assert resolver.resolve_candidates(locale, None) == single

    def test_no_duplicates(self, resolver):
        candidates = resolver.resolve_candidates("en_gb", "en_au")
        assert candidates == ["en_au", "en", "en_gb"]
        assert len(candidates) == len(set(candidates))

    def test_no_underscore_single_candidate(self, resolver):
        assert resolver.resolve_candidates("ru", "ru") == ["ru"]

    def test_no_locales(self, resolver):
        assert resolver.resolve_candidates(None, None) == []

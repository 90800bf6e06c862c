"""
Preference resolution tests

Each tier is tested on its own, then the precedence between tiers.
"""

import pytest

from app.i18n.preference import (
    STRATEGIES,
    PreferenceSignals,
    from_browser,
    from_default,
    from_stored_preference,
    from_url,
    match_browser_tag,
    resolve,
)


class TestPreferenceSignals:
    def test_browser_list_stored_as_tuple(self):
        signals = PreferenceSignals(default_locale="en", browser_locales=["pt-BR"])
        assert signals.browser_locales == ("pt-BR",)

    def test_signals_are_immutable(self):
        signals = PreferenceSignals(default_locale="en")
        with pytest.raises(AttributeError):
            signals.stored_locale = "pt"

    def test_strategy_order(self):
        assert STRATEGIES == (from_url, from_stored_preference, from_browser, from_default)


class TestUrlTier:
    def test_supported_url_locale(self, locales, pt):
        assert from_url(PreferenceSignals(default_locale="en", url_locale="pt"), locales) == pt

    def test_unsupported_url_locale(self, locales):
        assert from_url(PreferenceSignals(default_locale="en", url_locale="fr"), locales) is None

    def test_absent_url_locale(self, locales):
        assert from_url(PreferenceSignals(default_locale="en"), locales) is None


class TestStoredTier:
    def test_stored_locale(self, locales, pt):
        assert from_stored_preference(PreferenceSignals(default_locale="en", stored_locale="pt"), locales) == pt

    def test_stored_value_is_trimmed(self, locales, pt):
        assert from_stored_preference(PreferenceSignals(default_locale="en", stored_locale=" pt "), locales) == pt

    @pytest.mark.parametrize("stored", ["", "   ", "klingon", "pt-BR", None])
    def test_malformed_stored_value_is_absent(self, locales, stored):
        assert from_stored_preference(PreferenceSignals(default_locale="en", stored_locale=stored), locales) is None


class TestBrowserTier:
    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("pt", "pt"),
            ("pt-BR", "pt"),
            ("PT-br", "pt"),
            ("pt_BR", "pt"),
            ("pt-PT", "pt"),
            ("en-GB", "en"),
            ("en", "en"),
        ],
    )
    def test_match_browser_tag(self, locales, tag, expected):
        assert match_browser_tag(tag, locales).code == expected

    @pytest.mark.parametrize("tag", ["fr-FR", "de", "", "  ", "*", "1234", "e", "p", "p-BR"])
    def test_unmatched_browser_tag(self, locales, tag):
        assert match_browser_tag(tag, locales) is None

    def test_first_matching_entry_wins(self, locales, pt):
        signals = PreferenceSignals(default_locale="en", browser_locales=("fr-FR", "pt-BR", "en-US"))
        assert from_browser(signals, locales) == pt

    def test_exact_match_preferred_within_entry(self, locales, en):
        # "en-US" is en's own region tag
        signals = PreferenceSignals(default_locale="pt", browser_locales=("en-US",))
        assert from_browser(signals, locales) == en

    def test_no_browser_match(self, locales):
        signals = PreferenceSignals(default_locale="en", browser_locales=("fr", "de"))
        assert from_browser(signals, locales) is None


class TestPrecedence:
    @pytest.mark.parametrize("stored", [None, "en", "pt", "fr"])
    @pytest.mark.parametrize("browser", [(), ("en-US",), ("pt-BR",), ("fr",)])
    @pytest.mark.parametrize("default", ["en", "pt"])
    @pytest.mark.parametrize("url", ["en", "pt"])
    def test_url_locale_always_wins(self, locales, url, stored, browser, default):
        signals = PreferenceSignals(
            default_locale=default,
            url_locale=url,
            stored_locale=stored,
            browser_locales=browser,
        )
        assert resolve(signals, locales).code == url

    def test_stored_beats_browser(self, locales):
        signals = PreferenceSignals(default_locale="en", stored_locale="en", browser_locales=("pt-BR",))
        assert resolve(signals, locales).code == "en"

    def test_browser_primary_subtag_beats_default(self, locales):
        signals = PreferenceSignals(default_locale="en", browser_locales=("pt-PT",))
        assert resolve(signals, locales).code == "pt"

    def test_default_when_nothing_else(self, locales):
        assert resolve(PreferenceSignals(default_locale="pt"), locales).code == "pt"

    def test_unsupported_default_falls_back_to_registry_default(self, locales):
        assert resolve(PreferenceSignals(default_locale="fr"), locales) == locales.default_locale

    def test_resolution_is_deterministic(self, locales):
        signals = PreferenceSignals(default_locale="en", stored_locale="fr", browser_locales=("de", "pt"))
        results = {resolve(signals, locales).code for _ in range(20)}
        assert results == {"pt"}

    def test_custom_strategy_chain(self, locales, pt):
        signals = PreferenceSignals(default_locale="en", stored_locale="pt", browser_locales=("en",))
        assert resolve(signals, locales, strategies=(from_browser, from_stored_preference)).code == "en"
        assert resolve(signals, locales, strategies=(from_stored_preference,)) == pt

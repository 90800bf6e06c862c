"""
Preference resolution

Resolves the one locale a request should be answered in from the signals
it carries. The precedence is fixed and every other component relies on it:

  1. locale named by the URL prefix
  2. locale stored by a previous visit (client-owned cookie)
  3. browser-reported languages (exact tag first, then primary subtag)
  4. configured default

Each tier is a strategy function returning a Locale or None; `resolve`
tries them in order. Nothing here reads request or process state, so the
same signals always give the same answer.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from app.i18n.locale import Locale, LocaleRegistry, registry


@dataclass(frozen=True)
class PreferenceSignals:
    """Inputs for one resolution. Absent signals are None / empty."""

    default_locale: str
    url_locale: str | None = None
    stored_locale: str | None = None
    browser_locales: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Lists are accepted for convenience but stored immutably
        if not isinstance(self.browser_locales, tuple):
            object.__setattr__(self, "browser_locales", tuple(self.browser_locales or ()))


Strategy = Callable[[PreferenceSignals, LocaleRegistry], Locale | None]


def _clean(value: str | None) -> str | None:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def from_url(signals: PreferenceSignals, locales: LocaleRegistry) -> Locale | None:
    return locales.get(_clean(signals.url_locale))


def from_stored_preference(signals: PreferenceSignals, locales: LocaleRegistry) -> Locale | None:
    return locales.get(_clean(signals.stored_locale))


def match_browser_tag(tag: str, locales: LocaleRegistry) -> Locale | None:
    """
    Match one browser language tag against the supported locales.

    Exact match wins (against the short code or the full region tag,
    case-insensitively); otherwise the primary subtag ("pt" of "pt-PT") is
    matched against locale codes that start with it.
    """
    tag = (_clean(tag) or "").replace("_", "-").lower()
    if not tag:
        return None

    for locale in locales:
        if tag in (locale.code.lower(), locale.region_tag.lower()):
            return locale

    primary = tag.split("-")[0]
    if not (primary.isalpha() and 2 <= len(primary) <= 3):
        return None
    for locale in locales:
        if locale.code.lower().startswith(primary):
            return locale
    return None


def from_browser(signals: PreferenceSignals, locales: LocaleRegistry) -> Locale | None:
    for tag in signals.browser_locales:
        locale = match_browser_tag(tag, locales)
        if locale is not None:
            return locale
    return None


def from_default(signals: PreferenceSignals, locales: LocaleRegistry) -> Locale | None:
    return locales.get(signals.default_locale)


STRATEGIES: tuple[Strategy, ...] = (
    from_url,
    from_stored_preference,
    from_browser,
    from_default,
)


def resolve(
    signals: PreferenceSignals,
    locales: LocaleRegistry = registry,
    strategies: Sequence[Strategy] = STRATEGIES,
) -> Locale:
    """
    Return the first locale produced by the strategy chain.

    A default that is itself unsupported falls back to the registry's own
    default, so the result is always a supported locale.
    """
    for strategy in strategies:
        locale = strategy(signals, locales)
        if locale is not None:
            return locale
    return locales.default_locale

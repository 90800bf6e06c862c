"""
Locale registry

Static table of the locales the site is published in, plus the pure
helpers that work on BCP 47 tags:
- prefix <-> locale lookup (a bijection, checked when the registry is built)
- RTL (right-to-left) language detection
- Accept-Language header parsing with quality-value (q=) support
- Language metadata lookup
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from app.exceptions import LocaleConfigError

# ── Constants ─────────────────────────────────────────────────────────────────

# BCP 47 base language codes whose scripts read right-to-left
RTL_LOCALES: frozenset[str] = frozenset({"ar", "he", "fa", "ur", "yi", "ku"})


@dataclass(frozen=True)
class Locale:
    """
    One published language variant of the site.

    Attributes:
        code:           Canonical short code, also the hreflang value ("en").
        prefix:         URL path prefix, always "/" + one segment ("/en").
        name:           Native display name shown in the language switcher.
        region_tag:     Full BCP 47 tag used for formatting ("en-US").
        og_locale:      Open-Graph tag, underscore separated ("en_US").
        direction:      "ltr" or "rtl".
        flag:           Emoji flag for the switcher.
        date_format:    Babel date format style ("short", "medium", "long", "full").
        min_fraction_digits / max_fraction_digits: number formatting rules.
    """

    code: str
    prefix: str
    name: str
    region_tag: str
    og_locale: str
    direction: str = "ltr"
    flag: str = ""
    date_format: str = "long"
    min_fraction_digits: int = 0
    max_fraction_digits: int = 2

    @property
    def babel_locale(self) -> str:
        return self.region_tag.replace("-", "_")

    @property
    def segment(self) -> str:
        return self.prefix.lstrip("/")


ENGLISH = Locale(
    code="en",
    prefix="/en",
    name="English",
    region_tag="en-US",
    og_locale="en_US",
    flag="🇺🇸",
)

PORTUGUESE = Locale(
    code="pt",
    prefix="/pt",
    name="Português",
    region_tag="pt-BR",
    og_locale="pt_BR",
    flag="🇧🇷",
)

SUPPORTED_LOCALES: tuple[Locale, ...] = (ENGLISH, PORTUGUESE)

DEFAULT_LOCALE_CODE = "en"


class LocaleRegistry:
    """
    Read-only lookup table over a fixed, ordered set of locales.

    Built once at import time; nothing writes to it afterwards, so a single
    instance is shared by every request.
    """

    def __init__(self, locales: tuple[Locale, ...] | list[Locale], default_code: str):
        self._locales = tuple(locales)
        self._by_code: dict[str, Locale] = {}
        self._by_prefix: dict[str, Locale] = {}

        for locale in self._locales:
            if not locale.prefix.startswith("/") or "/" in locale.segment or not locale.segment:
                raise LocaleConfigError(f"Invalid prefix '{locale.prefix}' for locale '{locale.code}'")
            if locale.code in self._by_code:
                raise LocaleConfigError(f"Duplicate locale code '{locale.code}'")
            if locale.prefix in self._by_prefix:
                raise LocaleConfigError(
                    f"Prefix '{locale.prefix}' is shared by '{self._by_prefix[locale.prefix].code}' and '{locale.code}'"
                )
            self._by_code[locale.code] = locale
            self._by_prefix[locale.prefix] = locale

        if default_code not in self._by_code:
            raise LocaleConfigError(f"Default locale '{default_code}' is not a supported locale")
        self._default = self._by_code[default_code]

    @property
    def default_locale(self) -> Locale:
        return self._default

    def supported_locales(self) -> tuple[Locale, ...]:
        return self._locales

    def codes(self) -> list[str]:
        return [locale.code for locale in self._locales]

    def get(self, code: str | None) -> Locale | None:
        """Return the locale for a code, or None. Never raises."""
        if not code:
            return None
        return self._by_code.get(code)

    def is_supported(self, code: str | None) -> bool:
        return self.get(code) is not None

    def prefix_for(self, locale: Locale | str) -> str:
        code = locale if isinstance(locale, str) else locale.code
        return self._by_code[code].prefix

    def locale_for_prefix(self, prefix: str | None) -> Locale | None:
        """Map "/en" (or "en") back to its locale; unknown prefixes yield None."""
        if not prefix:
            return None
        if not prefix.startswith("/"):
            prefix = f"/{prefix}"
        return self._by_prefix.get(prefix)

    def __iter__(self):
        return iter(self._locales)

    def __len__(self) -> int:
        return len(self._locales)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Locale):
            return self._by_code.get(item.code) == item
        if isinstance(item, str):
            return item in self._by_code
        return False


registry = LocaleRegistry(SUPPORTED_LOCALES, DEFAULT_LOCALE_CODE)


def build_registry(codes: list[str], default_code: str) -> LocaleRegistry:
    """Registry restricted to `codes` (in that order), e.g. from settings.

    Raises LocaleConfigError for a code the site has no locale table entry for.
    """
    known = {locale.code: locale for locale in SUPPORTED_LOCALES}
    unknown = [code for code in codes if code not in known]
    if unknown:
        raise LocaleConfigError(f"No locale definition for: {', '.join(unknown)}")
    return LocaleRegistry([known[code] for code in codes], default_code)


# ── Public helpers ────────────────────────────────────────────────────────────


def is_rtl_locale(locale: str) -> bool:
    """Return True when the given BCP 47 locale is right-to-left.

    Compares only the base language tag (before the first hyphen), so
    both "ar" and "ar-SA" are correctly identified as RTL.
    """
    base = locale.split("-")[0].lower()
    return base in RTL_LOCALES


def parse_accept_language(header: str | None) -> list[str]:
    """Parse an Accept-Language header into tags ordered by preference.

    Algorithm:
    1. Split header into tags with optional q-values (default q=1.0).
    2. Drop wildcards, empty tags and tags with q=0.
    3. Sort by q-value descending (stable, so equal weights keep header order).

    Malformed q-values are treated as 1.0; a missing header yields [].

    Args:
        header: Value of the Accept-Language HTTP header, e.g.
                "pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7".

    Returns:
        Language tags, most preferred first.
    """
    if not header:
        return []

    weighted: list[tuple[float, str]] = []
    for part in header.split(","):
        part = part.strip()
        if not part:
            continue
        tag, _, params = part.partition(";")
        tag = tag.strip()
        q = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                q = float(params[2:].strip())
            except ValueError:
                q = 1.0
            if math.isnan(q):
                q = 1.0
        if not tag or tag == "*" or q <= 0:
            continue
        weighted.append((q, tag))

    weighted.sort(key=lambda x: x[0], reverse=True)
    return [tag for _, tag in weighted]


def get_language_info(code: str, locales: LocaleRegistry = registry) -> dict[str, str | bool]:
    """Return a metadata dict describing the given locale.

    Unknown codes fall back to the code itself as their name.
    """
    locale = locales.get(code)
    return {
        "code": code,
        "name": locale.name if locale else code,
        "region_tag": locale.region_tag if locale else code,
        "direction": locale.direction if locale else ("rtl" if is_rtl_locale(code) else "ltr"),
        "is_rtl": is_rtl_locale(code),
    }

"""
Path <-> locale mapping

Splits a request path into its locale prefix (if any) and the remainder
that ordinary page routing works on, and builds localized paths back.
"""

from __future__ import annotations

from app.i18n.locale import Locale, LocaleRegistry, registry


def first_segment(path: str) -> str:
    """Return the first non-empty path segment, or "" for the root path."""
    for segment in path.split("/"):
        if segment:
            return segment
    return ""


def strip_first_segment(path: str) -> str:
    """Drop the first segment of a path, keeping the rest verbatim ("/" when empty)."""
    stripped = path.lstrip("/")
    _, sep, rest = stripped.partition("/")
    if not sep:
        return "/"
    return f"/{rest}"


def map_path(path: str, locales: LocaleRegistry = registry) -> tuple[Locale | None, str]:
    """
    Parse a request path into (locale, remainder).

    The first segment must match a prefix exactly (case-sensitive). When it
    does, the prefix is stripped and the remainder defaults to "/".
    Otherwise the path is returned untouched with no locale.
    """
    locale = locales.locale_for_prefix(first_segment(path))
    if locale is None or not path.startswith(locale.prefix):
        return None, path
    return locale, strip_first_segment(path)


def remove_prefix(path: str, locales: LocaleRegistry = registry) -> str:
    return map_path(path, locales)[1]


def add_prefix(path: str, locale: Locale | str, locales: LocaleRegistry = registry) -> str:
    """
    Build the localized path for `locale`.

    Any existing locale prefix is replaced; a bare "/" remainder collapses so
    the home page of a locale is just its prefix ("/pt").
    """
    remainder = remove_prefix(path or "/", locales)
    prefix = locales.prefix_for(locale)
    return prefix if remainder == "/" else f"{prefix}{remainder}"


def alternate_paths(path: str, locales: LocaleRegistry = registry) -> dict[str, str]:
    """Localized variants of the same page, keyed by locale code."""
    remainder = remove_prefix(path or "/", locales)
    return {locale.code: add_prefix(remainder, locale, locales) for locale in locales}

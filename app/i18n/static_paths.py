"""
Static route table

Helpers for the page generator and the language switcher: every logical
route crossed with every supported locale, plus language-switcher entries.
"""

from __future__ import annotations

from typing import Any

from app.i18n.locale import Locale, LocaleRegistry, registry
from app.i18n.path_mapper import add_prefix

# Logical pages every locale publishes
STATIC_ROUTES: tuple[str, ...] = (
    "/",
    "/posts",
    "/tags",
    "/archives",
    "/search",
    "/about",
    "/404",
)


def generate_i18n_paths(
    paths: list[dict[str, Any]],
    locales: LocaleRegistry = registry,
) -> list[dict[str, Any]]:
    """
    Cross every path entry with every locale.

    Each entry is a dict with optional "params" and any other keys; the
    result copies the entry and adds `params["lang"]`.
    """
    result = []
    for locale in locales:
        for path in paths:
            entry = dict(path)
            entry["params"] = {**path.get("params", {}), "lang": locale.code}
            result.append(entry)
    return result


def get_language_static_paths(
    base_paths: list[str] | tuple[str, ...] = STATIC_ROUTES,
    locales: LocaleRegistry = registry,
) -> list[dict[str, Any]]:
    return [
        {"params": {"lang": locale.code}, "props": {"path": path, "url": add_prefix(path, locale, locales)}}
        for locale in locales
        for path in base_paths
    ]


def localized_static_urls(
    base_paths: list[str] | tuple[str, ...] = STATIC_ROUTES,
    locales: LocaleRegistry = registry,
) -> list[str]:
    """Concrete URLs the page generator materialises, locale by locale."""
    return [entry["props"]["url"] for entry in get_language_static_paths(base_paths, locales)]


def validate_language_param(lang: str | None, locales: LocaleRegistry = registry) -> Locale:
    """Supported locale named by `lang`, or the default locale."""
    return locales.get(lang) or locales.default_locale


def get_available_languages(current_path: str = "/", locales: LocaleRegistry = registry) -> list[dict[str, str]]:
    """Language switcher entries, each pointing at `current_path` in that locale."""
    return [
        {
            "code": locale.code,
            "name": locale.name,
            "flag": locale.flag,
            "path": locale.prefix,
            "url": add_prefix(current_path, locale, locales),
        }
        for locale in locales
    ]


def get_alternative_language(current: Locale | str, locales: LocaleRegistry = registry) -> Locale:
    """The next locale after `current` in registry order (the other one, for two locales)."""
    code = current if isinstance(current, str) else current.code
    ordered = locales.supported_locales()
    codes = [locale.code for locale in ordered]
    if code not in codes:
        return locales.default_locale
    return ordered[(codes.index(code) + 1) % len(ordered)]

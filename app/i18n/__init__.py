"""
i18n (Internationalization) package

Locale routing engine for the bilingual site: locale registry, path
mapping, preference resolution, legacy route classification, redirect
planning and SEO link metadata. Everything here is pure; the HTTP layer
lives in app.middleware.locale_routing.
"""

from .legacy import LEGACY_ROUTES, LegacyRoute, classify, validate_legacy_routes
from .locale import (
    RTL_LOCALES,
    SUPPORTED_LOCALES,
    Locale,
    LocaleRegistry,
    get_language_info,
    is_rtl_locale,
    parse_accept_language,
    registry,
)
from .path_mapper import add_prefix, alternate_paths, map_path, remove_prefix
from .preference import PreferenceSignals, resolve
from .redirects import PassThrough, Redirect, RedirectDecision, RouteState, Serve, build_location, plan
from .seo_links import SEOLinks, build

__all__ = [
    "LEGACY_ROUTES",
    "RTL_LOCALES",
    "SUPPORTED_LOCALES",
    "LegacyRoute",
    "Locale",
    "LocaleRegistry",
    "PassThrough",
    "PreferenceSignals",
    "Redirect",
    "RedirectDecision",
    "RouteState",
    "SEOLinks",
    "Serve",
    "add_prefix",
    "alternate_paths",
    "build",
    "build_location",
    "classify",
    "get_language_info",
    "is_rtl_locale",
    "map_path",
    "parse_accept_language",
    "plan",
    "registry",
    "remove_prefix",
    "resolve",
    "validate_legacy_routes",
]

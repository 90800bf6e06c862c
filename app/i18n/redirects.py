"""
Redirect planning

Decides, for one request path plus its preference signals, whether the
site serves the page, redirects (and where), or leaves the request alone.
Rules are evaluated in a fixed order; the first one that applies wins:

  1. PASS_THROUGH       assets, API, well-known SEO files, anything with an extension
  2. ALREADY_LOCALIZED  first segment is a locale prefix              -> serve
  3. ROOT_PATH          "/"                                          -> 302 to preferred home
  4. LEGACY_*           un-prefixed URL from the old site            -> 301 to prefixed URL
  5. UNKNOWN_PREFIX     first segment looks like another language    -> 302 with it stripped
  6. UNMATCHED          ordinary routing (not-found handled downstream)

Every redirect target produced by rules 3 and 4 starts with a locale prefix,
so planning it again lands on rule 2. Rule 5 always shortens the path, so a
chain through it ends after a bounded number of hops.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import urlsplit, urlunsplit

from fastapi import status

from app.i18n.legacy import LEGACY_ROUTES, LegacyEntry, LegacyRoute, classify
from app.i18n.locale import Locale, LocaleRegistry, registry
from app.i18n.path_mapper import add_prefix, first_segment, map_path, strip_first_segment
from app.i18n.preference import PreferenceSignals, resolve

# Path prefixes that never carry a locale
PASS_THROUGH_PREFIXES: tuple[str, ...] = (
    "/_astro/",
    "/assets/",
    "/static/",
    "/api/",
    "/robots.txt",
    "/sitemap",
    "/rss.xml",
    "/feed.xml",
    "/atom.xml",
    "/og.png",
    "/favicon.ico",
)

# "fr", "de-AT", "zh-Hant": a segment that reads like a language tag
LANGUAGE_TAG_RE = re.compile(r"^[A-Za-z]{2}(?:-[A-Za-z0-9]{2,8})?$")


class RouteState(str, Enum):
    PASS_THROUGH = "pass_through"
    ALREADY_LOCALIZED = "already_localized"
    ROOT_PATH = "root_path"
    LEGACY_STATIC = "legacy_static"
    LEGACY_DYNAMIC = "legacy_dynamic"
    UNKNOWN_PREFIX = "unknown_prefix"
    UNMATCHED = "unmatched"


@dataclass(frozen=True)
class Serve:
    """Continue normal handling. `locale` is None when the path carries none."""

    state: RouteState
    path: str
    locale: Locale | None = None
    remainder: str = "/"


@dataclass(frozen=True)
class Redirect:
    state: RouteState
    path: str
    status_code: int
    target: str
    locale: Locale | None = None
    legacy: LegacyRoute | None = field(default=None, compare=False)


@dataclass(frozen=True)
class PassThrough:
    state: RouteState
    path: str | None


RedirectDecision = Serve | Redirect | PassThrough


def is_pass_through(path: str | None, prefixes: Sequence[str] = PASS_THROUGH_PREFIXES) -> bool:
    """True for paths the locale logic must never touch."""
    if not path or not isinstance(path, str) or not path.startswith("/"):
        return True
    if any(path.startswith(prefix) for prefix in prefixes):
        return True
    final = path.rstrip("/").rsplit("/", 1)[-1]
    return "." in final


def looks_like_language_tag(segment: str) -> bool:
    return bool(LANGUAGE_TAG_RE.match(segment))


def plan(
    path: str | None,
    *,
    stored_locale: str | None = None,
    browser_locales: Iterable[str] = (),
    default_locale: str | None = None,
    locales: LocaleRegistry = registry,
    legacy_routes: Iterable[LegacyEntry] = LEGACY_ROUTES,
) -> RedirectDecision:
    """
    Plan the response for one request path.

    Never raises: a missing or malformed path is treated as pass-through.
    Redirect targets are paths only; `build_location` attaches the request's
    own origin, query string and fragment.
    """
    if is_pass_through(path):
        return PassThrough(state=RouteState.PASS_THROUGH, path=path)

    url_locale, remainder = map_path(path, locales)
    if url_locale is not None:
        return Serve(
            state=RouteState.ALREADY_LOCALIZED,
            path=path,
            locale=url_locale,
            remainder=remainder,
        )

    signals = PreferenceSignals(
        default_locale=default_locale or locales.default_locale.code,
        stored_locale=stored_locale,
        browser_locales=tuple(browser_locales or ()),
    )

    if path == "/":
        preferred = resolve(signals, locales)
        return Redirect(
            state=RouteState.ROOT_PATH,
            path=path,
            status_code=status.HTTP_302_FOUND,
            target=add_prefix("/", preferred, locales),
            locale=preferred,
        )

    legacy = classify(path, legacy_routes)
    if legacy is not None:
        preferred = resolve(signals, locales)
        return Redirect(
            state=RouteState.LEGACY_STATIC if legacy.is_static else RouteState.LEGACY_DYNAMIC,
            path=path,
            status_code=status.HTTP_301_MOVED_PERMANENTLY,
            target=f"{preferred.prefix}{legacy.remainder}",
            locale=preferred,
            legacy=legacy,
        )

    segment = first_segment(path)
    if segment and looks_like_language_tag(segment) and locales.locale_for_prefix(segment) is None:
        return Redirect(
            state=RouteState.UNKNOWN_PREFIX,
            path=path,
            status_code=status.HTTP_302_FOUND,
            target=strip_first_segment(path),
        )

    return Serve(state=RouteState.UNMATCHED, path=path, locale=None, remainder=path)


def build_location(target: str, request_url: str) -> str:
    """
    Absolute Location header for a redirect target.

    Origin, query string and fragment are copied verbatim from the URL the
    request came in on; only the path changes.
    """
    parts = urlsplit(request_url)
    return urlunsplit((parts.scheme, parts.netloc, target, parts.query, parts.fragment))

"""
Localized Page Routes

The rendering side of the site: every page lives under a locale prefix
(/en/..., /pt/...). Routes here return the page context (locale, remainder,
SEO link metadata, language switcher, formatting rules) that a template
renders; content loading and HTML rendering happen elsewhere.

Registered LAST in create_app() because /{lang}/{rest:path} matches
everything with a leading segment.
"""

import logging

from fastapi import APIRouter, Depends, Request

from app.config import settings
from app.exceptions import PageNotFoundError
from app.i18n.formatting import formatting_context
from app.i18n.legacy import classify
from app.i18n.locale import Locale, LocaleRegistry
from app.i18n.seo_links import build
from app.i18n.static_paths import get_alternative_language, get_available_languages
from app.routes.deps import get_locales
from app.routes.seo import get_base_url
from app.schemas.routing import LanguageSwitcherEntry, LocaleFormatting, PageContext, SEOLinksResponse

router = APIRouter(tags=["Pages"])
logger = logging.getLogger(__name__)


def resolve_page(remainder: str) -> tuple[str, dict]:
    """Logical page name and parameters for a remainder path."""
    if remainder in ("", "/"):
        return "home", {}
    match = classify(remainder)
    if match is None:
        raise PageNotFoundError(remainder)
    return match.name, match.params


def page_remainder(request: Request, rest: str) -> str:
    """Remainder after the locale prefix, still percent-encoded, without a trailing slash."""
    context = getattr(request.state, "locale_context", None)
    if context is not None and context.locale is not None:
        return context.remainder.rstrip("/") or "/"
    return f"/{rest.rstrip('/')}" if rest.strip("/") else "/"


def page_locale(request: Request, lang: str, locales: LocaleRegistry) -> Locale:
    context = getattr(request.state, "locale_context", None)
    if context is not None and context.locale is not None:
        return context.locale
    locale = locales.locale_for_prefix(lang)
    if locale is None:
        raise PageNotFoundError(request.url.path)
    return locale


@router.get("/{lang}", response_model=PageContext)
@router.get("/{lang}/{rest:path}", response_model=PageContext)
async def localized_page(
    request: Request,
    lang: str,
    rest: str = "",
    locales: LocaleRegistry = Depends(get_locales),
) -> PageContext:
    """Page context for a localized path."""
    locale = page_locale(request, lang, locales)
    remainder = page_remainder(request, rest)

    try:
        page, params = resolve_page(remainder)
    except PageNotFoundError:
        raise PageNotFoundError(remainder, locale=locale.code) from None

    links = build(get_base_url(request), remainder, locale, locales)

    return PageContext(
        page=page,
        locale=locale.code,
        html_lang=locale.region_tag,
        direction=locale.direction,
        path=request.url.path,
        remainder=remainder,
        params=params,
        seo=SEOLinksResponse.from_links(links),
        languages=[LanguageSwitcherEntry(**entry) for entry in get_available_languages(remainder, locales)],
        alternative_language=get_alternative_language(locale, locales).code,
        formatting=LocaleFormatting(**formatting_context(locale, tz=settings.timezone)),
    )

"""
i18n API Routes  (prefix: /api/v1/i18n)

    GET /languages         → supported languages (public)
    GET /resolve           → dry-run the redirect planner for a path
    GET /seo-links         → link metadata for a path in one locale
    GET /static-paths      → locale × route table for the page generator

All paths start with /api/, so the locale router passes them through.
"""

import logging

from fastapi import APIRouter, Depends, Query, Request

from app.exceptions import UnsupportedLocaleError
from app.i18n.locale import LocaleRegistry, get_language_info, parse_accept_language
from app.i18n.path_mapper import remove_prefix
from app.i18n.redirects import plan
from app.i18n.seo_links import build
from app.i18n.static_paths import get_language_static_paths
from app.routes.deps import get_locales
from app.routes.seo import get_base_url
from app.schemas.routing import LanguageInfo, RoutingDecisionResponse, SEOLinksResponse, StaticPathEntry

router = APIRouter(tags=["Internationalization"])
logger = logging.getLogger(__name__)


@router.get("/languages", response_model=list[LanguageInfo])
async def list_supported_languages(locales: LocaleRegistry = Depends(get_locales)) -> list[LanguageInfo]:
    """List all supported languages with name and direction (public, no auth)."""
    return [LanguageInfo(**get_language_info(code, locales)) for code in locales.codes()]


@router.get("/resolve", response_model=RoutingDecisionResponse)
async def resolve_path(
    path: str = Query(..., description="Request path to plan, e.g. /posts"),
    stored: str | None = Query(None, description="Stored language preference"),
    accept_language: str | None = Query(None, description="Accept-Language header value"),
    locales: LocaleRegistry = Depends(get_locales),
) -> RoutingDecisionResponse:
    """Show what the locale router would do with a request, without redirecting."""
    decision = plan(
        path,
        stored_locale=stored,
        browser_locales=parse_accept_language(accept_language),
        locales=locales,
    )
    return RoutingDecisionResponse.from_decision(decision)


@router.get("/seo-links", response_model=SEOLinksResponse)
async def seo_links(
    request: Request,
    path: str = Query("/", description="Page path, with or without locale prefix"),
    locale: str = Query(..., description="Locale code the page is served in"),
    locales: LocaleRegistry = Depends(get_locales),
) -> SEOLinksResponse:
    current = locales.get(locale)
    if current is None:
        raise UnsupportedLocaleError(locale, locales.codes())
    if not path.startswith("/"):
        path = f"/{path}"
    links = build(get_base_url(request), remove_prefix(path, locales), current, locales)
    return SEOLinksResponse.from_links(links)


@router.get("/static-paths", response_model=list[StaticPathEntry])
async def static_paths(locales: LocaleRegistry = Depends(get_locales)) -> list[StaticPathEntry]:
    return [StaticPathEntry(**entry) for entry in get_language_static_paths(locales=locales)]

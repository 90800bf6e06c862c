"""
SEO Routes

Provides endpoints for sitemap.xml and robots.txt.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from app.config import settings
from app.i18n.locale import LocaleRegistry
from app.routes.deps import get_locales
from app.services.seo_service import SEOService

router = APIRouter(tags=["SEO"])


def get_base_url(request: Request) -> str:
    """Configured public origin, falling back to the request's own."""
    return (settings.base_url or str(request.base_url)).rstrip("/")


@router.get("/sitemap.xml")
async def get_sitemap(
    request: Request,
    locales: LocaleRegistry = Depends(get_locales),
) -> Response:
    """
    Generate XML sitemap for search engines.

    Lists every localized static page with its hreflang alternates.
    """
    service = SEOService(get_base_url(request), locales)

    return Response(
        content=service.generate_sitemap(),
        media_type="application/xml",
        headers={"Cache-Control": "public, max-age=3600"},
    )


@router.get("/robots.txt")
async def get_robots_txt(
    request: Request,
    locales: LocaleRegistry = Depends(get_locales),
) -> Response:
    """
    Generate robots.txt for search engine crawlers.

    Defines crawling rules and sitemap location.
    """
    service = SEOService(get_base_url(request), locales)

    return Response(
        content=service.generate_robots_txt(),
        media_type="text/plain",
        headers={"Cache-Control": "public, max-age=86400"},
    )

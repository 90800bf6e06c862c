import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.exception_handlers import register_exception_handlers
from app.i18n.legacy import LEGACY_ROUTES, validate_legacy_routes
from app.i18n.locale import build_registry
from app.middleware.locale_routing import LocaleRoutingMiddleware
from app.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from app.routes import i18n, pages, seo

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create the FastAPI application.

    Fails fast on a broken locale table or overlapping legacy routes: both
    are configuration defects, not request-time conditions.
    """
    setup_structured_logging(log_level=settings.log_level, json_format=settings.json_logs)

    locales = build_registry(settings.supported_languages, settings.default_language)
    validate_legacy_routes(LEGACY_ROUTES, locales)

    app = FastAPI(
        title=settings.app_name,
        description="Bilingual blog with locale-prefixed routing",
        debug=settings.debug,
        version=settings.app_version,
    )
    app.state.locales = locales

    register_exception_handlers(app)

    # Starlette runs middleware in reverse order of registration:
    # logging wraps locale routing so redirects are logged too
    app.add_middleware(
        LocaleRoutingMiddleware,
        locales=locales,
        cookie_name=settings.preference_cookie_name,
    )
    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["Monitoring"])
    async def health():
        return {"status": "ok", "version": settings.app_version}

    # Include routers; the page catch-all goes last
    app.include_router(seo.router)
    app.include_router(i18n.router, prefix="/api/v1/i18n")
    app.include_router(pages.router)

    logger.info(
        f"Running in {settings.environment} mode with locales {', '.join(locales.codes())} "
        f"(default {locales.default_locale.code})"
    )

    return app


app = create_app()

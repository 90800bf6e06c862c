"""
Locale Routing Middleware

Runs the redirect planner on every request before routing:
  - PASS_THROUGH / UNMATCHED requests continue untouched
  - ALREADY_LOCALIZED requests continue with request.state.locale_context set
  - ROOT_PATH / LEGACY_* / UNKNOWN_PREFIX requests get a 302 or 301

Planning runs on the raw (still percent-encoded) path, so redirect targets
and remainders carry the path exactly as the client sent it.

Signals come from the request only: the stored preference cookie and the
Accept-Language header. Nothing is cached between requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import quote

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

from app.i18n.locale import Locale, LocaleRegistry, parse_accept_language, registry
from app.i18n.redirects import Redirect, RedirectDecision, RouteState, Serve, build_location, plan

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


def raw_request_path(request: Request) -> str:
    """The path as the client sent it, percent-encoding intact."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.decode("latin-1").split("?", 1)[0]
    return quote(request.scope["path"], safe="/")


def raw_request_url(request: Request) -> str:
    """Request URL rebuilt from the raw path and query string."""
    url = f"{request.url.scheme}://{request.url.netloc}{raw_request_path(request)}"
    query = request.scope.get("query_string", b"").decode("latin-1")
    return f"{url}?{query}" if query else url


@dataclass(frozen=True)
class RequestLocaleContext:
    """Per-request routing result handed to the page routes."""

    state: RouteState
    locale: Locale | None
    remainder: str
    stored_locale: str | None
    browser_locales: tuple[str, ...]


class LocaleRoutingMiddleware(BaseHTTPMiddleware):
    """Apply the redirect planner and attach the resolved locale to request.state."""

    def __init__(
        self,
        app: ASGIApp,
        locales: LocaleRegistry = registry,
        cookie_name: str = "preferredLanguage",
    ):
        super().__init__(app)
        self.locales = locales
        self.cookie_name = cookie_name

    def decide(self, request: Request) -> tuple[RedirectDecision, str | None, tuple[str, ...]]:
        stored_locale = request.cookies.get(self.cookie_name)
        browser_locales = tuple(parse_accept_language(request.headers.get("Accept-Language")))
        decision = plan(
            raw_request_path(request),
            stored_locale=stored_locale,
            browser_locales=browser_locales,
            locales=self.locales,
        )
        return decision, stored_locale, browser_locales

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        decision, stored_locale, browser_locales = self.decide(request)

        if isinstance(decision, Redirect):
            location = build_location(decision.target, raw_request_url(request))
            logger.info(
                f"Redirecting {decision.path} -> {decision.target} ({decision.status_code})",
                extra={
                    "state": decision.state.value,
                    "status_code": decision.status_code,
                    "target": decision.target,
                    "path": decision.path,
                },
            )
            return RedirectResponse(location, status_code=decision.status_code)

        if isinstance(decision, Serve):
            request.state.locale_context = RequestLocaleContext(
                state=decision.state,
                locale=decision.locale,
                remainder=decision.remainder,
                stored_locale=stored_locale,
                browser_locales=browser_locales,
            )
            request.state.locale = decision.locale.code if decision.locale else None
            request.state.remainder = decision.remainder
        else:
            request.state.locale_context = None
            request.state.locale = None
            request.state.remainder = None

        return await call_next(request)

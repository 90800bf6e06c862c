"""Shared FastAPI dependencies for the routing layer."""

from fastapi import Request

from app.i18n.locale import LocaleRegistry, registry


def get_locales(request: Request) -> LocaleRegistry:
    """The registry built for this app at startup (module default otherwise)."""
    return getattr(request.app.state, "locales", None) or registry

"""
Custom Exception Classes for the site

The routing engine itself never raises during request handling; these
exceptions cover configuration defects found at startup and the
not-found conditions surfaced by the page routes.
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in the error envelope."""

    LOCALE_CONFIG_INVALID = "LOCALE_CONFIG_INVALID"
    LEGACY_ROUTES_OVERLAP = "LEGACY_ROUTES_OVERLAP"
    LOCALE_UNSUPPORTED = "LOCALE_UNSUPPORTED"
    PAGE_NOT_FOUND = "PAGE_NOT_FOUND"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class SiteError(Exception):
    """Base exception class for all site exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Configuration Exceptions (fatal at startup)
# ============================================================================


class LocaleConfigError(SiteError):
    """Raised when the locale table breaks the locale <-> prefix bijection"""

    def __init__(self, message: str = "Invalid locale configuration"):
        super().__init__(message=message, error_code=ErrorCode.LOCALE_CONFIG_INVALID)


class LegacyRouteConfigError(SiteError):
    """Raised when two legacy route patterns can match the same path"""

    def __init__(self, first: str, second: str):
        super().__init__(
            message=f"Legacy routes '{first}' and '{second}' overlap",
            error_code=ErrorCode.LEGACY_ROUTES_OVERLAP,
            details={"routes": [first, second]},
        )


# ============================================================================
# Request-level Exceptions
# ============================================================================


class UnsupportedLocaleError(SiteError):
    """Raised when an API caller names a locale the site is not published in"""

    def __init__(self, locale: str, supported: list[str]):
        super().__init__(
            message=f"Locale '{locale}' is not supported",
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=ErrorCode.LOCALE_UNSUPPORTED,
            details={"locale": locale, "supported": supported},
        )


class PageNotFoundError(SiteError):
    """Raised when no page exists for a localized remainder path"""

    def __init__(self, path: str, locale: str | None = None):
        details: dict[str, Any] = {"path": path}
        if locale:
            details["locale"] = locale
        super().__init__(
            message=f"Page '{path}' not found",
            status_code=status.HTTP_404_NOT_FOUND,
            error_code=ErrorCode.PAGE_NOT_FOUND,
            details=details,
        )

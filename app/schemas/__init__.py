from .routing import (
    AlternateLink,
    LanguageInfo,
    LanguageSwitcherEntry,
    LocaleFormatting,
    PageContext,
    RoutingDecisionResponse,
    SEOLinksResponse,
    StaticPathEntry,
)

# Define the public API of this module
__all__ = [
    "AlternateLink",
    "LanguageInfo",
    "LanguageSwitcherEntry",
    "LocaleFormatting",
    "PageContext",
    "RoutingDecisionResponse",
    "SEOLinksResponse",
    "StaticPathEntry",
]

"""
Routing Schemas

Pydantic models for the page context handed to the renderer and for the
i18n debugging endpoints.
"""

from typing import Any

from pydantic import BaseModel, Field

from app.i18n.redirects import PassThrough, Redirect, RedirectDecision
from app.i18n.seo_links import SEOLinks


class LanguageInfo(BaseModel):
    code: str
    name: str
    region_tag: str
    direction: str
    is_rtl: bool


class LanguageSwitcherEntry(BaseModel):
    code: str
    name: str
    flag: str
    path: str
    url: str


class AlternateLink(BaseModel):
    hreflang: str
    href: str


class SEOLinksResponse(BaseModel):
    """Link metadata for <head>: canonical, hreflang alternates, Open-Graph locales"""

    canonical: str
    alternates: list[AlternateLink]
    og_locale: str
    og_alternates: list[str]

    @classmethod
    def from_links(cls, links: SEOLinks) -> "SEOLinksResponse":
        return cls(
            canonical=links.canonical,
            alternates=[AlternateLink(hreflang=hreflang, href=href) for hreflang, href in links.alternates],
            og_locale=links.og_locale,
            og_alternates=list(links.og_alternates),
        )


class LocaleFormatting(BaseModel):
    """Date and number rules for the page's locale"""

    babel_locale: str
    timezone: str
    date_pattern: str
    number_pattern: str
    today: str


class PageContext(BaseModel):
    """Everything the renderer needs to produce one localized page"""

    page: str = Field(..., description="Logical page name, e.g. 'post' or 'tag_page'")
    locale: str
    html_lang: str
    direction: str
    path: str
    remainder: str
    params: dict[str, Any] = Field(default_factory=dict)
    seo: SEOLinksResponse
    languages: list[LanguageSwitcherEntry]
    alternative_language: str
    formatting: LocaleFormatting


class RoutingDecisionResponse(BaseModel):
    """Dry-run result of the redirect planner for one path"""

    path: str | None
    decision: str = Field(..., description="serve, redirect or pass_through")
    state: str
    status_code: int | None = None
    target: str | None = None
    locale: str | None = None
    remainder: str | None = None
    legacy_route: str | None = None

    @classmethod
    def from_decision(cls, decision: RedirectDecision) -> "RoutingDecisionResponse":
        if isinstance(decision, PassThrough):
            return cls(path=decision.path, decision="pass_through", state=decision.state.value)
        if isinstance(decision, Redirect):
            return cls(
                path=decision.path,
                decision="redirect",
                state=decision.state.value,
                status_code=decision.status_code,
                target=decision.target,
                locale=decision.locale.code if decision.locale else None,
                legacy_route=decision.legacy.name if decision.legacy else None,
            )
        return cls(
            path=decision.path,
            decision="serve",
            state=decision.state.value,
            locale=decision.locale.code if decision.locale else None,
            remainder=decision.remainder,
        )


class StaticPathEntry(BaseModel):
    params: dict[str, str]
    props: dict[str, str]

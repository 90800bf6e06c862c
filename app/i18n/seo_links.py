"""
SEO link metadata

Canonical URL, hreflang alternates and Open-Graph locale tags for a page
served in one locale. Recomputed on every render from the base URL, the
page's remainder path and the locale; nothing is stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.i18n.locale import Locale, LocaleRegistry, registry
from app.i18n.path_mapper import add_prefix

X_DEFAULT = "x-default"


@dataclass(frozen=True)
class SEOLinks:
    canonical: str
    alternates: list[tuple[str, str]] = field(default_factory=list)
    og_locale: str = ""
    og_alternates: list[str] = field(default_factory=list)

    def to_link_tags(self) -> list[dict[str, str]]:
        """Attribute dicts for the <link> and <meta> tags a template emits in <head>."""
        tags: list[dict[str, str]] = [{"tag": "link", "rel": "canonical", "href": self.canonical}]
        for hreflang, href in self.alternates:
            tags.append({"tag": "link", "rel": "alternate", "hreflang": hreflang, "href": href})
        tags.append({"tag": "meta", "property": "og:locale", "content": self.og_locale})
        for og_alternate in self.og_alternates:
            tags.append({"tag": "meta", "property": "og:locale:alternate", "content": og_alternate})
        return tags


def localized_url(base_url: str, remainder: str, locale: Locale, locales: LocaleRegistry = registry) -> str:
    """base URL + locale prefix + remainder; a "/" remainder adds nothing."""
    return f"{base_url.rstrip('/')}{add_prefix(remainder or '/', locale, locales)}"


def og_locale_for(locale: Locale) -> str:
    return locale.og_locale


def og_alternates_for(locale: Locale, locales: LocaleRegistry = registry) -> list[str]:
    return [og_locale_for(other) for other in locales if other.code != locale.code]


def hreflang_links(base_url: str, remainder: str, locales: LocaleRegistry = registry) -> list[tuple[str, str]]:
    """One (hreflang, url) pair per supported locale, then x-default."""
    links = [(locale.code, localized_url(base_url, remainder, locale, locales)) for locale in locales]
    links.append((X_DEFAULT, localized_url(base_url, remainder, locales.default_locale, locales)))
    return links


def build(
    base_url: str,
    remainder: str,
    current_locale: Locale | str,
    locales: LocaleRegistry = registry,
) -> SEOLinks:
    """
    Build the link metadata for a page.

    `remainder` is the page path without its locale prefix (a prefixed path
    is also accepted; the prefix is replaced).
    """
    locale = locales.get(current_locale) if isinstance(current_locale, str) else current_locale
    if locale is None:
        locale = locales.default_locale

    return SEOLinks(
        canonical=localized_url(base_url, remainder, locale, locales),
        alternates=hreflang_links(base_url, remainder, locales),
        og_locale=og_locale_for(locale),
        og_alternates=og_alternates_for(locale, locales),
    )

"""
SEO Service

Generates sitemap.xml (every localized page, with hreflang alternates) and
robots.txt. Both are pass-through paths, so the locale router never
redirects them.
"""

import logging
from xml.etree.ElementTree import Element, SubElement, tostring  # nosec B405

from app.i18n.locale import LocaleRegistry, registry
from app.i18n.seo_links import hreflang_links, localized_url
from app.i18n.static_paths import STATIC_ROUTES

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"

# (priority, changefreq) per logical page; anything else gets the default
PAGE_HINTS: dict[str, tuple[str, str]] = {
    "/": ("1.0", "daily"),
    "/posts": ("0.9", "daily"),
    "/tags": ("0.6", "weekly"),
    "/archives": ("0.6", "weekly"),
    "/about": ("0.8", "monthly"),
}
DEFAULT_HINT = ("0.5", "monthly")

# Pages that should never be listed for crawlers
UNLISTED_PATHS = frozenset({"/404", "/search"})


class SEOService:
    """Service for generating SEO-related documents."""

    def __init__(self, base_url: str, locales: LocaleRegistry = registry):
        self.base_url = base_url.rstrip("/")
        self.locales = locales

    def generate_sitemap(self, paths: tuple[str, ...] | list[str] = STATIC_ROUTES) -> str:
        """
        Generate the XML sitemap.

        Every page is listed once per locale, and each entry carries the full
        set of xhtml:link alternates (one per locale plus x-default).

        Returns:
            XML string in sitemap format
        """
        urlset = Element("urlset")
        urlset.set("xmlns", SITEMAP_NS)
        urlset.set("xmlns:xhtml", XHTML_NS)

        count = 0
        for path in paths:
            if path in UNLISTED_PATHS:
                continue
            priority, changefreq = PAGE_HINTS.get(path, DEFAULT_HINT)
            alternates = hreflang_links(self.base_url, path, self.locales)
            for locale in self.locales:
                self._add_url(
                    urlset,
                    localized_url(self.base_url, path, locale, self.locales),
                    alternates=alternates,
                    priority=priority,
                    changefreq=changefreq,
                )
                count += 1

        xml_declaration = '<?xml version="1.0" encoding="UTF-8"?>\n'
        xml_content = tostring(urlset, encoding="unicode")

        logger.info(f"Generated sitemap with {count} localized URLs")
        return xml_declaration + xml_content

    def generate_robots_txt(self) -> str:
        """
        Generate robots.txt content.

        Returns:
            robots.txt content string
        """
        lines = [
            "User-agent: *",
            "Allow: /",
            "",
            "# Disallow API paths",
            "Disallow: /api/",
            "",
            "# Sitemap",
            f"Sitemap: {self.base_url}/sitemap.xml",
        ]
        return "\n".join(lines)

    def _add_url(
        self,
        parent: Element,
        loc_url: str,
        alternates: list[tuple[str, str]],
        changefreq: str = "weekly",
        priority: str = "0.5",
    ) -> None:
        """Add a URL entry with its hreflang alternates to the sitemap."""
        url = SubElement(parent, "url")

        loc = SubElement(url, "loc")
        loc.text = loc_url

        for hreflang, href in alternates:
            link = SubElement(url, "xhtml:link")
            link.set("rel", "alternate")
            link.set("hreflang", hreflang)
            link.set("href", href)

        changefreq_elem = SubElement(url, "changefreq")
        changefreq_elem.text = changefreq

        priority_elem = SubElement(url, "priority")
        priority_elem.text = priority

"""
SEO link metadata tests
"""

import pytest

from app.i18n.redirects import RouteState, Serve, plan
from app.i18n.seo_links import X_DEFAULT, build, hreflang_links, localized_url, og_alternates_for

BASE = "https://blog.example.com"


class TestCanonical:
    def test_post_canonical(self, en):
        links = build(BASE, "/posts/my-slug", en)
        assert links.canonical == f"{BASE}/en/posts/my-slug"

    def test_root_remainder_collapses(self, pt):
        assert build(BASE, "/", pt).canonical == f"{BASE}/pt"

    def test_trailing_slash_on_base_url(self, pt):
        assert build(f"{BASE}/", "/about", pt).canonical == f"{BASE}/pt/about"

    def test_prefixed_path_is_accepted(self, en):
        assert build(BASE, "/pt/about", en).canonical == f"{BASE}/en/about"

    def test_locale_by_code(self):
        assert build(BASE, "/about", "pt").canonical == f"{BASE}/pt/about"

    def test_unknown_locale_code_uses_default(self):
        assert build(BASE, "/about", "fr").canonical == f"{BASE}/en/about"

    def test_localized_url(self, pt):
        assert localized_url(BASE, "/tags/python", pt) == f"{BASE}/pt/tags/python"


class TestAlternates:
    def test_post_alternates(self, en):
        links = build(BASE, "/posts/my-slug", en)
        assert ("pt", f"{BASE}/pt/posts/my-slug") in links.alternates
        assert ("en", f"{BASE}/en/posts/my-slug") in links.alternates
        assert (X_DEFAULT, f"{BASE}/en/posts/my-slug") in links.alternates

    @pytest.mark.parametrize("remainder", ["/", "/posts", "/posts/my-slug", "/tags/python/page/2"])
    @pytest.mark.parametrize("code", ["en", "pt"])
    def test_one_per_locale_plus_x_default(self, locales, remainder, code):
        alternates = build(BASE, remainder, code).alternates
        hreflangs = [hreflang for hreflang, _ in alternates]
        assert sorted(hreflangs) == sorted(locales.codes() + [X_DEFAULT])
        assert hreflangs.count(X_DEFAULT) == 1

    def test_alternates_do_not_depend_on_current_locale(self, en, pt):
        assert build(BASE, "/about", en).alternates == build(BASE, "/about", pt).alternates

    @pytest.mark.parametrize("remainder", ["/", "/posts", "/posts/my-slug", "/archives"])
    def test_alternates_resolve_back_to_their_locale(self, locales, remainder):
        for hreflang, href in hreflang_links(BASE, remainder):
            expected = locales.default_locale if hreflang == X_DEFAULT else locales.get(hreflang)
            decision = plan(href[len(BASE) :], stored_locale="pt", browser_locales=["pt-BR"])
            assert isinstance(decision, Serve)
            assert decision.state == RouteState.ALREADY_LOCALIZED
            assert decision.locale == expected
            assert decision.remainder == remainder


class TestOpenGraph:
    def test_og_locale(self, en, pt):
        assert build(BASE, "/", en).og_locale == "en_US"
        assert build(BASE, "/", pt).og_locale == "pt_BR"

    def test_og_alternates_are_the_other_locales(self, en, pt):
        assert og_alternates_for(en) == ["pt_BR"]
        assert build(BASE, "/", pt).og_alternates == ["en_US"]


class TestLinkTags:
    def test_tags_cover_every_link(self, en):
        tags = build(BASE, "/about", en).to_link_tags()
        assert tags[0] == {"tag": "link", "rel": "canonical", "href": f"{BASE}/en/about"}
        hreflangs = [tag["hreflang"] for tag in tags if tag.get("rel") == "alternate"]
        assert hreflangs == ["en", "pt", "x-default"]
        assert {"tag": "meta", "property": "og:locale", "content": "en_US"} in tags
        assert {"tag": "meta", "property": "og:locale:alternate", "content": "pt_BR"} in tags

"""
Localized page route tests
"""

from datetime import datetime, timezone

import pytest

from app.i18n.formatting import format_date


class TestLocalizedPages:
    def test_home(self, client, base_url):
        data = client.get("/pt").json()
        assert data["page"] == "home"
        assert data["locale"] == "pt"
        assert data["html_lang"] == "pt-BR"
        assert data["remainder"] == "/"
        assert data["seo"]["canonical"] == f"{base_url}/pt"
        assert data["alternative_language"] == "en"

    def test_home_with_trailing_slash(self, client):
        response = client.get("/en/")
        assert response.status_code == 200
        assert response.json()["page"] == "home"

    @pytest.mark.parametrize(
        "path,page,params",
        [
            ("/en/posts", "post_list", {}),
            ("/en/posts/my-slug", "post", {"slug": "my-slug"}),
            ("/pt/posts/page/2", "post_list_page", {"page": 2}),
            ("/pt/tags/python", "tag", {"tag": "python"}),
            ("/en/tags/python/page/4", "tag_page", {"tag": "python", "page": 4}),
            ("/en/archives", "archives", {}),
            ("/pt/search", "search", {}),
            ("/pt/about", "about", {}),
            ("/en/404", "not_found", {}),
        ],
    )
    def test_logical_pages(self, client, path, page, params):
        response = client.get(path)
        assert response.status_code == 200
        data = response.json()
        assert data["page"] == page
        assert data["params"] == params
        assert data["path"] == path

    def test_trailing_slash_is_not_canonical(self, client, base_url):
        data = client.get("/en/posts/").json()
        assert data["remainder"] == "/posts"
        assert data["seo"]["canonical"] == f"{base_url}/en/posts"

    def test_seo_block(self, client, base_url):
        seo = client.get("/en/posts/my-slug").json()["seo"]
        assert seo["canonical"] == f"{base_url}/en/posts/my-slug"
        assert {"hreflang": "pt", "href": f"{base_url}/pt/posts/my-slug"} in seo["alternates"]
        assert {"hreflang": "x-default", "href": f"{base_url}/en/posts/my-slug"} in seo["alternates"]
        assert seo["og_locale"] == "en_US"
        assert seo["og_alternates"] == ["pt_BR"]

    def test_language_switcher(self, client):
        languages = client.get("/pt/tags/python").json()["languages"]
        assert [entry["url"] for entry in languages] == ["/en/tags/python", "/pt/tags/python"]


    def test_encoded_slug_is_one_param(self, client, base_url):
        data = client.get("/pt/tags/a%2Fb").json()
        assert data["page"] == "tag"
        assert data["params"] == {"tag": "a/b"}
        assert data["remainder"] == "/tags/a%2Fb"
        assert data["seo"]["canonical"] == f"{base_url}/pt/tags/a%2Fb"


class TestPageFormatting:
    def test_english_rules(self, client):
        formatting = client.get("/en/posts").json()["formatting"]
        assert formatting["babel_locale"] == "en_US"
        assert formatting["timezone"] == "America/Sao_Paulo"
        assert formatting["date_pattern"] == "MMMM d, y"
        assert formatting["number_pattern"] == "#,##0.##"
        assert formatting["today"]

    def test_portuguese_rules(self, client):
        formatting = client.get("/pt").json()["formatting"]
        assert formatting["babel_locale"] == "pt_BR"
        assert " de " in formatting["today"]

    def test_today_uses_site_timezone(self, client, monkeypatch, en):
        import app.routes.pages as pages

        monkeypatch.setattr(pages.settings, "timezone", "Pacific/Kiritimati")
        formatting = client.get("/en/about").json()["formatting"]
        assert formatting["timezone"] == "Pacific/Kiritimati"
        assert formatting["today"] == format_date(datetime.now(timezone.utc), en, tz="Pacific/Kiritimati")


class TestPageNotFound:
    def test_unknown_page_under_locale(self, client):
        response = client.get("/en/does/not/exist")
        assert response.status_code == 404
        error = response.json()["error"]
        assert error["error_code"] == "PAGE_NOT_FOUND"
        assert error["details"] == {"path": "/does/not/exist", "locale": "en"}
        assert error["path"] == "/en/does/not/exist"

    def test_unmatched_unprefixed_path(self, client):
        response = client.get("/contact")
        assert response.status_code == 404
        assert response.json()["error"]["error_code"] == "PAGE_NOT_FOUND"

    def test_unknown_api_path(self, client):
        response = client.get("/api/v1/nope")
        assert response.status_code == 404

"""
Settings and application factory tests
"""

import pytest

from app.config import Settings, settings
from app.exceptions import LegacyRouteConfigError, LocaleConfigError
from app.i18n.legacy import ExactRoute


class TestSettings:
    def test_default_language_is_en(self):
        assert Settings.model_fields["default_language"].default == "en"

    def test_supported_languages(self):
        assert settings.supported_languages == ["en", "pt"]

    def test_preference_cookie_name(self):
        assert settings.preference_cookie_name == "preferredLanguage"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_LANGUAGE", "pt")
        monkeypatch.setenv("BASE_URL", "https://staging.example.com")
        overridden = Settings()
        assert overridden.default_language == "pt"
        assert overridden.base_url == "https://staging.example.com"


class TestCreateApp:
    def test_registry_from_settings(self, app):
        assert app.state.locales.codes() == ["en", "pt"]
        assert app.state.locales.default_locale.code == "en"

    def test_default_from_settings_changes_root_redirect(self, monkeypatch):
        from fastapi.testclient import TestClient

        from app.main import create_app

        monkeypatch.setattr(settings, "default_language", "pt")
        client = TestClient(create_app(), follow_redirects=False)
        assert client.get("/").headers["location"] == "http://testserver/pt"

    def test_unknown_language_in_settings_is_fatal(self, monkeypatch):
        from app.main import create_app

        monkeypatch.setattr(settings, "supported_languages", ["en", "de"])
        with pytest.raises(LocaleConfigError):
            create_app()

    def test_overlapping_legacy_routes_are_fatal(self, monkeypatch):
        import app.main as main_module

        broken = (ExactRoute("about", "/about"), ExactRoute("about_copy", "/about"))
        monkeypatch.setattr(main_module, "LEGACY_ROUTES", broken)
        with pytest.raises(LegacyRouteConfigError):
            main_module.create_app()

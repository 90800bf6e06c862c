"""
Pytest configuration and fixtures for the locale routing tests
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from app.config import settings  # noqa: E402
from app.i18n.locale import registry  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture
def locales():
    """The site's locale registry (en, pt; default en)."""
    return registry


@pytest.fixture
def en(locales):
    return locales.get("en")


@pytest.fixture
def pt(locales):
    return locales.get("pt")


@pytest.fixture
def base_url():
    return settings.base_url.rstrip("/")


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    """Test client that reports redirects instead of following them."""
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client

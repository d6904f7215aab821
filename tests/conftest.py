"""
Pytest fixtures for Chirpy tests. Each app gets its own HitCounter and a temporary static root.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def static_root(tmp_path):
    """Temporary file root with an index page and one asset."""
    root = tmp_path / "site"
    root.mkdir()
    (root / "index.html").write_text("<html><body>Welcome to Chirpy</body></html>", encoding="utf-8")
    assets = root / "assets"
    assets.mkdir()
    (assets / "logo.txt").write_text("chirpy-logo", encoding="utf-8")
    return root


@pytest.fixture
def settings(static_root):
    from chirpy.config import Settings

    return Settings(filepath_root=static_root)


@pytest.fixture
def hit_counter():
    from chirpy.metrics import HitCounter

    return HitCounter()


@pytest.fixture
def app(settings, hit_counter):
    from chirpy.api_server.server import create_app

    return create_app(settings, hit_counter)


@pytest.fixture
def client(app):
    """FastAPI TestClient over a fresh app."""
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture
def clean_settings_cache():
    """Clear the cached settings before and after a test that changes env."""
    from chirpy.config.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

"""Shared pytest fixtures for the trigex.moe site tests."""

import pytest
from fastapi.testclient import TestClient

from config import Settings
from trigex_site.api.main import create_app
from trigex_site.services import PageRenderer


@pytest.fixture
def site_settings() -> Settings:
    """Settings with defaults only, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def client(site_settings: Settings) -> TestClient:
    """A client against a freshly built app."""
    return TestClient(create_app(site_settings))


@pytest.fixture
def renderer() -> PageRenderer:
    return PageRenderer()

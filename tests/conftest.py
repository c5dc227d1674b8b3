"""Pytest fixtures for docbridge tests."""

import pytest

from docbridge.config import Config


def _make_config(**overrides) -> Config:
    """Build a Config independent of any .env file."""
    values = {
        "HOSTNAME": "atrium.io",
        "DOMAIN": "",
        "HTTP_PORT": 8080,
        "TLS_MODE": "No",
        "ONLYOFFICE_TITLE": "Atrium Office",
        "ONLYOFFICE_SERVER": "https://office.atrium.io/",
        "ONLYOFFICE_JWT_SECRET": "",
        "EDITOR_LANG": "fr-FR",
        "EDIT_EXTENSIONS": "docx,xlsx,pptx",
        "SERVICE_WORKER_VERSION": None,
        "PDFJS_VERSION": "2.12.313",
        "LOG_LEVEL": "INFO",
    }
    values.update(overrides)
    return Config(_env_file=None, **values)


@pytest.fixture
def secret() -> str:
    """Shared secret long enough for HS256."""
    return "0123456789abcdef0123456789abcdef"


@pytest.fixture
def make_config():
    """Factory for Config instances with test defaults."""
    return _make_config


@pytest.fixture
def settings() -> Config:
    """Fully configured editor settings without JWT signing."""
    return _make_config()


@pytest.fixture
def signed_settings(secret: str) -> Config:
    """Fully configured editor settings with JWT signing."""
    return _make_config(ONLYOFFICE_JWT_SECRET=secret)

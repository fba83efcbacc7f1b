"""
Pytest configuration and shared fixtures.

Every API test runs against a freshly built application so that changes
made by one test never leak into another.  The ``client`` fixture is
parametrized over both store backends; the SQLite database lives in the
test's ``tmp_path``.
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from city_info_api.app.core.config import Settings
from city_info_api.app.main import create_app
from city_info_api.app.services.mail_service import MailService


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "api: tests that go through the HTTP layer")


def make_settings(backend: str, tmp_path) -> Settings:
    return Settings(
        store_backend=backend,
        database_url=str(tmp_path / "city_info.db"),
        mail_backend="local",
    )


@pytest.fixture(params=["memory", "sqlite"])
def backend(request) -> str:
    return request.param


@pytest.fixture
def app(backend, tmp_path):
    return create_app(make_settings(backend, tmp_path))


@pytest.fixture
def memory_app(tmp_path):
    return create_app(make_settings("memory", tmp_path))


@pytest.fixture
def mail_service(app):
    """Replace the mail service of ``app`` with a mock."""
    mock = Mock(spec=MailService)
    app.state.mail_service = mock
    return mock


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def memory_client(memory_app):
    with TestClient(memory_app) as test_client:
        yield test_client


@pytest.fixture
def anyio_backend():
    return "asyncio"

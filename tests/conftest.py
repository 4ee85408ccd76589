"""
Shared fixtures for the proxy tests.

Provides test settings, an application wired to mocked ports,
and an in-memory ZIP builder. No network access anywhere.
"""

import io
import zipfile
from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from lokalise_proxy.core.config import Settings
from lokalise_proxy.domain.lokalise.ports import (
    DocumentConversionPort,
    LokaliseApiPort,
    PreviewArchivePort,
)
from lokalise_proxy.main import create_app

TEST_ORIGIN = "https://app.lokalise.test"


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at fake upstreams."""
    return Settings(
        allow_origin=TEST_ORIGIN,
        lokalise_api_url="https://lokalise.test/api2",
        conversion_service_url="https://convert.test/convert-zip-from-url",
        upstream_timeout_seconds=5.0,
    )


@pytest.fixture
def app(settings: Settings):
    """A fresh application instance for each test."""
    application = create_app(settings)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def lokalise_api() -> AsyncMock:
    """Mocked Lokalise API port."""
    return AsyncMock(spec=LokaliseApiPort)


@pytest.fixture
def archive_port() -> AsyncMock:
    """Mocked preview archive port."""
    return AsyncMock(spec=PreviewArchivePort)


@pytest.fixture
def conversion_port() -> AsyncMock:
    """Mocked document conversion port."""
    return AsyncMock(spec=DocumentConversionPort)


@pytest.fixture
def build_zip() -> Callable[[list[tuple[str, bytes]]], bytes]:
    """Return a helper building a ZIP archive from (name, content) pairs."""

    def _build(entries: list[tuple[str, bytes]]) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
            for name, content in entries:
                archive.writestr(name, content)
        return buffer.getvalue()

    return _build

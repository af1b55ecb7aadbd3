"""Global test configuration and fixtures for the Quota Image API."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from aiohttp.test_utils import TestServer
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.core.constants import SESSION_COOKIE_NAME
from src.api.core.dependencies import get_image_client, get_unkey_client
from src.core.config import AppConfig
from src.modules.images.openai_client import OpenAIImageClient
from src.modules.keys.unkey_client import CreatedKey, KeyVerification, UnkeyClient
from src.utils.settings.app import AppSettings
from src.utils.settings.openai_images import OpenAISettings
from src.utils.settings.unkey import UnkeySettings

from tests.utils.constants import (
    TEST_BASE_URL,
    TEST_KEY_ID,
    TEST_IMAGE_URL,
    TEST_SESSION_KEY,
)
from tests.utils.fake_services import FakeService


@pytest.fixture
def unkey_settings() -> UnkeySettings:
    return UnkeySettings(
        _env_file=None,
        UNKEY_ROOT_KEY="unkey_root_test",
        UNKEY_API_ID="api_test",
        UNKEY_BASE_URL="http://unkey.invalid",
    )


@pytest.fixture
def openai_settings() -> OpenAISettings:
    return OpenAISettings(
        _env_file=None,
        OPENAI_API_KEY="sk-test",
        OPENAI_BASE_URL="http://openai.invalid",
    )


@pytest.fixture
def test_config(unkey_settings, openai_settings) -> AppConfig:
    return AppConfig(
        app=AppSettings(_env_file=None, HTTP_TIMEOUT_SECONDS=5),
        unkey=unkey_settings,
        openai=openai_settings,
    )


@pytest.fixture
def key_client() -> AsyncMock:
    """Stub key service: creates keys and reports them valid by default."""
    client = AsyncMock(spec=UnkeyClient)
    client.create_key.return_value = CreatedKey(key=TEST_SESSION_KEY, key_id=TEST_KEY_ID)
    client.verify_key.return_value = KeyVerification(
        valid=True, remaining=9, code="VALID"
    )
    return client


@pytest.fixture
def image_client() -> AsyncMock:
    """Stub image service returning a fixed URL."""
    client = AsyncMock(spec=OpenAIImageClient)
    client.generate.return_value = TEST_IMAGE_URL
    return client


@pytest_asyncio.fixture
async def app(test_config, key_client, image_client) -> AsyncGenerator[FastAPI, None]:
    """Create FastAPI application with stubbed external services."""
    from src.main import create_app

    application = create_app(test_config)
    application.dependency_overrides[get_unkey_client] = lambda: key_client
    application.dependency_overrides[get_image_client] = lambda: image_client

    async with LifespanManager(application):
        yield application

    application.dependency_overrides.clear()


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client without a session cookie."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=TEST_BASE_URL,
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def session_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that already holds a session cookie."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=TEST_BASE_URL,
        cookies={SESSION_COOKIE_NAME: TEST_SESSION_KEY},
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def fake_service() -> AsyncGenerator[tuple[FakeService, str], None]:
    """Start a fake upstream API and yield it with its base URL."""
    service = FakeService()
    server = TestServer(service.build_app())
    await server.start_server()
    try:
        yield service, f"http://{server.host}:{server.port}"
    finally:
        await server.close()

"""Session endpoint tests: /authorize and /me."""

from dataclasses import replace

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from fastapi import status

from src.api.core.constants import SESSION_COOKIE_NAME
from src.api.core.dependencies import get_image_client, get_unkey_client
from src.api.core.messages import MessageCode
from src.api.core.exceptions.base import UpstreamServiceError
from src.main import create_app
from tests.utils.constants import TEST_BASE_URL, TEST_KEY_ID, TEST_SESSION_KEY
from tests.utils.assertions import assert_error_response, assert_success_response


@pytest.mark.asyncio
async def test_authorize_sets_http_only_session_cookie(
    app, public_client: AsyncClient, key_client
):
    """A successful /authorize stores the new key in an HTTP-only cookie."""
    response = await public_client.post("/authorize")

    data = assert_success_response(response, MessageCode.API_KEY_CREATED)
    assert data == {"key_id": TEST_KEY_ID}

    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith(f"{SESSION_COOKIE_NAME}={TEST_SESSION_KEY}")
    assert "httponly" in set_cookie.lower()
    assert "samesite=lax" in set_cookie.lower()
    assert response.cookies.get(SESSION_COOKIE_NAME) == TEST_SESSION_KEY
    assert key_client.create_key.await_count == 1


@pytest.mark.asyncio
async def test_authorize_does_not_expose_key_in_body(app, public_client: AsyncClient):
    response = await public_client.post("/authorize")

    assert response.status_code == status.HTTP_200_OK
    assert TEST_SESSION_KEY not in response.text


@pytest.mark.asyncio
async def test_authorize_key_service_failure(
    app, public_client: AsyncClient, key_client
):
    """Key creation failures surface as a server error without a cookie."""
    key_client.create_key.side_effect = UpstreamServiceError("unkey", "boom")

    response = await public_client.post("/authorize")

    body = assert_error_response(
        response, MessageCode.EXTERNAL_SERVICE_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    assert body["details"]["service"] == "unkey"
    assert "set-cookie" not in response.headers
    assert key_client.create_key.await_count == 1


@pytest.mark.asyncio
async def test_authorize_get_not_allowed(app, public_client: AsyncClient):
    response = await public_client.get("/authorize")

    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


@pytest.mark.asyncio
async def test_me_without_session(
    app, public_client: AsyncClient, key_client, image_client
):
    """/me without a cookie reports no session and contacts no service."""
    response = await public_client.get("/me")

    body = assert_error_response(
        response, MessageCode.NO_SESSION, status.HTTP_401_UNAUTHORIZED
    )
    assert body["details"] == {"authorized": False}
    assert key_client.create_key.await_count == 0
    assert key_client.verify_key.await_count == 0
    assert image_client.generate.await_count == 0


@pytest.mark.asyncio
async def test_me_with_empty_cookie(app, public_client: AsyncClient):
    public_client.cookies.set(SESSION_COOKIE_NAME, "")

    response = await public_client.get("/me")

    assert_error_response(response, MessageCode.NO_SESSION, status.HTTP_401_UNAUTHORIZED)


@pytest.mark.asyncio
async def test_me_with_session(app, session_client: AsyncClient, key_client):
    response = await session_client.get("/me")

    data = assert_success_response(response, MessageCode.AUTHORIZED)
    assert data == {"authorized": True}
    assert key_client.verify_key.await_count == 0


@pytest.mark.asyncio
async def test_authorize_then_me(app, public_client: AsyncClient):
    """The cookie set by /authorize is accepted by /me."""
    authorize_response = await public_client.post("/authorize")
    assert authorize_response.status_code == status.HTTP_200_OK

    response = await public_client.get("/me")

    data = assert_success_response(response, MessageCode.AUTHORIZED)
    assert data["authorized"] is True


@pytest.mark.asyncio
async def test_authorize_secure_cookie(test_config, key_client, image_client):
    """COOKIE_SECURE marks the session cookie as HTTPS-only."""
    secure_config = replace(
        test_config, app=test_config.app.model_copy(update={"COOKIE_SECURE": True})
    )
    application = create_app(secure_config)
    application.dependency_overrides[get_unkey_client] = lambda: key_client
    application.dependency_overrides[get_image_client] = lambda: image_client

    async with LifespanManager(application), AsyncClient(
        transport=ASGITransport(app=application), base_url=TEST_BASE_URL
    ) as client:
        response = await client.post("/authorize")

    assert response.status_code == status.HTTP_200_OK
    set_cookie = response.headers["set-cookie"].lower()
    assert "secure" in set_cookie
    assert "httponly" in set_cookie

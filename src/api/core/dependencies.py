from typing import Annotated

from fastapi import Depends, Request

from src.api.core.constants import SESSION_COOKIE_NAME
from src.core.config import AppConfig
from src.modules.auth.flow import AuthorizationFlow
from src.modules.images.openai_client import OpenAIImageClient
from src.modules.keys.unkey_client import UnkeyClient


def get_config(request: Request) -> AppConfig:
    """Get the immutable startup configuration from app state."""
    return request.app.state.config


def get_unkey_client(request: Request) -> UnkeyClient:
    """Get the key service client built at startup."""
    return request.app.state.unkey_client


def get_image_client(request: Request) -> OpenAIImageClient:
    """Get the image generation client built at startup."""
    return request.app.state.image_client


def get_session_key(request: Request) -> str | None:
    """Read the API key from the session cookie; empty values count as absent."""
    return request.cookies.get(SESSION_COOKIE_NAME) or None


def get_authorization_flow(
    key_client: Annotated[UnkeyClient, Depends(get_unkey_client)],
    image_client: Annotated[OpenAIImageClient, Depends(get_image_client)],
) -> AuthorizationFlow:
    """Get the authorization flow wired to the current clients."""
    return AuthorizationFlow(key_client, image_client)


AppConfigDep = Annotated[AppConfig, Depends(get_config)]
SessionKeyDep = Annotated[str | None, Depends(get_session_key)]
AuthorizationFlowDep = Annotated[AuthorizationFlow, Depends(get_authorization_flow)]

from fastapi import APIRouter, Response

from src.api.auth.schemas import (
    AuthorizeData,
    AuthorizeResponse,
    MeResponse,
    SessionStatus,
)
from src.api.core.constants import SESSION_COOKIE_NAME
from src.api.core.dependencies import AppConfigDep, AuthorizationFlowDep, SessionKeyDep
from src.api.core.messages import APIResponse, MessageCode

router = APIRouter(tags=["session"])


@router.post("/authorize", response_model=AuthorizeResponse)
async def authorize(
    response: Response,
    flow: AuthorizationFlowDep,
    config: AppConfigDep,
) -> AuthorizeResponse:
    """Create a usage-limited API key and store it in an HTTP-only cookie."""
    created = await flow.authorize()
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=created.key,
        httponly=True,
        secure=config.app.COOKIE_SECURE,
        samesite="lax",
    )
    return APIResponse.success(
        message_code=MessageCode.API_KEY_CREATED,
        data=AuthorizeData(key_id=created.key_id),
    )


@router.get("/me", response_model=MeResponse)
async def me(session_key: SessionKeyDep, flow: AuthorizationFlowDep) -> MeResponse:
    """Report whether the caller holds a session key."""
    authorized = flow.me(session_key)
    return APIResponse.success(
        message_code=MessageCode.AUTHORIZED,
        data=SessionStatus(authorized=authorized),
    )

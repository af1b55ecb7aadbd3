"""Session API schemas (combined models/requests)."""

from pydantic import BaseModel
from src.api.core.messages import APIResponse


class AuthorizeData(BaseModel):
    key_id: str


class SessionStatus(BaseModel):
    authorized: bool


AuthorizeResponse = APIResponse[AuthorizeData]
MeResponse = APIResponse[SessionStatus]

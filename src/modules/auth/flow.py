"""Cookie-session authorization flow around the key and image services."""

from dataclasses import dataclass

from fastapi import status

from src.api.core.constants import REJECTED_KEY_CODES
from src.api.core.exceptions.base import QuotaImageException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.modules.images.openai_client import OpenAIImageClient
from src.modules.keys.unkey_client import CreatedKey, UnkeyClient


@dataclass(frozen=True)
class GeneratedImage:
    url: str
    remaining: int | None = None


class AuthorizationFlow(BaseService):
    """Mints session keys and gates image generation on key verification.

    The flow holds no state of its own. Quota lives in the key service, and
    the session key travels in a cookie that the endpoint layer reads and
    writes.
    """

    def __init__(self, key_client: UnkeyClient, image_client: OpenAIImageClient):
        super().__init__()
        self.key_client = key_client
        self.image_client = image_client

    async def authorize(self) -> CreatedKey:
        created = await self.key_client.create_key()
        self.logger.info("Session authorized", key_id=created.key_id)
        return created

    def me(self, session_key: str | None) -> bool:
        """Report whether a session key is present. No remote calls."""
        if not session_key:
            raise QuotaImageException(
                MessageCode.NO_SESSION,
                status.HTTP_401_UNAUTHORIZED,
                details={"authorized": False},
            )
        return True

    async def generate_image(
        self, session_key: str | None, prompt: str
    ) -> GeneratedImage:
        if not session_key:
            raise QuotaImageException(
                MessageCode.UNAUTHORIZED, status.HTTP_401_UNAUTHORIZED
            )

        verification = await self.key_client.verify_key(session_key)
        if not verification.valid:
            self.logger.warning(
                "Key rejected by key service",
                code=verification.code,
                remaining=verification.remaining,
            )
            if verification.code in REJECTED_KEY_CODES:
                raise QuotaImageException(
                    MessageCode.INVALID_KEY,
                    status.HTTP_401_UNAUTHORIZED,
                    details={"code": verification.code},
                )
            raise QuotaImageException(
                MessageCode.QUOTA_EXCEEDED,
                status.HTTP_403_FORBIDDEN,
                details={"code": verification.code},
            )

        url = await self.image_client.generate(prompt)
        self.logger.info("Image generated", remaining=verification.remaining)
        return GeneratedImage(url=url, remaining=verification.remaining)

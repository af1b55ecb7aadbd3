"""Client for the OpenAI image generation API."""

from openai import APIError, AsyncOpenAI

from src.api.core.constants import IMAGE_RESPONSE_FORMAT, IMAGES_PER_REQUEST
from src.api.core.exceptions.base import UpstreamServiceError
from src.utils.logger import get_logger
from src.utils.settings.openai_images import OpenAISettings

logger = get_logger(__name__)

SERVICE_NAME = "openai"


class OpenAIImageClient:
    """Submits a prompt and returns the URL of the generated image.

    The SDK's own retry loop is disabled; a failed generation is reported
    once and never resubmitted.
    """

    def __init__(self, settings: OpenAISettings, timeout: int):
        self.base_url = f"{settings.OPENAI_BASE_URL.rstrip('/')}/v1"
        self.size = settings.OPENAI_IMAGE_SIZE
        self.client = AsyncOpenAI(
            api_key=settings.OPENAI_API_KEY,
            base_url=self.base_url,
            timeout=float(timeout),
            max_retries=0,
        )

    async def generate(self, prompt: str) -> str:
        try:
            response = await self.client.images.generate(
                prompt=prompt,
                n=IMAGES_PER_REQUEST,
                size=self.size,
                response_format=IMAGE_RESPONSE_FORMAT,
            )
        except APIError as e:
            logger.error("OpenAI image request failed", error=str(e))
            raise UpstreamServiceError(
                SERVICE_NAME, f"OpenAI API error: {e.message}"
            ) from e

        if not response.data:
            raise UpstreamServiceError(SERVICE_NAME, "No image returned by OpenAI")

        url = response.data[0].url
        if not url:
            raise UpstreamServiceError(SERVICE_NAME, "OpenAI image has no URL")
        return url

    async def close(self) -> None:
        await self.client.close()

from fastapi import APIRouter, Response

from src.api.core.constants import QUOTA_REMAINING_HEADER
from src.api.core.dependencies import AuthorizationFlowDep, SessionKeyDep
from src.api.images.schemas import GenerateImageRequest, GenerateImageResponse

router = APIRouter(tags=["images"])


@router.post("/generate-image", response_model=GenerateImageResponse)
async def generate_image(
    payload: GenerateImageRequest,
    response: Response,
    session_key: SessionKeyDep,
    flow: AuthorizationFlowDep,
) -> GenerateImageResponse:
    """Spend one quota unit of the session key and generate an image."""
    image = await flow.generate_image(session_key, payload.prompt)
    if image.remaining is not None:
        response.headers[QUOTA_REMAINING_HEADER] = str(image.remaining)
    return GenerateImageResponse(url=image.url)

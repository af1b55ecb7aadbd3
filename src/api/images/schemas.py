"""Image generation API schemas."""

from pydantic import BaseModel, Field


class GenerateImageRequest(BaseModel):
    model_config = {"str_strip_whitespace": True}

    prompt: str = Field(..., min_length=1)


class GenerateImageResponse(BaseModel):
    url: str

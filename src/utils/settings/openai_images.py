"""OpenAI image generation settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenAISettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True
    )

    OPENAI_API_KEY: str = Field(min_length=1)
    OPENAI_BASE_URL: str = "https://api.openai.com"
    OPENAI_IMAGE_SIZE: str = "1024x1024"

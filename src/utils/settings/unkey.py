"""Unkey key-management service settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class UnkeySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True
    )

    UNKEY_ROOT_KEY: str = Field(min_length=1)
    UNKEY_API_ID: str = Field(min_length=1)
    UNKEY_BASE_URL: str = "https://api.unkey.dev"

    # Policy applied to every key minted by /authorize
    UNKEY_KEY_REMAINING: int = Field(default=10, ge=1)
    UNKEY_REFILL_AMOUNT: int = Field(default=10, ge=1)
    UNKEY_REFILL_INTERVAL: Literal["daily", "monthly"] = "daily"
    UNKEY_OWNER_ID: str = "superuser"

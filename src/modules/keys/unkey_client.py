"""Client for the Unkey key-management API."""

from dataclasses import dataclass
from typing import Any

from src.api.core.exceptions.base import UpstreamServiceError
from src.utils.http_client import post_json
from src.utils.settings.unkey import UnkeySettings

SERVICE_NAME = "unkey"


@dataclass(frozen=True)
class CreatedKey:
    key: str
    key_id: str


@dataclass(frozen=True)
class KeyVerification:
    valid: bool
    remaining: int | None = None
    code: str | None = None


class UnkeyClient:
    """Creates and verifies usage-limited API keys.

    Verification is also the metering step: every successful ``verify_key``
    call decrements the key's remaining uses on the Unkey side.
    """

    def __init__(self, settings: UnkeySettings, timeout: int):
        self.base_url = settings.UNKEY_BASE_URL.rstrip("/")
        self.root_key = settings.UNKEY_ROOT_KEY
        self.api_id = settings.UNKEY_API_ID
        self.owner_id = settings.UNKEY_OWNER_ID
        self.remaining = settings.UNKEY_KEY_REMAINING
        self.refill_amount = settings.UNKEY_REFILL_AMOUNT
        self.refill_interval = settings.UNKEY_REFILL_INTERVAL
        self.timeout = timeout

    async def create_key(self) -> CreatedKey:
        """Mint a new key under the configured API."""
        payload = {
            "apiId": self.api_id,
            "ownerId": self.owner_id,
            "remaining": self.remaining,
            "refill": {
                "interval": self.refill_interval,
                "amount": self.refill_amount,
            },
        }
        data = await self._post("/v1/keys.createKey", payload)

        key = data.get("key")
        key_id = data.get("keyId")
        if not isinstance(key, str) or not key or not isinstance(key_id, str):
            raise UpstreamServiceError(SERVICE_NAME, "createKey response missing key")
        return CreatedKey(key=key, key_id=key_id)

    async def verify_key(self, key: str) -> KeyVerification:
        """Verify a key, consuming one of its remaining uses when valid."""
        data = await self._post("/v1/keys.verifyKey", {"key": key, "apiId": self.api_id})

        valid = data.get("valid")
        if not isinstance(valid, bool):
            raise UpstreamServiceError(SERVICE_NAME, "verifyKey response missing valid")

        remaining = data.get("remaining")
        return KeyVerification(
            valid=valid,
            remaining=remaining if isinstance(remaining, int) else None,
            code=data.get("code"),
        )

    async def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        return await post_json(
            SERVICE_NAME,
            f"{self.base_url}{path}",
            payload,
            bearer_token=self.root_key,
            timeout=self.timeout,
        )

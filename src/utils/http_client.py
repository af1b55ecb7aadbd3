"""Shared JSON-over-HTTP helper for the external service clients."""

import asyncio
from typing import Any

import aiohttp

from src.api.core.exceptions.base import UpstreamServiceError
from src.utils.logger import get_logger

logger = get_logger(__name__)


async def post_json(
    service: str,
    url: str,
    payload: dict[str, Any],
    bearer_token: str,
    timeout: int,
) -> dict[str, Any]:
    """POST a JSON body and return the decoded JSON object.

    Any transport failure, non-2xx status or non-object body raises
    :class:`UpstreamServiceError`. Nothing is retried.
    """
    headers = {"Authorization": f"Bearer {bearer_token}"}

    async with aiohttp.ClientSession() as session:
        try:
            async with session.post(
                url,
                json=payload,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as response:
                if response.status >= 400:
                    body = await response.text()
                    logger.error(
                        f"{service} request failed",
                        url=url,
                        status_code=response.status,
                        body=body[:500],
                    )
                    raise UpstreamServiceError(
                        service, f"{service} responded with HTTP {response.status}"
                    )
                data = await response.json(content_type=None)
        except aiohttp.ClientError as e:
            logger.error(f"{service} request failed: {e}", url=url)
            raise UpstreamServiceError(service, f"{service} unavailable") from e
        except asyncio.TimeoutError as e:
            logger.error(f"{service} request timed out", url=url, timeout=timeout)
            raise UpstreamServiceError(service, f"{service} timed out") from e
        except ValueError as e:
            logger.error(f"{service} returned invalid JSON: {e}", url=url)
            raise UpstreamServiceError(service, f"{service} returned invalid JSON") from e

    if not isinstance(data, dict):
        raise UpstreamServiceError(service, f"{service} returned an unexpected body")
    return data

"""Client for the external URL shortening service.

Contract: ``POST {endpoint}`` with JSON ``{"url": ...}`` and an ``x-api-key``
header; a 200 response carries ``{"shortened_url": ...}``.
"""

import logging

import httpx

from file_relay.errors import DownstreamError
from file_relay.models.relay import RelayStage

logger = logging.getLogger(__name__)


class URLShortener:
    """Shorten presigned URLs. Failures are never papered over with the long URL."""

    def __init__(self, http: httpx.AsyncClient, endpoint: str, api_key: str) -> None:
        self._http = http
        self._endpoint = endpoint
        self._api_key = api_key

    async def shorten(self, url: str) -> str:
        """Return the shortened form of ``url``.

        Raises:
            DownstreamError(SHORTEN): transport error, non-200 status, or a
                response without a usable ``shortened_url``.
        """
        if not self._endpoint:
            raise DownstreamError(RelayStage.SHORTEN, "URL shortener endpoint is not configured")

        try:
            response = await self._http.post(
                self._endpoint,
                json={"url": url},
                headers={"x-api-key": self._api_key},
            )
        except httpx.HTTPError as exc:
            raise DownstreamError(RelayStage.SHORTEN, f"unable to send request: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            raise DownstreamError(
                RelayStage.SHORTEN, f"request failed with status code {response.status_code}"
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise DownstreamError(RelayStage.SHORTEN, "response body is not JSON") from exc

        short_url = body.get("shortened_url") if isinstance(body, dict) else None
        if not isinstance(short_url, str) or not short_url:
            raise DownstreamError(RelayStage.SHORTEN, "response has no shortened_url")

        logger.info("Shortened presigned URL to %s", short_url)
        return short_url

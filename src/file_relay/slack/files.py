"""Slack file access: authenticated download and deletion.

Downloads use the bot token because ``url_private_download`` only serves the
file to an authenticated workspace member. Deletion needs the user token:
a bot may only delete files it uploaded itself.
"""

import logging

import aiohttp
import httpx
from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from file_relay.errors import DownstreamError
from file_relay.models.relay import RelayStage

logger = logging.getLogger(__name__)

HTML_SUFFIXES = (".html", ".htm")


class SlackFiles:
    """Fetch and delete Slack-hosted files."""

    def __init__(self, http: httpx.AsyncClient, bot_token: str, user_client: AsyncWebClient) -> None:
        self._http = http
        self._bot_token = bot_token
        self._user_client = user_client

    async def download(self, url: str | None, name: str = "") -> bytes:
        """Download a file's bytes from its ``url_private_download``.

        ``name`` is the file's own name; an HTML response only counts as the
        sign-in page when the file is not itself an HTML document.

        Raises:
            DownstreamError(DOWNLOAD): no URL (Slack sends stubs without one),
                transport error, non-2xx status, an HTML sign-in page instead of
                the file, or an empty body.
        """
        if not url:
            raise DownstreamError(RelayStage.DOWNLOAD, "Slack file has no download URL")

        try:
            response = await self._http.get(
                url,
                headers={"Authorization": f"Bearer {self._bot_token}"},
                follow_redirects=True,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise DownstreamError(RelayStage.DOWNLOAD, str(exc)) from exc

        # Slack answers 200 with its sign-in page when the token lacks files:read
        is_html = response.headers.get("content-type", "").startswith("text/html")
        if is_html and not name.lower().endswith(HTML_SUFFIXES):
            raise DownstreamError(
                RelayStage.DOWNLOAD, "Slack returned an HTML page; check the bot token scopes"
            )

        if not response.content:
            raise DownstreamError(RelayStage.DOWNLOAD, "Slack returned an empty file")

        logger.info("Downloaded %d bytes from Slack", len(response.content))
        return response.content

    async def delete(self, file_id: str) -> None:
        """Delete a file from Slack with the user token.

        Raises:
            DownstreamError(DELETE): the files.delete call failed.
        """
        try:
            await self._user_client.files_delete(file=file_id)
        except SlackApiError as exc:
            error_code = exc.response.get("error", "") if exc.response else ""
            raise DownstreamError(RelayStage.DELETE, error_code or str(exc)) from exc
        except (SlackClientError, aiohttp.ClientError, TimeoutError) as exc:
            raise DownstreamError(RelayStage.DELETE, str(exc)) from exc

        logger.info("Deleted Slack file %s", file_id)

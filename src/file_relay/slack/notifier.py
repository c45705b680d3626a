"""Slack thread replies for relay outcomes.

All methods are fire-and-forget: they catch and log errors but never raise,
and never retry. A failed notification must not stop the remaining files.
"""

import logging

import aiohttp
from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from file_relay.models.relay import RelayStage

logger = logging.getLogger(__name__)

# User-facing texts, in the workspace's language
MSG_GENERIC_ERROR = "エラーが発生しました。処理を完了できませんでした。"
MSG_SHORTEN_ERROR = "URLの短縮中にエラーが発生しました。処理を完了できませんでした。"
MSG_DELETE_ERROR = "Slackからファイルを削除できませんでした。"


class Notifier:
    """Post replies into the thread of the mention that triggered the relay."""

    def __init__(self, client: AsyncWebClient) -> None:
        self._client = client

    async def notify(self, channel_id: str, timestamp: str, text: str) -> bool:
        """Post ``text`` as a thread reply.

        Args:
            channel_id: Slack channel ID.
            timestamp: Original message timestamp (thread parent).
            text: Message body (mrkdwn).

        Returns:
            True if Slack accepted the message, False if the post failed.
        """
        try:
            await self._client.chat_postMessage(
                channel=channel_id,
                thread_ts=timestamp,
                text=text,
            )
        except SlackApiError as exc:
            error_code = exc.response.get("error", "") if exc.response else ""
            logger.warning(
                "Failed to post to %s (thread %s): %s",
                channel_id,
                timestamp,
                error_code,
                exc_info=True,
            )
            return False
        except (SlackClientError, aiohttp.ClientError, TimeoutError):
            logger.warning(
                "Failed to reach Slack posting to %s (thread %s)",
                channel_id,
                timestamp,
                exc_info=True,
            )
            return False
        return True

    async def notify_success(
        self, channel_id: str, timestamp: str, filename: str, short_url: str
    ) -> bool:
        """Post the short download link for ``filename``."""
        return await self.notify(channel_id, timestamp, f"`{filename}`: {short_url}")

    async def notify_rejected(
        self, channel_id: str, timestamp: str, filename: str, reason: str
    ) -> bool:
        """Post why ``filename`` was not accepted."""
        return await self.notify(channel_id, timestamp, f"`{filename}`: {reason}")

    async def notify_error(
        self, channel_id: str, timestamp: str, filename: str, stage: RelayStage
    ) -> bool:
        """Post a failure message worded for the stage that failed."""
        if stage == RelayStage.SHORTEN:
            message = MSG_SHORTEN_ERROR
        elif stage == RelayStage.DELETE:
            message = MSG_DELETE_ERROR
        else:
            message = MSG_GENERIC_ERROR
        return await self.notify(channel_id, timestamp, f"`{filename}`: {message}")

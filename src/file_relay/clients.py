"""Downstream client handles shared by all requests.

``RelayClients`` bundles everything the pipeline talks to. It is built once
per process by ``get_relay_clients`` (also the FastAPI dependency), and tests
swap in fakes through ``app.dependency_overrides``.
"""

from dataclasses import dataclass

import httpx
from slack_sdk.web.async_client import AsyncWebClient

from file_relay.config import get_settings
from file_relay.shortener import URLShortener
from file_relay.slack.files import SlackFiles
from file_relay.slack.notifier import Notifier
from file_relay.storage import ObjectStore, build_s3_client


@dataclass(frozen=True)
class RelayClients:
    """Stateless collaborators of the relay pipeline."""

    files: SlackFiles
    store: ObjectStore
    shortener: URLShortener
    notifier: Notifier
    http: httpx.AsyncClient | None = None  # Owned transport, closed on shutdown


_clients: RelayClients | None = None


async def get_relay_clients() -> RelayClients:
    """Return the cached client bundle, creating it on first call.

    Two Slack clients are built: the bot token posts replies and downloads
    files, the user token deletes them.
    """
    global _clients
    if _clients is None:
        settings = get_settings()
        http = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout_seconds))
        bot_client = AsyncWebClient(
            token=settings.slack_bot_token, timeout=int(settings.http_timeout_seconds)
        )
        user_client = AsyncWebClient(
            token=settings.slack_user_token, timeout=int(settings.http_timeout_seconds)
        )
        _clients = RelayClients(
            files=SlackFiles(http, settings.slack_bot_token, user_client),
            store=ObjectStore(
                build_s3_client(settings),
                settings.s3_bucket,
                settings.s3_presign_expiry_seconds,
            ),
            shortener=URLShortener(
                http, settings.url_shortener_url, settings.url_shortener_api_key
            ),
            notifier=Notifier(bot_client),
            http=http,
        )
    return _clients


async def close_relay_clients() -> None:
    """Close the shared HTTP transport and drop the cached bundle."""
    global _clients
    if _clients is not None and _clients.http is not None:
        await _clients.http.aclose()
    _clients = None


def reset_clients() -> None:
    """Reset the cached bundle without closing it. Used for testing."""
    global _clients
    _clients = None

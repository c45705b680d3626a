"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from file_relay.app import app
from file_relay.clients import RelayClients
from file_relay.slack.notifier import Notifier


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def slack_web_client() -> AsyncMock:
    """AsyncMock standing in for the bot AsyncWebClient used by the Notifier."""
    return AsyncMock()


@pytest.fixture
def fake_clients(slack_web_client: AsyncMock) -> RelayClients:
    """RelayClients with mocked collaborators and a real Notifier over a mocked Slack client.

    Defaults describe the happy path: download returns zip bytes, presign and
    shorten return fixed URLs.
    """
    files = MagicMock()
    files.download = AsyncMock(return_value=b"PK\x03\x04 zip bytes")
    files.delete = AsyncMock(return_value=None)

    store = MagicMock()
    store.put = AsyncMock(return_value=None)
    store.presign = AsyncMock(
        return_value="https://s3.ap-northeast-1.amazonaws.com/bucket/report.zip?X-Amz-Signature=abc"
    )

    shortener = MagicMock()
    shortener.shorten = AsyncMock(return_value="https://short.example/abc")

    return RelayClients(
        files=files,
        store=store,
        shortener=shortener,
        notifier=Notifier(slack_web_client),
    )

"""Slack webhook router with signature verification."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from file_relay.clients import RelayClients, get_relay_clients
from file_relay.slack.handlers import handle_slack_event
from file_relay.slack.retry import should_skip
from file_relay.slack.verification import verify_slack_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["slack"])


@router.post("/slack/events")
async def slack_events(
    request: Request,
    raw_body: bytes = Depends(verify_slack_request),
    clients: RelayClients = Depends(get_relay_clients),
) -> PlainTextResponse:
    """Receive Slack webhook events.

    Slack retries (X-Slack-Retry-Num header) are acknowledged immediately
    to prevent duplicate uploads and replies.
    """
    logger.debug("Slack request headers: %s", dict(request.headers))

    # Dedup: if Slack is retrying, acknowledge immediately
    if should_skip(request.headers):
        logger.info("Skipping Slack retry %s", request.headers.get("X-Slack-Retry-Num"))
        return PlainTextResponse("No need retry")

    return await handle_slack_event(raw_body, clients)

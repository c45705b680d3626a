"""Slack event dispatch: decoded event -> HTTP response."""

import logging

from fastapi.responses import PlainTextResponse

from file_relay.clients import RelayClients
from file_relay.errors import ParseError
from file_relay.models.relay import Uploaded
from file_relay.models.slack import CallbackEvent, HandshakeEvent, UnrecognizedEvent
from file_relay.relay import relay
from file_relay.slack.decoder import decode

logger = logging.getLogger(__name__)


async def handle_slack_event(raw_body: bytes, clients: RelayClients) -> PlainTextResponse:
    """Decode a verified body and dispatch it.

    - malformed payload: 500, nothing processed
    - url_verification: 200 with the challenge echoed as plain text
    - app_mention callback: relay every file, then 200 "OK"; per-file
      failures are reported in the thread, not in the status code
    - event_callback of another kind: 200 "OK", ignored
    - any other payload type: 400
    """
    try:
        event = decode(raw_body)
    except ParseError as exc:
        logger.error("Could not parse Slack payload: %s", exc)
        return PlainTextResponse("Internal Server Error", status_code=500)

    if isinstance(event, HandshakeEvent):
        logger.info("Answering Slack url_verification")
        return PlainTextResponse(event.challenge)

    if isinstance(event, CallbackEvent):
        logger.info(
            "Dispatching %d file(s) from %s in channel %s",
            len(event.files),
            event.kind,
            event.channel,
        )
        results = await relay(event, clients)
        failed = [r for r in results if not isinstance(r, Uploaded)]
        if failed:
            logger.warning(
                "%d of %d file(s) not relayed for message %s",
                len(failed),
                len(results),
                event.ts,
            )
        return PlainTextResponse("OK")

    if isinstance(event, UnrecognizedEvent) and event.kind is not None:
        return PlainTextResponse("OK")

    return PlainTextResponse("Bad Request", status_code=400)

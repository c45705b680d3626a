"""Decode a raw Slack Events API body into a VerifiedEvent.

Malformed structure raises ParseError. Well-formed payloads of types this
service does not handle decode to UnrecognizedEvent so the caller can skip
them quietly.
"""

import json
import logging

from pydantic import BaseModel, ValidationError

from file_relay.errors import ParseError
from file_relay.models.slack import (
    CallbackEvent,
    FileRef,
    HandshakeEvent,
    UnrecognizedEvent,
    VerifiedEvent,
)

logger = logging.getLogger(__name__)

URL_VERIFICATION = "url_verification"
EVENT_CALLBACK = "event_callback"
APP_MENTION = "app_mention"


class _FilePayload(BaseModel):
    id: str
    name: str = ""
    # Missing on stubs (file_access: "check_file_info"); fails that file only
    url_private_download: str | None = None


class _AppMentionPayload(BaseModel):
    type: str
    channel: str
    ts: str
    files: list[_FilePayload] = []


def decode(raw_body: bytes | str) -> VerifiedEvent:
    """Parse a verified request body.

    Returns:
        HandshakeEvent for url_verification, CallbackEvent for an app_mention
        event_callback, UnrecognizedEvent for anything else well-formed.

    Raises:
        ParseError: body is not a JSON object, lacks a string ``type``, or a
            handshake/app_mention payload is missing required fields.
    """
    try:
        payload = json.loads(raw_body)
    except (ValueError, TypeError) as exc:
        raise ParseError(f"Body is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise ParseError("Body is not a JSON object")

    payload_type = payload.get("type")
    if not isinstance(payload_type, str):
        raise ParseError("Payload has no string 'type'")

    if payload_type == URL_VERIFICATION:
        challenge = payload.get("challenge")
        if not isinstance(challenge, str):
            raise ParseError("url_verification payload has no string 'challenge'")
        return HandshakeEvent(challenge=challenge)

    if payload_type == EVENT_CALLBACK:
        return _decode_callback(payload.get("event"))

    logger.info("Ignoring payload of type %s", payload_type)
    return UnrecognizedEvent(type=payload_type)


def _decode_callback(event: object) -> VerifiedEvent:
    """Decode the inner ``event`` object of an event_callback."""
    if not isinstance(event, dict):
        raise ParseError("event_callback payload has no 'event' object")

    kind = event.get("type")
    if not isinstance(kind, str):
        raise ParseError("Inner event has no string 'type'")

    if kind != APP_MENTION:
        logger.info("Ignoring inner event kind %s", kind)
        return UnrecognizedEvent(type=EVENT_CALLBACK, kind=kind)

    try:
        mention = _AppMentionPayload.model_validate(event)
    except ValidationError as exc:
        raise ParseError(f"Malformed app_mention event: {exc}") from exc

    return CallbackEvent(
        kind=mention.type,
        channel=mention.channel,
        ts=mention.ts,
        files=tuple(
            FileRef(id=f.id, name=f.name or f.id, url_private_download=f.url_private_download)
            for f in mention.files
        ),
    )

"""Decoded Slack event models.

``VerifiedEvent`` is a closed union decided once by the decoder: callers
dispatch on the concrete class and never re-inspect the raw payload.
"""

from pydantic import BaseModel, ConfigDict


class FileRef(BaseModel):
    """A file attached to a mention. ``binary`` is filled in after download."""

    model_config = ConfigDict(frozen=True)

    id: str  # Slack file ID, e.g. "F0123456789"
    name: str
    url_private_download: str | None = None  # Requires the bot token; absent on file stubs
    binary: bytes | None = None


class HandshakeEvent(BaseModel):
    """Slack url_verification request. ``challenge`` is echoed back verbatim."""

    model_config = ConfigDict(frozen=True)

    challenge: str


class CallbackEvent(BaseModel):
    """An app_mention callback carrying zero or more files."""

    model_config = ConfigDict(frozen=True)

    kind: str  # Inner event type, always "app_mention" today
    channel: str
    ts: str  # Parent message ts for threaded replies
    files: tuple[FileRef, ...] = ()


class UnrecognizedEvent(BaseModel):
    """Well-formed payload of a type or inner kind this service ignores."""

    model_config = ConfigDict(frozen=True)

    type: str
    kind: str | None = None


VerifiedEvent = HandshakeEvent | CallbackEvent | UnrecognizedEvent

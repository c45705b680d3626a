"""Data models for the relay pipeline."""

from file_relay.models.relay import Failed, Rejected, RelayResult, RelayStage, Uploaded
from file_relay.models.slack import (
    CallbackEvent,
    FileRef,
    HandshakeEvent,
    UnrecognizedEvent,
    VerifiedEvent,
)

__all__ = [
    "CallbackEvent",
    "FileRef",
    "HandshakeEvent",
    "UnrecognizedEvent",
    "VerifiedEvent",
    "Failed",
    "Rejected",
    "RelayResult",
    "RelayStage",
    "Uploaded",
]

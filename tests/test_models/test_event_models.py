"""Tests for decoded event and relay result models."""

import pytest
from pydantic import ValidationError

from file_relay.models import (
    CallbackEvent,
    Failed,
    FileRef,
    HandshakeEvent,
    RelayStage,
    Uploaded,
)


def _file() -> FileRef:
    return FileRef(id="F001", name="report.zip", url_private_download="https://files.slack.com/F001")


def test_file_ref_starts_without_binary():
    assert _file().binary is None


def test_file_ref_copy_with_binary_leaves_original():
    """Filling in the bytes produces a new FileRef; the decoded one is untouched."""
    original = _file()
    filled = original.model_copy(update={"binary": b"PK"})

    assert filled.binary == b"PK"
    assert original.binary is None


def test_file_ref_is_frozen():
    with pytest.raises(ValidationError):
        _file().binary = b"PK"


def test_callback_event_defaults_to_no_files():
    event = CallbackEvent(kind="app_mention", channel="C1", ts="1.2")
    assert event.files == ()


def test_handshake_requires_challenge():
    with pytest.raises(ValidationError):
        HandshakeEvent()


def test_relay_stage_values():
    assert RelayStage("shorten") is RelayStage.SHORTEN
    assert Failed(file_id="F1", name="a.zip", stage="upload", cause="x").stage == RelayStage.UPLOAD


def test_uploaded_fields():
    result = Uploaded(file_id="F1", name="a.zip", short_url="https://s/1")
    assert result.short_url == "https://s/1"

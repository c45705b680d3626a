"""Tests for Slack request signature verification."""

import hashlib
import hmac
import time

import pytest

from file_relay.errors import AuthenticationError
from file_relay.slack.verification import header_value, verify_request

SECRET = "test_signing_secret_1234"
BODY = b'{"type":"url_verification","challenge":"abc123"}'


def _headers(body: bytes = BODY, secret: str = SECRET, timestamp: int | None = None) -> dict:
    ts = str(timestamp if timestamp is not None else int(time.time()))
    basestring = f"v0:{ts}:{body.decode()}"
    signature = "v0=" + hmac.new(secret.encode(), basestring.encode(), hashlib.sha256).hexdigest()
    return {"X-Slack-Request-Timestamp": ts, "X-Slack-Signature": signature}


def test_valid_signature_passes():
    verify_request(_headers(), BODY, SECRET)


def test_valid_signature_with_str_body():
    verify_request(_headers(), BODY.decode(), SECRET)


def test_lowercase_header_names_accepted():
    """API Gateway style lowercased header dicts are supported."""
    headers = {k.lower(): v for k, v in _headers().items()}
    verify_request(headers, BODY, SECRET)


def test_wrong_secret_fails():
    with pytest.raises(AuthenticationError):
        verify_request(_headers(secret="other"), BODY, SECRET)


def test_tampered_body_fails():
    with pytest.raises(AuthenticationError):
        verify_request(_headers(), BODY + b" ", SECRET)


def test_stale_timestamp_fails():
    old = int(time.time()) - 60 * 6
    with pytest.raises(AuthenticationError):
        verify_request(_headers(timestamp=old), BODY, SECRET)


@pytest.mark.parametrize("missing", ["X-Slack-Request-Timestamp", "X-Slack-Signature"])
def test_missing_header_fails(missing: str):
    headers = _headers()
    del headers[missing]
    with pytest.raises(AuthenticationError):
        verify_request(headers, BODY, SECRET)


def test_non_numeric_timestamp_fails():
    headers = _headers()
    headers["X-Slack-Request-Timestamp"] = "yesterday"
    with pytest.raises(AuthenticationError):
        verify_request(headers, BODY, SECRET)


def test_empty_secret_fails():
    with pytest.raises(AuthenticationError):
        verify_request(_headers(secret=""), BODY, "")


def test_non_utf8_body_fails():
    with pytest.raises(AuthenticationError):
        verify_request(_headers(), b"\xff\xfe", SECRET)


def test_header_value_is_case_insensitive():
    assert header_value({"x-slack-retry-num": "1"}, "X-Slack-Retry-Num") == "1"
    assert header_value({}, "X-Slack-Retry-Num") == ""

"""Slack request signature verification.

``verify_request`` is the plain check; ``verify_slack_request`` wraps it as a
FastAPI dependency. Both run on the raw bytes, before any JSON parsing.
"""

from collections.abc import Mapping

from fastapi import Request
from slack_sdk.signature import SignatureVerifier

from file_relay.config import get_settings
from file_relay.errors import AuthenticationError

SIGNATURE_HEADER = "X-Slack-Signature"
TIMESTAMP_HEADER = "X-Slack-Request-Timestamp"


def header_value(headers: Mapping[str, str], name: str) -> str:
    """Case-insensitive header lookup returning "" when absent.

    Works for Starlette ``Headers`` and for plain dicts (e.g. API Gateway events).
    """
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value or ""
    return ""


def verify_request(headers: Mapping[str, str], body: bytes | str, secret: str) -> None:
    """Check the v0 signature of a Slack request.

    SignatureVerifier computes HMAC-SHA256 over ``v0:{timestamp}:{body}``,
    compares in constant time and rejects timestamps more than five minutes
    from now.

    Raises:
        AuthenticationError: secret unset, headers missing, body not UTF-8,
            stale timestamp, or signature mismatch.
    """
    if not secret:
        raise AuthenticationError("Signing secret is not configured")

    timestamp = header_value(headers, TIMESTAMP_HEADER).strip()
    signature = header_value(headers, SIGNATURE_HEADER).strip()
    if not timestamp or not signature:
        raise AuthenticationError("Missing Slack signature headers")
    if not timestamp.isdigit():
        raise AuthenticationError(f"Malformed request timestamp: {timestamp!r}")

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise AuthenticationError("Request body is not valid UTF-8") from exc

    verifier = SignatureVerifier(signing_secret=secret)
    if not verifier.is_valid(body=body, timestamp=timestamp, signature=signature):
        raise AuthenticationError("Invalid Slack signature")


async def verify_slack_request(request: Request) -> bytes:
    """Verify the Slack signature and return the raw request body.

    Reads the raw body FIRST so verification uses the exact bytes Slack signed.
    Parsing is left to the decoder.

    Raises AuthenticationError if the signature is invalid; the app turns it
    into a plain-text 401.
    """
    settings = get_settings()
    body = await request.body()

    verify_request(request.headers, body, settings.slack_signing_secret)

    return body

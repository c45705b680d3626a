"""Slack ingress: signature verification, retry filtering, decoding, file access and replies.

The webhook router lives in ``file_relay.slack.router`` and is imported by the
app directly.
"""

from file_relay.slack.decoder import decode
from file_relay.slack.files import SlackFiles
from file_relay.slack.notifier import Notifier
from file_relay.slack.retry import should_skip
from file_relay.slack.verification import verify_request, verify_slack_request

__all__ = [
    "decode",
    "Notifier",
    "should_skip",
    "SlackFiles",
    "verify_request",
    "verify_slack_request",
]

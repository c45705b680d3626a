"""Slack retry detection."""

from collections.abc import Mapping

from file_relay.slack.verification import header_value

RETRY_HEADER = "X-Slack-Retry-Num"


def should_skip(headers: Mapping[str, str]) -> bool:
    """Return True if this delivery is a Slack retry of an earlier attempt.

    Slack re-sends an event when the first delivery was not acknowledged within
    three seconds, even if it was processed. Re-running the relay would upload
    and post twice, so retries are acknowledged without processing. Deliveries
    that omit the header are not deduplicated.
    """
    return bool(header_value(headers, RETRY_HEADER).strip())

"""Exception hierarchy for the relay service.

The HTTP layer maps ``AuthenticationError`` to 401 and ``ParseError`` to 500.
``FileValidationError`` and ``DownstreamError`` never leave the pipeline: they
become per-file results and a thread reply.
"""

from file_relay.models.relay import RelayStage


class RelayError(Exception):
    """Base class for all service errors."""


class AuthenticationError(RelayError):
    """The request signature is missing, stale, or does not match."""


class ParseError(RelayError):
    """The request body is not a structurally valid Slack payload."""


class FileValidationError(RelayError):
    """A file violates the naming or archive-type policy.

    ``reason`` is the human-readable text posted back to the thread.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class DownstreamError(RelayError):
    """A collaborator call (Slack, S3, shortener) failed."""

    def __init__(self, stage: RelayStage, cause: str) -> None:
        super().__init__(f"{stage.value}: {cause}")
        self.stage = stage
        self.cause = cause

"""File relay pipeline and filename policy."""

from file_relay.relay.pipeline import relay, relay_file
from file_relay.relay.validation import content_type_for, validate_filename

__all__ = [
    "content_type_for",
    "relay",
    "relay_file",
    "validate_filename",
]

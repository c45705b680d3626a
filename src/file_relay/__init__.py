"""Relay files attached to Slack mentions into S3 and reply with a short download link."""

__version__ = "0.1.0"

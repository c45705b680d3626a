"""Durable storage for relayed files."""

from file_relay.storage.s3 import ObjectStore, build_s3_client

__all__ = ["ObjectStore", "build_s3_client"]

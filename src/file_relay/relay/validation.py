"""Filename policy for relayed files."""

import os
import re

from file_relay.errors import FileValidationError

# Base name without the extension
VALID_BASENAME = re.compile(r"^[A-Za-z0-9_-]+$")

# Accepted archive extensions and the content type stored with each
ARCHIVE_CONTENT_TYPES = {
    ".zip": "application/zip",
}

MSG_INVALID_NAME = "ファイル名は「半角英数字」にしてください。"
MSG_INVALID_TYPE = "ファイルは「zip」形式にしてください。"


def validate_filename(name: str) -> None:
    """Raise FileValidationError unless ``name`` is an ASCII-named zip archive.

    The base name is checked before the extension, so ``bad name!.pdf`` is
    reported for its name.
    """
    base, ext = os.path.splitext(name)
    if not VALID_BASENAME.fullmatch(base):
        raise FileValidationError(MSG_INVALID_NAME)
    if ext.lower() not in ARCHIVE_CONTENT_TYPES:
        raise FileValidationError(MSG_INVALID_TYPE)


def content_type_for(name: str) -> str:
    """Content type for a name that passed validate_filename()."""
    return ARCHIVE_CONTENT_TYPES[os.path.splitext(name)[1].lower()]

"""Per-file relay outcomes."""

from enum import Enum

from pydantic import BaseModel


class RelayStage(str, Enum):
    """Pipeline stage a failure is attributed to."""

    DOWNLOAD = "download"
    DELETE = "delete"
    UPLOAD = "upload"
    PRESIGN = "presign"
    SHORTEN = "shorten"
    NOTIFY = "notify"
    PROCESSING = "processing"  # Unclassified exception


class Uploaded(BaseModel):
    """File stored, linked, shortened and announced."""

    file_id: str
    name: str
    short_url: str


class Rejected(BaseModel):
    """File failed the naming/type policy and was not uploaded."""

    file_id: str
    name: str
    reason: str


class Failed(BaseModel):
    """A downstream call failed at ``stage``."""

    file_id: str
    name: str
    stage: RelayStage
    cause: str


RelayResult = Uploaded | Rejected | Failed

"""
Shared schema pieces.

Timestamps are serialized as ISO-8601 UTC with a Z suffix. SQLite hands back naive
datetimes, which are taken to be UTC already.
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer


def _to_utc_iso(dt: datetime | None) -> str | None:
    if dt is None:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


UTCDatetime = Annotated[datetime, PlainSerializer(_to_utc_iso, return_type=str)]


class ORMModel(BaseModel):
    """Readable from ORM instances and from row mappings alike."""

    model_config = ConfigDict(from_attributes=True)

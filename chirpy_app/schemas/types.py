from datetime import datetime, timezone

from pydantic import AfterValidator
from typing import Annotated


def as_utc(value: datetime) -> datetime:
    """Timestamps are stored in UTC; SQLite returns them without tzinfo."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]

"""Base model class for all records exchanged with collaborators."""

from datetime import date, datetime, timezone
from typing import Any, Optional

import pendulum
from pydantic import BaseModel


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, returning None when it cannot be read."""
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            # Naive datetimes are treated as UTC
            return pendulum.instance(value, tz="UTC")
        return value

    if not isinstance(value, str):
        return None

    try:
        # exact=True keeps bare times from being anchored to today
        parsed = pendulum.parse(value.strip(), exact=True)
    except (ValueError, TypeError):
        return None

    if isinstance(parsed, datetime):
        if parsed.tzinfo is None:
            return pendulum.instance(parsed, tz="UTC")
        return parsed
    if isinstance(parsed, date):
        # Bare dates are midnight UTC
        return pendulum.datetime(parsed.year, parsed.month, parsed.day, tz="UTC")
    # Times and durations carry no date
    return None


class RecordModel(BaseModel):
    """Base model for all plain data records."""

    class Config:
        """Pydantic config."""

        from_attributes = True
        json_encoders = {
            datetime: lambda v: v.astimezone(timezone.utc).isoformat() if v else None,
        }

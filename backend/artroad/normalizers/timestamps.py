from datetime import datetime, timezone
from typing import Optional


def isoformat(value: Optional[datetime]) -> Optional[str]:
    """
    Serialize a timestamp as ISO8601 in UTC.

    SQLite hands back naive datetimes; they were written as UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()

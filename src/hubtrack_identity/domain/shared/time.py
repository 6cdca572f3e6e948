"""UTC clock helpers.

Every timestamp on an account (creation, update, last login) is stored and
compared in UTC.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Return ``dt`` in UTC.

    SQLite hands back naive values, which are read as UTC. Aware values
    from other zones are converted.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)

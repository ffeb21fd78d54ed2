from datetime import datetime, timedelta, timezone


def local_hour(now: datetime, utc_offset_hours: int = 5) -> int:
    """Hour of day at a fixed UTC offset. Naive datetimes are taken as UTC."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (now.astimezone(timezone.utc) + timedelta(hours=utc_offset_hours)).hour


def is_open(
    now: datetime,
    utc_offset_hours: int = 5,
    open_hour: int = 7,
    close_hour: int = 23,
) -> bool:
    """Whether the assistant accepts interaction at `now` (daily local window)."""
    return open_hour <= local_hour(now, utc_offset_hours) < close_hour

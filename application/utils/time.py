from datetime import UTC, datetime, timedelta

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def unix_timestamp_to_datetime(timestamp: int) -> datetime:
    """Converts seconds since the Unix epoch to an aware UTC datetime."""
    return UNIX_EPOCH + timedelta(seconds=timestamp)

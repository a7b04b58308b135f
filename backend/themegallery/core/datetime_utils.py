"""Datetime utilities for consistent timezone handling across the application."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get current UTC time - standardized across the application.

    Returns:
        Current datetime in UTC timezone.
    """
    return datetime.now(timezone.utc)


def epoch_millis(moment: datetime | None = None) -> int:
    """Milliseconds since the Unix epoch, for `moment` or for now.

    Used as the uniqueness suffix of submission branch and file names.
    """
    moment = moment or utc_now()
    return int(moment.timestamp() * 1000)

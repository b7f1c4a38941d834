"""Clock helpers injected into services."""

from datetime import UTC, date, datetime


def utc_today() -> date:
    """Return the current UTC calendar date."""
    return datetime.now(tz=UTC).date()

"""Time utilities for timezone-aware UTC datetimes."""

from datetime import UTC, date, datetime, time


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime for defaults and onupdate hooks."""
    return datetime.now(UTC)


def as_invoice_datetime(value: date | datetime | None) -> datetime:
    """Normalise an invoice date to an aware datetime; missing dates mean now."""
    if value is None:
        return utc_now()
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    return datetime.combine(value, time.min, tzinfo=UTC)

from datetime import UTC, date, datetime, timezone

from backend.app.core.time import as_invoice_datetime, utc_now


def test_utc_now_is_timezone_aware_utc():
    value = utc_now()
    assert value.tzinfo is UTC


def test_invoice_date_from_plain_date_is_midnight_utc():
    value = as_invoice_datetime(date(2024, 3, 5))
    assert value == datetime(2024, 3, 5, tzinfo=UTC)


def test_invoice_date_keeps_aware_datetime_and_fills_naive():
    aware = datetime(2024, 3, 5, 10, 30, tzinfo=timezone.utc)
    assert as_invoice_datetime(aware) is aware
    naive = as_invoice_datetime(datetime(2024, 3, 5, 10, 30))
    assert naive.tzinfo is UTC


def test_missing_invoice_date_defaults_to_now():
    before = utc_now()
    value = as_invoice_datetime(None)
    assert before <= value <= utc_now()

# tests/domain/test_time_remaining.py
from datetime import UTC, date, datetime, timedelta
from types import SimpleNamespace
from zoneinfo import ZoneInfo

import pytest

from fundraising.domain.campaign.value_objects import TimeRemaining

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)


def _remaining(delta: timedelta) -> TimeRemaining:
    return TimeRemaining(NOW + delta, NOW)


def test_five_days_out():
    """Five days left is a warning."""
    tr = _remaining(timedelta(days=5))
    assert tr.days_remaining == 5
    assert tr.time_remaining_text == "5 days remaining"
    assert tr.urgency_level == "warning"
    assert tr.urgency_color == "yellow"


def test_singular_and_plural_units():
    """Text uses the largest whole unit."""
    assert _remaining(timedelta(days=1, hours=3)).time_remaining_text == "1 day remaining"
    assert _remaining(timedelta(hours=1, minutes=5)).time_remaining_text == "1 hour remaining"
    assert _remaining(timedelta(hours=5)).time_remaining_text == "5 hours remaining"
    assert _remaining(timedelta(minutes=1)).time_remaining_text == "1 minute remaining"
    assert _remaining(timedelta(minutes=42)).time_remaining_text == "42 minutes remaining"


def test_differences_truncate_toward_zero():
    """Negative differences truncate toward zero."""
    tr = _remaining(-timedelta(hours=36))
    assert tr.days_remaining == -1
    assert tr.hours_remaining == -36
    assert _remaining(timedelta(hours=47, minutes=59)).days_remaining == 1


def test_expired_is_an_instant_comparison():
    """One second past the end is expired."""
    assert _remaining(-timedelta(seconds=1)).is_expired
    assert not _remaining(timedelta(0)).is_expired
    assert _remaining(-timedelta(hours=2)).time_remaining_text == "Expired"


@pytest.mark.parametrize(
    ("delta", "level", "color"),
    [
        (-timedelta(minutes=1), "expired", "red"),
        (timedelta(hours=20), "critical", "red"),
        (timedelta(days=1, hours=12), "critical", "red"),
        (timedelta(days=2, hours=1), "urgent", "orange"),
        (timedelta(days=3, hours=23), "urgent", "orange"),
        (timedelta(days=7, hours=1), "warning", "yellow"),
        (timedelta(days=8), "normal", "green"),
    ],
)
def test_urgency_bands(delta, level, color):
    """Urgency bands and colors by days left."""
    tr = _remaining(delta)
    assert tr.urgency_level == level
    assert tr.urgency_color == color


def test_expiring_soon_threshold():
    """Expiring soon within the threshold, never after expiry."""
    assert _remaining(timedelta(days=7)).is_expiring_soon()
    assert not _remaining(timedelta(days=8)).is_expiring_soon()
    assert _remaining(timedelta(days=10)).is_expiring_soon(threshold_days=10)
    assert not _remaining(-timedelta(days=1)).is_expiring_soon()


def test_dst_change_does_not_shorten_the_day():
    """Same tzinfo: wall-clock difference across the March DST switch."""
    tz = ZoneInfo("Europe/Amsterdam")
    start = datetime(2025, 3, 29, 12, 0, tzinfo=tz)
    end = datetime(2025, 3, 31, 12, 0, tzinfo=tz)
    assert TimeRemaining(end, start).days_remaining == 2
    assert TimeRemaining(end, start).hours_remaining == 48


def test_mixed_naive_and_aware_rejected():
    """Naive and aware instants cannot be mixed."""
    with pytest.raises(ValueError):
        TimeRemaining(datetime(2025, 6, 10), NOW)


def test_current_date_defaults_to_now():
    """Omitted current date means now."""
    tr = TimeRemaining(datetime.now(UTC) + timedelta(days=3, hours=1))
    assert tr.current_date is not None
    assert tr.days_remaining == 3


def test_from_campaign_mapping_with_iso_string():
    """Reads an ISO end date from a mapping."""
    tr = TimeRemaining.from_campaign({"end_date": "2025-06-11T12:00:00"}, NOW)
    assert tr.days_remaining == 10


def test_from_campaign_object_with_date():
    """Reads a plain date from an object."""
    record = SimpleNamespace(end_date=date(2025, 6, 4))
    assert TimeRemaining.from_campaign(record, NOW).days_remaining == 2


def test_from_campaign_without_deadline_is_never_urgent():
    """No deadline is never urgent."""
    tr = TimeRemaining.from_campaign({"end_date": None}, NOW)
    assert tr.days_remaining > 36000
    assert tr.urgency_level == "normal"
    assert not tr.is_expired

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from liftlog.core.dates import (
    InvalidDateError,
    day_bounds,
    format_date_with_ordinal,
    get_ordinal_suffix,
    parse_selected_date,
    resolve_timezone,
)


@pytest.mark.parametrize(
    "day,expected",
    [
        (1, "st"), (2, "nd"), (3, "rd"), (4, "th"), (10, "th"),
        (11, "th"), (12, "th"), (13, "th"), (14, "th"),
        (21, "st"), (22, "nd"), (23, "rd"), (24, "th"), (30, "th"), (31, "st"),
    ],
)
def test_ordinal_suffix(day, expected):
    assert get_ordinal_suffix(day) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (date(2026, 1, 6), "6th Jan 2026"),
        (date(2026, 2, 1), "1st Feb 2026"),
        (date(2026, 3, 2), "2nd Mar 2026"),
        (date(2026, 4, 3), "3rd Apr 2026"),
        (date(2026, 5, 11), "11th May 2026"),
        (date(2026, 6, 12), "12th Jun 2026"),
        (date(2026, 7, 13), "13th Jul 2026"),
        (date(2026, 8, 21), "21st Aug 2026"),
        (date(2026, 9, 22), "22nd Sep 2026"),
        (date(2026, 12, 31), "31st Dec 2026"),
    ],
)
def test_format_date_with_ordinal(value, expected):
    assert format_date_with_ordinal(value) == expected


def test_format_accepts_datetime():
    assert format_date_with_ordinal(datetime(2026, 1, 6, 8, 30)) == "6th Jan 2026"


def test_parse_selected_date():
    assert parse_selected_date("2026-01-06", ZoneInfo("UTC")) == date(2026, 1, 6)
    assert parse_selected_date(" 2026-01-06 ", ZoneInfo("UTC")) == date(2026, 1, 6)


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_missing_date_defaults_to_today_in_zone(raw):
    tz = ZoneInfo("Pacific/Kiritimati")
    assert parse_selected_date(raw, tz) == datetime.now(tz).date()


@pytest.mark.parametrize(
    "raw", ["2026-1-6", "06-01-2026", "2026/01/06", "2026-13-01", "2026-02-30", "yesterday", "2026-01-06T08:30"]
)
def test_malformed_date_is_rejected(raw):
    with pytest.raises(InvalidDateError):
        parse_selected_date(raw, ZoneInfo("UTC"))


def test_resolve_timezone(identity_settings):
    assert resolve_timezone("Europe/Madrid").key == "Europe/Madrid"
    assert resolve_timezone(None).key == "UTC"
    with pytest.raises(InvalidDateError):
        resolve_timezone("Mars/Olympus_Mons")


@pytest.mark.parametrize("name", ["America", "America/", "Europe", ""])
def test_zone_directory_or_blank_name_is_rejected(identity_settings, monkeypatch, name):
    monkeypatch.setattr(identity_settings, "default_timezone", name)
    with pytest.raises(InvalidDateError):
        resolve_timezone(name)


def test_day_bounds_are_local_to_zone():
    tz = ZoneInfo("America/New_York")
    start, end = day_bounds(date(2026, 1, 6), tz)
    assert start == datetime(2026, 1, 6, 0, 0, 0, tzinfo=tz)
    assert end == datetime(2026, 1, 6, 23, 59, 59, 999000, tzinfo=tz)
    # New York is UTC-5 in January
    assert start.astimezone(timezone.utc) == datetime(2026, 1, 6, 5, 0, tzinfo=timezone.utc)

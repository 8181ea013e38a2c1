"""Calendar Dates: parsing, UTC day boundaries and day-string rendering."""

from datetime import datetime, timedelta, timezone

import pytest

from exercise_tracker.core.dates import (
    end_of_day, format_day, parse_calendar_date, start_of_day,
)

UTC = timezone.utc


# ─── parse_calendar_date ─────────────────────────────────────────

def test_parses_iso_date_as_utc_midnight():
    assert parse_calendar_date("2023-01-01") == datetime(2023, 1, 1, tzinfo=UTC)


def test_parses_naive_datetime_as_utc():
    parsed = parse_calendar_date("2023-01-01T15:30:00")
    assert parsed == datetime(2023, 1, 1, 15, 30, tzinfo=UTC)
    assert parsed.tzinfo == UTC


def test_converts_offset_datetime_to_utc():
    parsed = parse_calendar_date("2023-01-01T23:30:00-02:00")
    assert parsed == datetime(2023, 1, 2, 1, 30, tzinfo=UTC)


def test_parses_zulu_suffix():
    assert parse_calendar_date("2023-06-01T08:00:00Z") == datetime(
        2023, 6, 1, 8, tzinfo=UTC,
    )


def test_parses_its_own_day_string():
    assert parse_calendar_date("Sun Jan 01 2023") == datetime(2023, 1, 1, tzinfo=UTC)


def test_strips_surrounding_whitespace():
    assert parse_calendar_date("  2023-01-01 ") == datetime(2023, 1, 1, tzinfo=UTC)


def test_rejects_garbage():
    assert parse_calendar_date("not-a-date") is None


def test_rejects_impossible_calendar_date():
    assert parse_calendar_date("2023-02-30") is None


def test_rejects_empty_string():
    assert parse_calendar_date("") is None
    assert parse_calendar_date("   ") is None


# ─── day boundaries ──────────────────────────────────────────────

def test_start_of_day_drops_time_of_day():
    moment = datetime(2023, 1, 1, 17, 45, 12, 500, tzinfo=UTC)
    assert start_of_day(moment) == datetime(2023, 1, 1, tzinfo=UTC)


def test_end_of_day_is_last_millisecond():
    moment = datetime(2023, 1, 1, 3, tzinfo=UTC)
    assert end_of_day(moment) == datetime(2023, 1, 1, 23, 59, 59, 999_000, tzinfo=UTC)


def test_boundaries_use_the_utc_day():
    # 22:00 at -05:00 is already the next day in UTC
    moment = datetime(2023, 1, 1, 22, tzinfo=timezone(timedelta(hours=-5)))
    assert start_of_day(moment) == datetime(2023, 1, 2, tzinfo=UTC)
    assert end_of_day(moment).date() == datetime(2023, 1, 2).date()


# ─── format_day ──────────────────────────────────────────────────

def test_format_day_renders_weekday_month_day_year():
    assert format_day(datetime(2023, 1, 1, 12, tzinfo=UTC)) == "Sun Jan 01 2023"


def test_format_day_has_no_time_component():
    assert format_day(datetime(2024, 3, 15, 23, 59, tzinfo=UTC)) == "Fri Mar 15 2024"


# ─── precision, range and locale ─────────────────────────────────

def test_parsed_instants_are_truncated_to_milliseconds():
    parsed = parse_calendar_date("2023-01-01T23:59:59.999500Z")
    assert parsed == datetime(2023, 1, 1, 23, 59, 59, 999_000, tzinfo=UTC)


def test_last_sub_millisecond_of_day_is_within_end_of_day():
    parsed = parse_calendar_date("2023-01-01T23:59:59.999999")
    assert start_of_day(parsed) <= parsed <= end_of_day(parsed)


def test_offset_before_year_one_is_unparseable():
    assert parse_calendar_date("0001-01-01T00:00:00+05:00") is None


def test_offset_past_year_9999_is_unparseable():
    assert parse_calendar_date("9999-12-31T23:00:00-05:00") is None


def test_day_string_with_wrong_weekday_is_unparseable():
    assert parse_calendar_date("Mon Jan 01 2023") is None


def test_day_string_ignores_process_locale():
    import locale

    previous = locale.setlocale(locale.LC_TIME)
    for name in ("de_DE.UTF-8", "fr_FR.UTF-8", "es_ES.UTF-8"):
        try:
            locale.setlocale(locale.LC_TIME, name)
            break
        except locale.Error:
            continue
    else:
        pytest.skip("no non-English locale installed")
    try:
        moment = datetime(2023, 7, 4, tzinfo=UTC)
        assert format_day(moment) == "Tue Jul 04 2023"
        assert parse_calendar_date("Tue Jul 04 2023") == moment
    finally:
        locale.setlocale(locale.LC_TIME, previous)


def test_every_month_round_trips():
    for month in range(1, 13):
        moment = datetime(2024, month, 28, tzinfo=UTC)
        assert parse_calendar_date(format_day(moment)) == moment

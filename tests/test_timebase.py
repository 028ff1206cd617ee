from datetime import date, datetime, timezone

import pytest

from worldtime.core.timebase import (
  Month,
  Timebase,
  UnknownTimezoneError,
  Weekday,
  civil_from_parts,
  day_of_year,
  local_fields,
  resolve_zone,
  utc_offset_label,
  utc_offset_minutes,
)


def test_hour_24_is_midnight():
  civil = civil_from_parts({"hour": "24", "minute": "00", "second": "05"}, 0)
  assert civil.hour == 0
  assert civil.minute == 0
  assert civil.minutes_since_midnight == pytest.approx(5 / 60)


def test_missing_and_malformed_fields_default():
  civil = civil_from_parts({"hour": None, "minute": "", "second": "xx", "weekday": "", "month": "Foo"}, 60)
  assert (civil.hour, civil.minute, civil.second) == (0, 0, 0)
  assert civil.weekday == Weekday.MON
  assert civil.month == Month.JAN
  assert civil.day_of_month == 1
  assert civil.utc_offset_minutes == 60


def test_locale_style_names_are_parsed():
  civil = civil_from_parts({"hour": "07", "minute": "05", "weekday": "Thu", "day": "02", "month": "Jan", "year": "2025"}, 0)
  assert civil.weekday == Weekday.THU
  assert civil.month == Month.JAN
  assert civil.clock_text == "07:05"
  assert civil.date_text == "Thu 02 Jan"


def test_local_fields_auckland():
  instant = datetime(2025, 1, 1, 11, 30, 15, tzinfo=timezone.utc)
  civil = local_fields(instant, "Pacific/Auckland")
  assert (civil.hour, civil.minute, civil.second) == (0, 30, 15)
  assert civil.day_of_month == 2
  assert civil.month == Month.JAN
  assert civil.weekday == Weekday.THU
  assert civil.utc_offset_minutes == 13 * 60


def test_day_of_year_uses_local_date():
  instant = datetime(2024, 12, 31, 20, 0, tzinfo=timezone.utc)
  assert day_of_year(instant, "UTC") == 366
  assert day_of_year(instant, "Pacific/Auckland") == 1
  assert day_of_year(datetime(2025, 1, 1, 3, 0, tzinfo=timezone.utc), "America/Los_Angeles") == 366


def test_naive_instant_is_utc():
  assert day_of_year(datetime(2025, 3, 1, 0, 0), "UTC") == 60


def test_offset_follows_dst():
  winter = datetime(2025, 1, 15, 12, tzinfo=timezone.utc)
  summer = datetime(2025, 7, 15, 12, tzinfo=timezone.utc)
  assert utc_offset_minutes(winter, "America/New_York") == -300
  assert utc_offset_minutes(summer, "America/New_York") == -240
  assert utc_offset_minutes(winter, "Europe/London") == 0
  assert utc_offset_minutes(summer, "Europe/London") == 60
  assert utc_offset_minutes(summer, "Asia/Kolkata") == 330


def test_offset_changes_across_dst_boundary_between_calls():
  # Chicago springs forward at 2025-03-09 08:00 UTC
  before = datetime(2025, 3, 9, 7, 59, tzinfo=timezone.utc)
  after = datetime(2025, 3, 9, 8, 1, tzinfo=timezone.utc)
  assert utc_offset_minutes(before, "America/Chicago") == -360
  assert utc_offset_minutes(after, "America/Chicago") == -300


def test_offset_labels():
  assert utc_offset_label(0) == "UTC"
  assert utc_offset_label(660) == "UTC+11"
  assert utc_offset_label(-300) == "UTC-5"
  assert utc_offset_label(330) == "UTC+5:30"
  assert utc_offset_label(-210) == "UTC-3:30"


def test_unknown_zone_rejected():
  with pytest.raises(UnknownTimezoneError):
    resolve_zone("Mars/Olympus_Mons")


def test_timebase_covers_leap_year():
  days = list(Timebase(2024).days())
  assert len(days) == 366
  assert days[0] == date(2024, 1, 1)
  assert days[-1] == date(2024, 12, 31)


def test_out_of_range_clock_fields_default():
  civil = civil_from_parts({"hour": "25", "minute": "75", "second": "-1"}, 0)
  assert (civil.hour, civil.minute, civil.second) == (0, 0, 0)
  edge = civil_from_parts({"hour": "23", "minute": "59", "second": "59"}, 0)
  assert (edge.hour, edge.minute, edge.second) == (23, 59, 59)

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from enum import IntEnum
from typing import Mapping, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import logging

logger = logging.getLogger(__name__)


class UnknownTimezoneError(ValueError):
  """Raised when a timezone id is not in the IANA database."""


class Weekday(IntEnum):
  MON = 0
  TUE = 1
  WED = 2
  THU = 3
  FRI = 4
  SAT = 5
  SUN = 6

  @property
  def short(self) -> str:
    return self.name.capitalize()


class Month(IntEnum):
  JAN = 1
  FEB = 2
  MAR = 3
  APR = 4
  MAY = 5
  JUN = 6
  JUL = 7
  AUG = 8
  SEP = 9
  OCT = 10
  NOV = 11
  DEC = 12

  @property
  def short(self) -> str:
    return self.name.capitalize()


@dataclass(frozen=True)
class CivilTime:
  hour: int
  minute: int
  second: int
  weekday: Weekday
  day_of_month: int
  month: Month
  year: int
  utc_offset_minutes: int

  @property
  def minutes_since_midnight(self) -> float:
    return self.hour * 60 + self.minute + self.second / 60

  @property
  def clock_text(self) -> str:
    return f"{self.hour:02d}:{self.minute:02d}"

  @property
  def date_text(self) -> str:
    return f"{self.weekday.short} {self.day_of_month:02d} {self.month.short}"

  @property
  def day_key(self) -> tuple[int, int, int]:
    return (self.year, int(self.month), self.day_of_month)


@dataclass
class Timebase:
  year: int

  def days(self):
    d = date(self.year, 1, 1)
    while d.year == self.year:
      yield d
      d += timedelta(days=1)


def resolve_zone(timezone_id: str) -> ZoneInfo:
  try:
    return ZoneInfo(timezone_id)
  except (ZoneInfoNotFoundError, ValueError) as e:
    raise UnknownTimezoneError(f"Unknown IANA timezone: {timezone_id!r}") from e


def _zoned(instant: datetime, timezone_id: str) -> datetime:
  # Naive instants are taken as UTC.
  if instant.tzinfo is None:
    instant = instant.replace(tzinfo=timezone.utc)
  return instant.astimezone(resolve_zone(timezone_id))


def _field(parts: Mapping[str, Union[str, int, None]], key: str, default: int) -> int:
  raw = parts.get(key)
  if raw is None or raw == "":
    logger.debug(f"Civil field {key!r} missing, using {default}")
    return default
  try:
    return int(raw)
  except (TypeError, ValueError):
    logger.debug(f"Civil field {key!r}={raw!r} malformed, using {default}")
    return default


def _in_range(key: str, value: int, upper: int) -> int:
  if 0 <= value <= upper:
    return value
  logger.debug(f"Civil field {key!r}={value} out of range, using 0")
  return 0


def _enum_field(enum_cls, parts, key: str, default):
  raw = parts.get(key)
  if isinstance(raw, str) and raw[:3].upper() in enum_cls.__members__:
    return enum_cls[raw[:3].upper()]
  value = _field(parts, key, int(default))
  try:
    return enum_cls(value)
  except ValueError:
    logger.debug(f"Civil field {key!r}={raw!r} out of range, using {default.name}")
    return default


def civil_from_parts(parts: Mapping[str, Union[str, int, None]], utc_offset_minutes: int) -> CivilTime:
  """Build a CivilTime from loosely typed clock fields.

  Formatters may report local midnight as hour 24; that is folded to 0 here
  before anything downstream sees it. Missing or unparsable fields fall back
  to a safe default instead of failing the whole report.
  """
  hour = _field(parts, "hour", 0)
  if hour == 24:
    hour = 0
  return CivilTime(
    hour=_in_range("hour", hour, 23),
    minute=_in_range("minute", _field(parts, "minute", 0), 59),
    second=_in_range("second", _field(parts, "second", 0), 59),
    weekday=_enum_field(Weekday, parts, "weekday", Weekday.MON),
    day_of_month=_field(parts, "day", 1) or 1,
    month=_enum_field(Month, parts, "month", Month.JAN),
    year=_field(parts, "year", 1970),
    utc_offset_minutes=utc_offset_minutes,
  )


def utc_offset_minutes(instant: datetime, timezone_id: str) -> int:
  offset = _zoned(instant, timezone_id).utcoffset() or timedelta(0)
  return int(offset.total_seconds() // 60)


def local_fields(instant: datetime, timezone_id: str) -> CivilTime:
  local = _zoned(instant, timezone_id)
  parts = {
    "hour": local.hour,
    "minute": local.minute,
    "second": local.second,
    "weekday": local.weekday(),
    "day": local.day,
    "month": local.month,
    "year": local.year,
  }
  return civil_from_parts(parts, utc_offset_minutes(instant, timezone_id))


def day_of_year(instant: datetime, timezone_id: str) -> int:
  # Ordinal of the zone-local calendar date, not the UTC one.
  return _zoned(instant, timezone_id).timetuple().tm_yday


def utc_offset_label(minutes: int) -> str:
  if minutes == 0:
    return "UTC"
  sign = "-" if minutes < 0 else "+"
  hours, mins = divmod(abs(minutes), 60)
  if mins:
    return f"UTC{sign}{hours}:{mins:02d}"
  return f"UTC{sign}{hours}"


def local_noon(d: date, timezone_id: str) -> datetime:
  return datetime(d.year, d.month, d.day, 12, 0, tzinfo=resolve_zone(timezone_id))

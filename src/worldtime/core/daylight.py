from dataclasses import dataclass
from enum import Enum

from .solar import MINUTES_PER_DAY, SolarEvent


class DaylightState(str, Enum):
  PRE_DAWN = "pre_dawn"
  DAY = "day"
  DUSK = "dusk"
  NIGHT = "night"


@dataclass(frozen=True)
class DaylightBands:
  # Widths of the twilight bands around sunrise/sunset, in minutes.
  dawn_minutes: float = 30.0
  dusk_minutes: float = 30.0
  # Fixed daytime window used when the sun does not rise or set.
  fallback_start_hour: float = 6.0
  fallback_end_hour: float = 18.0


def _in_window(now: float, start: float, length: float) -> bool:
  # Membership in [start, start + length) on the 24h circle.
  if length <= 0:
    return False
  if length >= MINUTES_PER_DAY:
    return True
  return (now - start) % MINUTES_PER_DAY < length


def is_fallback_daytime(now_minutes: float, bands: DaylightBands = DaylightBands()) -> bool:
  start = bands.fallback_start_hour * 60
  end = bands.fallback_end_hour * 60
  length = end - start
  if length < 0:
    # window crosses midnight
    length += MINUTES_PER_DAY
  return _in_window(now_minutes, start, length)


def classify(now_minutes: float, sun: SolarEvent, fallback_is_daytime: bool,
             bands: DaylightBands = DaylightBands()) -> DaylightState:
  if not sun.has_events:
    return DaylightState.DAY if fallback_is_daytime else DaylightState.NIGHT

  sunrise = sun.sunrise_minutes
  sunset = sun.sunset_minutes
  now = now_minutes % MINUTES_PER_DAY

  if _in_window(now, sunrise - bands.dawn_minutes, bands.dawn_minutes):
    return DaylightState.PRE_DAWN
  if _in_window(now, sunrise, (sunset - sunrise) % MINUTES_PER_DAY):
    return DaylightState.DAY
  if _in_window(now, sunset, bands.dusk_minutes):
    return DaylightState.DUSK
  return DaylightState.NIGHT

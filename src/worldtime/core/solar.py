from dataclasses import dataclass
from typing import Optional
import math

# Sun's zenith at apparent sunrise/sunset, refraction and solar radius included.
ZENITH_DEG = 90.833
MINUTES_PER_DAY = 1440


@dataclass(frozen=True)
class SolarEvent:
  sunrise_minutes: Optional[int]
  sunset_minutes: Optional[int]

  @property
  def has_events(self) -> bool:
    return self.sunrise_minutes is not None and self.sunset_minutes is not None


def normalize(value: float, modulus: float) -> float:
  # Floored modulo; the result is never negative.
  x = math.fmod(value, modulus)
  if x < 0:
    x += modulus
  return x


def normalize_degrees(value: float) -> float:
  return normalize(value, 360.0)


def normalize_hours(value: float) -> float:
  return normalize(value, 24.0)


def _sin(deg: float) -> float:
  return math.sin(math.radians(deg))


def _cos(deg: float) -> float:
  return math.cos(math.radians(deg))


def _tan(deg: float) -> float:
  return math.tan(math.radians(deg))


def sun_event(day_of_year: int, latitude: float, longitude: float,
              utc_offset_minutes: int, rising: bool) -> Optional[int]:
  """Local clock minute of sunrise (``rising``) or sunset on a given day.

  Low-precision NOAA almanac method. Returns None when the sun never
  crosses the zenith circle that day (polar day or polar night).
  """
  lng_hour = longitude / 15.0
  t = day_of_year + ((6.0 if rising else 18.0) - lng_hour) / 24.0

  # mean anomaly and true longitude
  M = 0.9856 * t - 3.289
  L = normalize_degrees(M + 1.916 * _sin(M) + 0.020 * _sin(2 * M) + 282.634)

  # right ascension, put in the same quadrant as L, then hours
  RA = normalize_degrees(math.degrees(math.atan(0.91764 * _tan(L))))
  RA += math.floor(L / 90.0) * 90.0 - math.floor(RA / 90.0) * 90.0
  RA /= 15.0

  sin_dec = 0.39782 * _sin(L)
  cos_dec = math.cos(math.asin(sin_dec))

  cos_h = (_cos(ZENITH_DEG) - sin_dec * _sin(latitude)) / (cos_dec * _cos(latitude))
  if cos_h > 1 or cos_h < -1:
    return None

  H = math.degrees(math.acos(cos_h))
  if rising:
    H = 360.0 - H
  H /= 15.0

  T = H + RA - 0.06571 * t - 6.622
  ut = normalize_hours(T - lng_hour)
  local_hours = normalize_hours(ut + utc_offset_minutes / 60.0)
  return int(round(local_hours * 60)) % MINUTES_PER_DAY


def estimate_sun_times(day_of_year: int, latitude: float, longitude: float,
                       utc_offset_minutes: int) -> SolarEvent:
  return SolarEvent(
    sunrise_minutes=sun_event(day_of_year, latitude, longitude, utc_offset_minutes, rising=True),
    sunset_minutes=sun_event(day_of_year, latitude, longitude, utc_offset_minutes, rising=False),
  )

from worldtime.core.daylight import DaylightBands, DaylightState, classify, is_fallback_daytime
from worldtime.core.solar import SolarEvent, estimate_sun_times
from worldtime.model.settings import BoardConfig


SUN = SolarEvent(sunrise_minutes=360, sunset_minutes=1080)


def test_band_boundaries():
  assert classify(329, SUN, False) == DaylightState.NIGHT
  assert classify(330, SUN, False) == DaylightState.PRE_DAWN
  assert classify(359.9, SUN, False) == DaylightState.PRE_DAWN
  assert classify(360, SUN, False) == DaylightState.DAY
  assert classify(1079, SUN, False) == DaylightState.DAY
  assert classify(1080, SUN, False) == DaylightState.DUSK
  assert classify(1109, SUN, False) == DaylightState.DUSK
  assert classify(1110, SUN, False) == DaylightState.NIGHT


def test_dawn_band_wraps_past_midnight():
  sun = SolarEvent(sunrise_minutes=10, sunset_minutes=700)
  assert classify(1425, sun, False) == DaylightState.PRE_DAWN
  assert classify(1420, sun, False) == DaylightState.PRE_DAWN
  assert classify(1419, sun, False) == DaylightState.NIGHT
  assert classify(0, sun, False) == DaylightState.PRE_DAWN
  assert classify(10, sun, False) == DaylightState.DAY


def test_dusk_band_wraps_past_midnight():
  sun = SolarEvent(sunrise_minutes=300, sunset_minutes=1430)
  assert classify(1435, sun, True) == DaylightState.DUSK
  assert classify(15, sun, True) == DaylightState.DUSK
  assert classify(20, sun, True) == DaylightState.NIGHT


def test_day_spanning_midnight():
  sun = SolarEvent(sunrise_minutes=1198, sunset_minutes=485)
  assert classify(0, sun, False) == DaylightState.DAY
  assert classify(1300, sun, False) == DaylightState.DAY
  assert classify(500, sun, False) == DaylightState.DUSK
  assert classify(800, sun, False) == DaylightState.NIGHT
  assert classify(1170, sun, False) == DaylightState.PRE_DAWN


def test_configurable_bands():
  wide = DaylightBands(dawn_minutes=120, dusk_minutes=120)
  assert classify(250, SUN, False, wide) == DaylightState.PRE_DAWN
  assert classify(1190, SUN, False, wide) == DaylightState.DUSK
  none = DaylightBands(dawn_minutes=0, dusk_minutes=0)
  assert classify(359, SUN, False, none) == DaylightState.NIGHT
  assert classify(1080, SUN, False, none) == DaylightState.NIGHT


def test_missing_events_use_fallback():
  polar = estimate_sun_times(355, 75.0, 0.0, 0)
  assert classify(720, polar, True) == DaylightState.DAY
  assert classify(720, polar, False) == DaylightState.NIGHT
  half = SolarEvent(sunrise_minutes=None, sunset_minutes=900)
  assert classify(100, half, True) == DaylightState.DAY


def test_fallback_window():
  assert not is_fallback_daytime(359)
  assert is_fallback_daytime(360)
  assert is_fallback_daytime(1079.5)
  assert not is_fallback_daytime(1080)
  night_shift = DaylightBands(fallback_start_hour=20, fallback_end_hour=4)
  assert is_fallback_daytime(23 * 60, night_shift)
  assert is_fallback_daytime(60, night_shift)
  assert not is_fallback_daytime(12 * 60, night_shift)


def test_classify_is_total():
  events = [
    SUN,
    SolarEvent(10, 700),
    SolarEvent(300, 1430),
    SolarEvent(1198, 485),
    SolarEvent(0, 0),
    SolarEvent(None, None),
  ]
  for sun in events:
    for now in range(0, 1440):
      for fallback in (True, False):
        assert classify(now + 0.5, sun, fallback) in set(DaylightState)


def test_full_day_fallback_window():
  always = BoardConfig(fallback_start_hour=0, fallback_end_hour=24).bands()
  assert is_fallback_daytime(0, always)
  assert is_fallback_daytime(720, always)
  assert is_fallback_daytime(1439.9, always)
  polar = SolarEvent(None, None)
  assert classify(720, polar, is_fallback_daytime(720, always), always) == DaylightState.DAY
  never = DaylightBands(fallback_start_hour=12, fallback_end_hour=12)
  assert not is_fallback_daytime(720, never)

"""Board assembly: run the estimation core for every configured location."""
from dataclasses import dataclass
from datetime import datetime
from typing import List
import logging

from ..core.daylight import DaylightState, classify, is_fallback_daytime
from ..core.solar import SolarEvent, estimate_sun_times
from ..core.timebase import CivilTime, day_of_year, local_fields, utc_offset_label
from ..model.locations import Location, LocationRegistry
from ..model.settings import BoardConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardRow:
    """One location's line on the board."""

    name: str
    timezone: str
    civil: CivilTime
    sun: SolarEvent
    state: DaylightState
    icon: str

    @property
    def offset_label(self) -> str:
        return utc_offset_label(self.civil.utc_offset_minutes)


def build_row(location: Location, instant: datetime, config: BoardConfig) -> BoardRow:
    """Compute civil time, sun times and daylight state for one location."""
    civil = local_fields(instant, location.timezone)
    sun = estimate_sun_times(
        day_of_year(instant, location.timezone),
        location.latitude,
        location.longitude,
        civil.utc_offset_minutes,
    )
    bands = config.bands()
    now = civil.minutes_since_midnight
    state = classify(now, sun, is_fallback_daytime(now, bands), bands)
    if not sun.has_events:
        logger.debug(f"{location.name}: no sunrise/sunset today, fallback window gives {state.value}")
    return BoardRow(
        name=location.name,
        timezone=location.timezone,
        civil=civil,
        sun=sun,
        state=state,
        icon=config.icon_for(state),
    )


def build_rows(registry: LocationRegistry, instant: datetime, config: BoardConfig) -> List[BoardRow]:
    """Build rows for every location, sorted by local time of day.

    Locations are independent of each other; the sort is stable so ties keep
    registry order.
    """
    rows = [build_row(loc, instant, config) for loc in registry]
    rows.sort(key=lambda r: r.civil.minutes_since_midnight)
    return rows

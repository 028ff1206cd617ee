"""Year-long sunrise/sunset table per location."""
from typing import Dict, Iterator, Optional, Union

from ..core.solar import estimate_sun_times
from ..core.timebase import Timebase, local_noon, utc_offset_minutes
from ..model.locations import LocationRegistry

SunTableRow = Dict[str, Optional[Union[str, int]]]


def sun_table_rows(registry: LocationRegistry, year: int) -> Iterator[SunTableRow]:
    """Yield one row per location per calendar day of ``year``.

    The UTC offset is taken at local noon, so days with a DST change use the
    offset in force for most of the daylight.
    """
    tb = Timebase(year)
    for loc in registry:
        for d in tb.days():
            offset = utc_offset_minutes(local_noon(d, loc.timezone), loc.timezone)
            doy = d.timetuple().tm_yday
            sun = estimate_sun_times(doy, loc.latitude, loc.longitude, offset)
            yield {
                "location": loc.name,
                "timezone": loc.timezone,
                "date": d.isoformat(),
                "day_of_year": doy,
                "utc_offset_minutes": offset,
                "sunrise_minutes": sun.sunrise_minutes,
                "sunset_minutes": sun.sunset_minutes,
            }

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union
import logging

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.timebase import UnknownTimezoneError, resolve_zone

logger = logging.getLogger(__name__)

DEFAULT_LOCATIONS_FILE = Path(__file__).parent.parent / "config" / "locations.yaml"


class ConfigError(Exception):
  """Configuration could not be loaded or failed validation."""


class Location(BaseModel):
  model_config = ConfigDict(frozen=True)

  name: str = Field(min_length=1)
  timezone: str
  latitude: float = Field(gt=-90, lt=90)
  longitude: float = Field(ge=-180, le=180)

  @field_validator("timezone")
  @classmethod
  def check_timezone(cls, value: str) -> str:
    try:
      resolve_zone(value)
    except UnknownTimezoneError as e:
      raise ValueError(str(e)) from e
    return value


class LocationRegistry:
  """Ordered, validated set of locations keyed by name."""

  def __init__(self, locations: Iterable[Union[Location, dict]]):
    self._locations: List[Location] = []
    seen = set()
    for i, raw in enumerate(locations):
      loc = raw if isinstance(raw, Location) else _parse_location(raw, i)
      if loc.name in seen:
        raise ConfigError(f"Duplicate location name: {loc.name!r}")
      seen.add(loc.name)
      self._locations.append(loc)
    logger.debug(f"Registered {len(self._locations)} locations")

  def __iter__(self) -> Iterator[Location]:
    return iter(self._locations)

  def __len__(self) -> int:
    return len(self._locations)

  def get(self, name: str) -> Optional[Location]:
    for loc in self._locations:
      if loc.name == name:
        return loc
    return None

  def names(self) -> List[str]:
    return [loc.name for loc in self._locations]


def _parse_location(raw, index: int) -> Location:
  if not isinstance(raw, dict):
    raise ConfigError(f"Location #{index} must be a mapping, got {type(raw).__name__}")
  try:
    return Location(**raw)
  except ValidationError as e:
    label = raw.get("name") or f"#{index}"
    raise ConfigError(f"Invalid location {label}: {e}") from e


def load_locations(path: Optional[Union[str, Path]] = None) -> LocationRegistry:
  path = Path(path) if path else DEFAULT_LOCATIONS_FILE
  try:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
  except (OSError, yaml.YAMLError) as e:
    raise ConfigError(f"Cannot read locations from {path}: {e}") from e
  entries = data.get("locations") if isinstance(data, dict) else None
  if not isinstance(entries, list):
    raise ConfigError(f"{path}: expected a 'locations' list")
  return LocationRegistry(entries)

from pathlib import Path
from typing import Dict, Optional, Union
import os

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from ..core.daylight import DaylightBands, DaylightState
from .locations import ConfigError, LocationRegistry, load_locations

DEFAULT_BOARD_FILE = Path(__file__).parent.parent / "config" / "board.yaml"

DEFAULT_ICONS = {
  DaylightState.PRE_DAWN.value: "\U0001F305",
  DaylightState.DAY.value: "☀️",
  DaylightState.DUSK.value: "\U0001F306",
  DaylightState.NIGHT.value: "\U0001F319",
}


class WebhookConfig(BaseModel):
  url: Optional[str] = None
  message_id: Optional[str] = None
  timeout: float = Field(default=10.0, gt=0)
  retries: int = Field(default=3, ge=0)


class BoardConfig(BaseModel):
  title: str = "WORLD TIME"
  dawn_band_minutes: float = Field(default=30.0, ge=0, le=720)
  dusk_band_minutes: float = Field(default=30.0, ge=0, le=720)
  fallback_start_hour: float = Field(default=6.0, ge=0, le=24)
  fallback_end_hour: float = Field(default=18.0, ge=0, le=24)
  # Render PRE_DAWN and DUSK with the DAY icon.
  collapse_twilight: bool = False
  icons: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_ICONS))
  locations_file: Optional[str] = None
  webhook: WebhookConfig = Field(default_factory=WebhookConfig)

  @model_validator(mode="after")
  def merge_default_icons(self):
    unknown = set(self.icons) - set(DEFAULT_ICONS)
    if unknown:
      raise ValueError(f"Unknown daylight states in icons: {sorted(unknown)}")
    self.icons = {**DEFAULT_ICONS, **self.icons}
    return self

  def bands(self) -> DaylightBands:
    return DaylightBands(
      dawn_minutes=self.dawn_band_minutes,
      dusk_minutes=self.dusk_band_minutes,
      fallback_start_hour=self.fallback_start_hour,
      fallback_end_hour=self.fallback_end_hour,
    )

  def icon_for(self, state: DaylightState) -> str:
    if self.collapse_twilight and state in (DaylightState.PRE_DAWN, DaylightState.DUSK):
      state = DaylightState.DAY
    return self.icons[state.value]


def load_board_config(path: Optional[Union[str, Path]] = None) -> BoardConfig:
  path = Path(path) if path else DEFAULT_BOARD_FILE
  try:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
  except (OSError, yaml.YAMLError) as e:
    raise ConfigError(f"Cannot read board config from {path}: {e}") from e
  if not isinstance(data, dict):
    raise ConfigError(f"{path}: expected a mapping at top level")

  # Relative locations files resolve against the config file.
  loc_file = data.get("locations_file")
  if loc_file and not Path(loc_file).is_absolute():
    data["locations_file"] = str(path.parent / loc_file)

  webhook = dict(data.get("webhook") or {})
  if os.environ.get("DISCORD_WEBHOOK_URL"):
    webhook["url"] = os.environ["DISCORD_WEBHOOK_URL"]
  if os.environ.get("DISCORD_MESSAGE_ID"):
    webhook["message_id"] = os.environ["DISCORD_MESSAGE_ID"]
  data["webhook"] = webhook

  try:
    return BoardConfig(**data)
  except ValidationError as e:
    raise ConfigError(f"Invalid board config {path}: {e}") from e


def load_registry(cfg: BoardConfig) -> LocationRegistry:
  return load_locations(cfg.locations_file)

import sys
from datetime import datetime, timezone

import click
from dotenv import load_dotenv

from ..core.timebase import utc_offset_label, utc_offset_minutes
from ..model.locations import ConfigError
from ..model.settings import load_board_config, load_registry


@click.command()
@click.option("--config", type=click.Path(exists=True, dir_okay=False))
def main(config):
  load_dotenv()
  try:
    cfg = load_board_config(config)
    registry = load_registry(cfg)
  except ConfigError as e:
    click.echo(f"ERROR: {e}", err=True)
    sys.exit(1)
  if not len(registry):
    click.echo("ERROR: no locations configured", err=True)
    sys.exit(1)
  now = datetime.now(timezone.utc)
  width = max(len(n) for n in registry.names())
  for loc in registry:
    label = utc_offset_label(utc_offset_minutes(now, loc.timezone))
    click.echo(f"{loc.name.ljust(width)}  {loc.timezone}  {label}  ({loc.latitude:.4f}, {loc.longitude:.4f})")
  if not cfg.webhook.url:
    click.echo("WARNING: no webhook URL configured")
  click.echo(f"Validation OK: {len(registry)} locations")


if __name__ == "__main__":
  main()

import sys

import click

from ..io.render import render_sun_summary
from ..model.locations import ConfigError
from ..model.settings import load_board_config, load_registry
from ..runtime import ReportClock, build_rows, parse_instant


@click.command()
@click.option("--config", type=click.Path(exists=True, dir_okay=False))
@click.option("--at", "at", type=str, help="Instant to summarize (ISO format)")
def main(config, at):
  try:
    cfg = load_board_config(config)
    registry = load_registry(cfg)
    clock = ReportClock.frozen_at(parse_instant(at)) if at else ReportClock()
  except (ConfigError, ValueError) as e:
    click.echo(f"ERROR: {e}", err=True)
    sys.exit(1)
  instant = clock.now()
  rows = build_rows(registry, instant, cfg)
  click.echo(render_sun_summary(rows))
  click.echo(f"At {instant.strftime('%Y-%m-%d %H:%M:%S')} UTC, {len(rows)} locations")


if __name__ == "__main__":
  main()

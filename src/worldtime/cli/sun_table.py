import sys
from pathlib import Path

import click

from ..io.manifest import write_manifest
from ..io.write_jsonl import write_jsonl
from ..model.locations import ConfigError
from ..model.settings import load_board_config, load_registry
from ..runtime import sun_table_rows


@click.command()
@click.option("--year", required=True, type=int)
@click.option("--out", required=True, type=click.Path(dir_okay=False), help="Output .parquet or .jsonl file")
@click.option("--config", type=click.Path(exists=True, dir_okay=False))
def main(year, out, config):
  try:
    cfg = load_board_config(config)
    registry = load_registry(cfg)
  except ConfigError as e:
    click.echo(f"ERROR: {e}", err=True)
    sys.exit(1)
  out_path = Path(out)
  rows = sun_table_rows(registry, year)
  if out_path.suffix == ".parquet":
    from ..io.write_parquet import write_sun_table_parquet
    n = write_sun_table_parquet(rows, str(out_path))
  elif out_path.suffix == ".jsonl":
    n = write_jsonl(rows, str(out_path))
  else:
    click.echo(f"ERROR: unsupported output type {out_path.suffix!r}, use .parquet or .jsonl", err=True)
    sys.exit(1)
  manifest_path = out_path.with_suffix(".manifest.json")
  write_manifest(str(manifest_path), {"year": year, "locations": registry.names(), "rows": n}, str(out_path))
  click.echo(f"Done. Wrote {n:,} rows to {out_path}")


if __name__ == "__main__":
  main()

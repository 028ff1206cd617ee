import os
from typing import Iterable

import pyarrow as pa
import pyarrow.parquet as pq

SUN_TABLE_SCHEMA = pa.schema([
  ("location", pa.string()),
  ("timezone", pa.string()),
  ("date", pa.string()),
  ("day_of_year", pa.int16()),
  ("utc_offset_minutes", pa.int16()),
  ("sunrise_minutes", pa.int16()),
  ("sunset_minutes", pa.int16()),
])


def write_sun_table_parquet(rows_iter: Iterable[dict], path: str) -> int:
  parent = os.path.dirname(path)
  if parent:
    os.makedirs(parent, exist_ok=True)
  rows = list(rows_iter)
  table = pa.Table.from_pylist(rows, schema=SUN_TABLE_SCHEMA)
  pq.write_table(table, path, compression="snappy")
  return len(rows)

import hashlib
import json
import os


def table_hash(path: str) -> str:
  h = hashlib.sha256()
  with open(path, "rb") as f:
    for chunk in iter(lambda: f.read(65536), b""):
      h.update(chunk)
  return h.hexdigest()[:16]


def write_manifest(path: str, meta: dict, table_path: str) -> dict:
  parent = os.path.dirname(path)
  if parent:
    os.makedirs(parent, exist_ok=True)
  meta = {**meta, "table": os.path.basename(table_path), "table_hash": table_hash(table_path)}
  with open(path, "w", encoding="utf-8") as f:
    json.dump(meta, f, indent=2, sort_keys=True)
  return meta

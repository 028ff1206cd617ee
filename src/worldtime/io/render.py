from datetime import datetime, timezone
from typing import List, Sequence

from ..runtime.board import BoardRow


def render_board(rows: Sequence[BoardRow], updated_at: datetime, title: str = "WORLD TIME") -> str:
  """
  Fixed-width board inside a ```text fence. A blank line separates rows whose
  local date differs from the row above.
  """
  stamp = updated_at.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
  name_w = max([len("LOCATION")] + [len(r.name) for r in rows])
  offset_w = max([len("OFFSET")] + [len(r.offset_label) for r in rows])

  lines: List[str] = [
    title,
    f"Updated (UTC): {stamp}",
    "```text",
    f"ICON  {'LOCATION'.ljust(name_w)}  TIME   {'OFFSET'.ljust(offset_w)}  DATE",
    f"====  {'=' * name_w}  =====  {'=' * offset_w}  ===========",
  ]
  last_key = None
  for r in rows:
    if last_key is not None and r.civil.day_key != last_key:
      lines.append("")
    lines.append(
      f"{r.icon}    {r.name.ljust(name_w)}  {r.civil.clock_text}  "
      f"{r.offset_label.ljust(offset_w)}  {r.civil.date_text}"
    )
    last_key = r.civil.day_key
  lines.append("```")
  return "\n".join(lines)


def render_sun_summary(rows: Sequence[BoardRow]) -> str:
  """Plain table of today's sun times per location."""
  def fmt(minutes):
    return "--:--" if minutes is None else f"{minutes // 60:02d}:{minutes % 60:02d}"

  width = max([len("Location")] + [len(r.name) for r in rows])
  out = ["Location".ljust(width) + " | Local | Rise  | Set   | State"]
  out.append("-" * width + "-|-------|-------|-------|---------")
  for r in rows:
    out.append(
      f"{r.name.ljust(width)} | {r.civil.clock_text} | {fmt(r.sun.sunrise_minutes)} | "
      f"{fmt(r.sun.sunset_minutes)} | {r.state.value}"
    )
  return "\n".join(out)

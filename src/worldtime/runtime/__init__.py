"""Runtime components for the world time board."""

from .clock import ReportClock, parse_instant
from .board import BoardRow, build_row, build_rows
from .sun_table import sun_table_rows

__all__ = [
    "ReportClock",
    "parse_instant",
    "BoardRow",
    "build_row",
    "build_rows",
    "sun_table_rows",
]

"""World time board: local clocks with approximate daylight state."""

__version__ = "0.3.0"

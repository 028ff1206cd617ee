"""Report clock: the source of "now" for each board cycle.

Runs on the wall clock by default. A start instant pins the clock for previews
and tests, and a speed factor lets a preview sweep through a day quickly.
"""
from datetime import datetime, timedelta, timezone
from threading import RLock
from typing import Optional
import time


class ReportClock:
    """Wall clock with optional fixed start and time acceleration."""

    def __init__(
        self,
        start_time: Optional[datetime] = None,
        speed: float = 1.0,
    ):
        """Initialize report clock.

        Args:
            start_time: Instant the clock starts from (default: current UTC time).
                Naive values are taken as UTC.
            speed: Time acceleration factor (1.0 = real-time, 0.0 = frozen)
        """
        if speed < 0:
            raise ValueError("Speed must not be negative")
        self._lock = RLock()
        self._start_time = _as_utc(start_time) if start_time else datetime.now(timezone.utc)
        self._wall_start = time.time()
        self._speed = speed

    def now(self) -> datetime:
        """Get the current instant, always UTC-aware."""
        with self._lock:
            wall_elapsed = time.time() - self._wall_start
            return self._start_time + timedelta(seconds=wall_elapsed * self._speed)

    def set_time(self, new_time: datetime) -> None:
        """Jump to a specific instant."""
        with self._lock:
            self._start_time = _as_utc(new_time)
            self._wall_start = time.time()

    def set_speed(self, speed: float) -> None:
        """Change time acceleration factor.

        Args:
            speed: New speed multiplier (must not be negative)
        """
        if speed < 0:
            raise ValueError("Speed must not be negative")

        with self._lock:
            # Re-anchor so the change does not jump the clock
            current = self.now()
            self._start_time = current
            self._wall_start = time.time()
            self._speed = speed

    def get_speed(self) -> float:
        with self._lock:
            return self._speed

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward by a fixed amount."""
        with self._lock:
            self.set_time(self.now() + delta)

    @classmethod
    def frozen_at(cls, instant: datetime) -> "ReportClock":
        return cls(start_time=instant, speed=0.0)

    def __repr__(self) -> str:
        return f"ReportClock({self.now().isoformat()}, {self._speed}x)"


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_instant(text: str) -> datetime:
    """Parse an ISO 8601 instant; a trailing "Z" means UTC."""
    return _as_utc(datetime.fromisoformat(text.replace("Z", "+00:00")))

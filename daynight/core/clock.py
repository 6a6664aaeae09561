# daynight/core/clock.py
"""
Frame-driven in-game clock. Every MINUTE_FRAMES / TICK_SPEED frames one
in-game minute passes.
"""
from typing import Optional

from daynight.config import (
    HOURS_PER_DAY, MINUTE_FRAMES, MINUTES_PER_HOUR, START_HOURS, START_MINUTES, TICK_SPEED
)


class Clock:
    def __init__(self, tick_speed: int = TICK_SPEED, hours: int = START_HOURS, minutes: int = START_MINUTES) -> None:
        if tick_speed <= 0:
            raise ValueError("tick_speed must be positive")
        self._tick_speed = tick_speed
        self._minute_tick = max(1, MINUTE_FRAMES // tick_speed)
        self.frame_count: int = 0
        self.hours: int = 0
        self.minutes: int = 0
        self.set_time(hours, minutes)

    @property
    def tick_speed(self) -> int:
        return self._tick_speed

    @property
    def minute_tick(self) -> int:
        return self._minute_tick

    @property
    def time_str(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"

    def set_time(self, hours: int, minutes: int) -> None:
        # Not validated; the next tick() normalizes out-of-range values.
        self.hours = hours
        self.minutes = minutes

    def max_minutes_reached(self) -> bool:
        return self.minutes >= MINUTES_PER_HOUR

    def max_hours_reached(self) -> bool:
        return self.hours >= HOURS_PER_DAY

    def tick(self) -> Optional[int]:
        """Advances one frame. Returns the new minute value if a minute passed."""
        self.frame_count += 1
        minute_passed = self.frame_count % self._minute_tick == 0
        if minute_passed:
            self.minutes += 1
        self._normalize()
        return self.minutes if minute_passed else None

    def _normalize(self) -> None:
        # One rollover per call; minutes or hours beyond a single boundary are dropped.
        if self.max_minutes_reached():
            self.minutes = 0
            self.hours += 1
        if self.max_hours_reached():
            self.hours = 0

    def __repr__(self) -> str:
        return f"Clock({self.time_str}, frame={self.frame_count}, speed={self._tick_speed})"

# daynight/core/day_night_cycle.py
"""
Day/night cycle: advances the clock every frame and tints the screen when a
new time of day begins.
"""
from typing import TYPE_CHECKING, List, Optional, Union

from daynight.config import SWITCH_DURATION, TICK_SPEED
from daynight.core.clock import Clock
from daynight.core.event_system import TIME_OF_DAY_CHANGED
from daynight.core.tone_scheduler import ToneScheduler
from daynight.core.tones import TONE_TABLE, TimeOfDay
from daynight.utils.logger import Logger

if TYPE_CHECKING:
    from daynight.core.event_system import EventSystem
    from daynight.core.screen_service import ScreenProvider, ScreenService


class DayNightCycle:
    def __init__(self, screen: Optional['ScreenService'] = None,
                 screen_provider: Optional['ScreenProvider'] = None,
                 event_system: Optional['EventSystem'] = None,
                 tick_speed: int = TICK_SPEED):
        self.clock = Clock(tick_speed)
        self.event_system = event_system
        self._screen_provider = screen_provider
        self._scheduler: Optional[ToneScheduler] = None
        if screen is not None:
            self._bind(screen)

    @property
    def hours(self) -> int:
        return self.clock.hours

    @property
    def minutes(self) -> int:
        return self.clock.minutes

    @property
    def frame_count(self) -> int:
        return self.clock.frame_count

    @property
    def screen(self) -> Optional['ScreenService']:
        return self._scheduler.screen if self._scheduler else None

    def _bind(self, screen: 'ScreenService'):
        self._scheduler = ToneScheduler(screen, SWITCH_DURATION)
        Logger.debug("DayNightCycle", "Screen bound")

    def _resolve_screen(self) -> Optional['ScreenService']:
        # Retried every frame until the host has a screen to hand out.
        if self._scheduler is None and self._screen_provider is not None:
            screen = self._screen_provider()
            if screen is not None:
                self._bind(screen)
        return self.screen

    def set_time(self, hours: int, minutes: int):
        """Jump the clock. The tone for the new hour fires on the next update, even if the hour is unchanged."""
        self.clock.set_time(hours, minutes)
        if self._scheduler is not None:
            self._scheduler.reset()

    def print_time(self) -> str:
        Logger.info("DayNightCycle", f"HOURS {self.clock.hours}")
        Logger.info("DayNightCycle", f"MINUTES {self.clock.minutes}")
        return self.clock.time_str

    def current_time_of_day(self) -> Optional[TimeOfDay]:
        """The time of day whose trigger hour is the current hour, if any."""
        return ToneScheduler.time_of_day_for(self.clock.hours)

    def is_time_of_day(self, label: Union[TimeOfDay, str]) -> bool:
        time_of_day = TimeOfDay.from_label(label)
        return time_of_day is not None and self.current_time_of_day() == time_of_day

    def switch_tone(self, label: Union[TimeOfDay, str]) -> Optional[TimeOfDay]:
        """Immediately requests the tone for `label`. Unknown labels and a missing screen are ignored."""
        if self._resolve_screen() is None:
            Logger.debug("DayNightCycle", f"No screen yet; skipping tone '{label}'")
            return None
        time_of_day = self._scheduler.switch_tone(label)
        if time_of_day is not None:
            self._notify(time_of_day)
        return time_of_day

    def update_screen(self):
        """Host hook run before the map scene starts. Nothing to prepare yet."""
        pass

    def update(self) -> List[TimeOfDay]:
        """Per-frame update. Returns the times of day whose tone fired this frame."""
        screen = self._resolve_screen()
        self.clock.tick()
        if screen is None:
            return []
        fired = self._scheduler.evaluate(self.clock.hours)
        for time_of_day in fired:
            self._notify(time_of_day)
        return fired

    def _notify(self, time_of_day: TimeOfDay):
        if self.event_system:
            self.event_system.publish(TIME_OF_DAY_CHANGED, {
                "time_of_day": time_of_day,
                "hour": self.clock.hours,
                "tone": TONE_TABLE[time_of_day].tone,
            })

# daynight/core/tone_scheduler.py
"""
Requests a screen tone change when the clock enters one of the trigger hours.
"""
from typing import TYPE_CHECKING, List, Optional, Union

from daynight.config import SWITCH_DURATION
from daynight.core.tones import TONE_TABLE, TimeOfDay
from daynight.utils.logger import Logger

if TYPE_CHECKING:
    from daynight.core.screen_service import ScreenService


class ToneScheduler:
    def __init__(self, screen: 'ScreenService', duration: int = SWITCH_DURATION):
        self.screen = screen
        self.duration = duration
        self._last_hour: Optional[int] = None

    @staticmethod
    def time_of_day_for(hour: int) -> Optional[TimeOfDay]:
        """Returns the time of day whose trigger hour is `hour`, if any."""
        for time_of_day, entry in TONE_TABLE.items():
            if entry.trigger_hour == hour:
                return time_of_day
        return None

    def reset(self) -> None:
        """Forget the last evaluated hour so the current one fires again."""
        self._last_hour = None

    def evaluate(self, current_hour: int) -> List[TimeOfDay]:
        """
        Fires a tone change for every trigger hour equal to `current_hour`.
        Only the first evaluation of a given hour fires; later frames within
        the same hour are no-ops.

        Returns the times of day that fired.
        """
        if current_hour == self._last_hour:
            return []
        self._last_hour = current_hour

        fired: List[TimeOfDay] = []
        for time_of_day, entry in TONE_TABLE.items():
            if entry.trigger_hour == current_hour:
                self.screen.request_tone_change(entry.tone, self.duration)
                fired.append(time_of_day)
        if fired:
            Logger.debug("ToneScheduler", f"Hour {current_hour}: switching tone to {fired[0].value}")
        return fired

    def switch_tone(self, label: Union[TimeOfDay, str]) -> Optional[TimeOfDay]:
        """Requests the tone for `label` regardless of the clock. Unknown labels are ignored."""
        time_of_day = TimeOfDay.from_label(label)
        if time_of_day is None:
            Logger.debug("ToneScheduler", f"Ignoring unknown time of day '{label}'")
            return None
        self.screen.request_tone_change(TONE_TABLE[time_of_day].tone, self.duration)
        return time_of_day

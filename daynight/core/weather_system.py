# daynight/core/weather_system.py
"""
Random weather. Each frame one trial may start or stop the rain.
"""
import random
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from daynight.config import (
    WEATHER_DURATION_FRAMES, WEATHER_ONSET_FRAMES, WEATHER_TRIAL_RANGE, WEATHER_TRIAL_THRESHOLD
)
from daynight.core.event_system import WEATHER_CHANGED
from daynight.utils.logger import Logger

if TYPE_CHECKING:
    from daynight.core.event_system import EventSystem
    from daynight.core.screen_service import ScreenProvider, ScreenService


class WeatherType(Enum):
    NONE = "none"
    RAIN = "rain"
    STORM = "storm"
    SNOW = "snow"

    @classmethod
    def from_label(cls, label: Union["WeatherType", str]) -> Optional["WeatherType"]:
        if isinstance(label, cls):
            return label
        try:
            return cls(str(label).strip().lower())
        except ValueError:
            return None


class WeatherToggle:
    """Two-state rain toggle: NONE <-> RAIN, one Bernoulli trial per update."""

    def __init__(self, rng: Optional[random.Random] = None, initial: WeatherType = WeatherType.NONE):
        self.rng = rng if rng is not None else random.Random()
        self.state = initial

    @property
    def raining(self) -> bool:
        return self.state == WeatherType.RAIN

    def trial(self) -> bool:
        return self.rng.randrange(WEATHER_TRIAL_RANGE) > WEATHER_TRIAL_THRESHOLD

    def update(self, screen: 'ScreenService') -> Optional[WeatherType]:
        """Runs one trial. Returns the new state if it flipped, else None."""
        if not self.trial():
            return None
        new_state = WeatherType.NONE if self.raining else WeatherType.RAIN
        screen.request_weather_change(new_state, WEATHER_ONSET_FRAMES, WEATHER_DURATION_FRAMES)
        self.state = new_state
        return new_state


class WeatherSystem:
    def __init__(self, screen: Optional['ScreenService'] = None,
                 screen_provider: Optional['ScreenProvider'] = None,
                 rng: Optional[random.Random] = None,
                 initial: WeatherType = WeatherType.NONE,
                 event_system: Optional['EventSystem'] = None):
        self._screen = screen
        self._screen_provider = screen_provider
        self.event_system = event_system
        self.toggle = WeatherToggle(rng, initial)

    @property
    def current_weather(self) -> WeatherType:
        return self.toggle.state

    @property
    def raining(self) -> bool:
        return self.toggle.raining

    @property
    def screen(self) -> Optional['ScreenService']:
        if self._screen is None and self._screen_provider is not None:
            self._screen = self._screen_provider()
        return self._screen

    def change_weather(self, kind: Union[WeatherType, str]) -> Optional[WeatherType]:
        """
        Forces the weather to `kind`. Unknown kinds are ignored.

        Returns the weather that was set, or None if nothing changed.
        """
        weather = WeatherType.from_label(kind)
        if weather is None:
            Logger.debug("WeatherSystem", f"Ignoring unknown weather type '{kind}'")
            return None
        screen = self.screen
        if screen is None:
            Logger.warning("WeatherSystem", f"No screen available; cannot change weather to {weather.value}")
            return None
        previous = self.toggle.state
        screen.request_weather_change(weather, WEATHER_ONSET_FRAMES, WEATHER_DURATION_FRAMES)
        self.toggle.state = weather
        self._notify(weather, previous)
        return weather

    def update_screen(self):
        """Host hook run before the map scene starts. Nothing to prepare yet."""
        pass

    def update(self) -> Optional[WeatherType]:
        screen = self.screen
        if screen is None:
            return None
        previous = self.toggle.state
        changed = self.toggle.update(screen)
        if changed is not None:
            self._notify(changed, previous)
        return changed

    def _notify(self, weather: WeatherType, previous: WeatherType):
        Logger.info("WeatherSystem", f"Weather changed: {previous.value} -> {weather.value}")
        if self.event_system:
            self.event_system.publish(WEATHER_CHANGED, {"weather": weather, "previous": previous})

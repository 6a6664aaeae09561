# daynight/core/game_system.py
"""
Owns the plugin's per-session systems so the host can reach them from one place.
"""
import random
from typing import TYPE_CHECKING, Optional

from daynight.core.day_night_cycle import DayNightCycle
from daynight.core.weather_system import WeatherSystem, WeatherType

if TYPE_CHECKING:
    from daynight.core.event_system import EventSystem
    from daynight.core.screen_service import ScreenProvider


class GameSystem:
    def __init__(self, screen_provider: Optional['ScreenProvider'] = None,
                 event_system: Optional['EventSystem'] = None,
                 rng: Optional[random.Random] = None,
                 initial_weather: WeatherType = WeatherType.NONE):
        self.event_system = event_system
        self.day_night_cycle = DayNightCycle(screen_provider=screen_provider, event_system=event_system)
        self.weather_system = WeatherSystem(
            screen_provider=screen_provider, rng=rng,
            initial=initial_weather, event_system=event_system
        )

"""daynight - day/night cycle and weather plugin for a tile-based RPG host."""

from daynight.core.clock import Clock
from daynight.core.day_night_cycle import DayNightCycle
from daynight.core.game_system import GameSystem
from daynight.core.scene_map import SceneMap
from daynight.core.tone_scheduler import ToneScheduler
from daynight.core.tones import TONE_TABLE, TimeOfDay, Tone
from daynight.core.weather_system import WeatherSystem, WeatherToggle, WeatherType

__all__ = [
    "Clock",
    "DayNightCycle",
    "GameSystem",
    "SceneMap",
    "ToneScheduler",
    "TONE_TABLE",
    "TimeOfDay",
    "Tone",
    "WeatherSystem",
    "WeatherToggle",
    "WeatherType",
]

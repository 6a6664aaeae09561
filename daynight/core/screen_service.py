# daynight/core/screen_service.py
"""
The screen interface the plugin calls into. The host engine owns the real
implementation; daynight.ui.screen.Screen is a pygame stand-in.
"""
from typing import TYPE_CHECKING, Callable, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from daynight.core.tones import Tone
    from daynight.core.weather_system import WeatherType


@runtime_checkable
class ScreenService(Protocol):
    def request_tone_change(self, tone: 'Tone', duration_frames: int) -> None:
        ...

    def request_weather_change(self, kind: 'WeatherType', onset_frames: int, duration_frames: int) -> None:
        ...


# Returns the screen, or None while the host has not created it yet.
ScreenProvider = Callable[[], Optional[ScreenService]]

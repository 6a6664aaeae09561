# daynight/core/scene_map.py
"""
Map scene controller. Runs the day/night cycle and the weather system next to
the host's own per-frame logic.
"""
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from daynight.core.game_system import GameSystem


class SceneMap:
    def __init__(self, game_system: 'GameSystem',
                 host_update: Optional[Callable[[], None]] = None,
                 host_main: Optional[Callable[[], None]] = None):
        self.game_system = game_system
        self.host_update = host_update
        self.host_main = host_main

    def main(self) -> None:
        """Prepares plugin screens, then hands control to the host's main routine."""
        self.game_system.day_night_cycle.update_screen()
        self.game_system.weather_system.update_screen()
        if self.host_main:
            self.host_main()

    def update(self) -> None:
        """One frame: plugin systems first, then the host's own update."""
        self.game_system.day_night_cycle.update()
        self.game_system.weather_system.update()
        if self.host_update:
            self.host_update()

# daynight/core/event_system.py
"""
Change notifications for the day/night cycle and the weather.
HUDs, sound players and the host listen here instead of polling the systems.
"""
from typing import Any, Callable, Dict, List

from daynight.utils.logger import Logger

TIME_OF_DAY_CHANGED = "time_of_day_changed"
WEATHER_CHANGED = "weather_changed"


class EventSystem:
    """
    Publish/subscribe hub. Listeners are called as callback(event_type, data).
    """

    def __init__(self):
        self.subscribers: Dict[str, List[Callable]] = {}

    def subscribe(self, event_type: str, callback: Callable) -> None:
        """
        Add a listener for an event type. Subscribing the same callback twice
        has no effect.
        """
        listeners = self.subscribers.setdefault(event_type, [])
        if callback not in listeners:
            listeners.append(callback)

    def publish(self, event_type: str, data: Any = None) -> None:
        """
        Notify every listener of event_type. A listener that raises is logged
        and the remaining listeners still run.
        """
        for callback in list(self.subscribers.get(event_type, [])):
            try:
                callback(event_type, data)
            except Exception as e:
                Logger.error("EventSystem", f"Error in event callback for {event_type}: {e}")

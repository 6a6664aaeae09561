import io
import os
import random
import sys
import unittest
from typing import Any, List, Tuple

# Get the absolute path to the project root (one level up from tests/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Insert root into sys.path so we can import 'daynight' without installing
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from daynight.core.event_system import EventSystem
from daynight.core.service_locator import ServiceLocator
from daynight.utils.logger import Logger, LogLevel


class MockScreen:
    """
    Records every request the plugin makes instead of drawing anything.
    """
    def __init__(self):
        self.tone_requests: List[Tuple[Any, int]] = []
        self.weather_requests: List[Tuple[Any, int, int]] = []

    def request_tone_change(self, tone, duration_frames):
        self.tone_requests.append((tone, duration_frames))

    def request_weather_change(self, kind, onset_frames, duration_frames):
        self.weather_requests.append((kind, onset_frames, duration_frames))

    def clear(self):
        self.tone_requests = []
        self.weather_requests = []


class DayNightTestBase(unittest.TestCase):
    """Base class for all plugin tests."""

    SEED = 1234

    def setUp(self):
        # 1. Fresh collaborators for every test
        self.screen = MockScreen()
        self.rng = random.Random(self.SEED)
        self.event_system = EventSystem()
        self.locator = ServiceLocator()

        # 2. Capture log output
        self.log_stream = io.StringIO()
        self._old_level = Logger.get_level()
        Logger.set_stream(self.log_stream)
        Logger.set_level(LogLevel.DEBUG)

    def tearDown(self):
        Logger.set_stream(None)
        Logger.set_level(self._old_level)

    def run_frames(self, system, frames: int):
        """Calls system.update() `frames` times."""
        for _ in range(frames):
            system.update()

    def record_events(self, event_type: str) -> List[Any]:
        received: List[Any] = []
        self.event_system.subscribe(event_type, lambda _, data: received.append(data))
        return received

    def assertLogContains(self, substring: str):
        """Custom helper to check if the plugin logged specific text."""
        all_text = self.log_stream.getvalue()
        self.assertIn(substring, all_text, f"Expected log text '{substring}' not found.")

from tests.fixtures import DayNightTestBase
from daynight.config import MINUTE_FRAMES
from daynight.core.day_night_cycle import DayNightCycle
from daynight.core.event_system import TIME_OF_DAY_CHANGED
from daynight.core.tones import TONE_TABLE, TimeOfDay

FRAMES_PER_HOUR = 60 * MINUTE_FRAMES


class TestDayNightCycle(DayNightTestBase):

    def test_first_frame_fires_morning(self):
        cycle = DayNightCycle(screen=self.screen)
        fired = cycle.update()
        self.assertEqual(fired, [TimeOfDay.MORNING])
        self.assertEqual(self.screen.tone_requests, [(TONE_TABLE[TimeOfDay.MORNING].tone, 300)])

    def test_noon_fires_once_on_the_way_from_nine(self):
        cycle = DayNightCycle(screen=self.screen)
        cycle.update()
        self.screen.clear()

        while cycle.hours != 12:
            cycle.update()
        self.assertEqual(cycle.frame_count, 3 * FRAMES_PER_HOUR)
        self.assertEqual(self.screen.tone_requests, [(TONE_TABLE[TimeOfDay.NOON].tone, 300)])

        # The rest of the hour does not repeat the request.
        self.run_frames(cycle, FRAMES_PER_HOUR - 1)
        self.assertEqual(cycle.hours, 12)
        self.assertEqual(len(self.screen.tone_requests), 1)

    def test_set_time_to_dusk(self):
        cycle = DayNightCycle(screen=self.screen)
        cycle.set_time(5, 0)
        self.assertEqual(cycle.update(), [TimeOfDay.DUSK])
        self.assertEqual(self.screen.tone_requests, [(TONE_TABLE[TimeOfDay.DUSK].tone, 300)])

    def test_set_time_within_same_hour_reapplies_tone(self):
        cycle = DayNightCycle(screen=self.screen)
        self.run_frames(cycle, 10 * MINUTE_FRAMES)
        cycle.switch_tone(TimeOfDay.NIGHT)
        self.screen.clear()

        cycle.set_time(9, 0)
        self.assertEqual(cycle.update(), [TimeOfDay.MORNING])
        self.assertEqual(self.screen.tone_requests, [(TONE_TABLE[TimeOfDay.MORNING].tone, 300)])
        # Still one-shot after the jump.
        self.run_frames(cycle, MINUTE_FRAMES)
        self.assertEqual(len(self.screen.tone_requests), 1)

    def test_full_day_fires_each_tone_once(self):
        cycle = DayNightCycle(screen=self.screen)
        fired = []
        # One frame short of the next 09:00.
        for _ in range(24 * FRAMES_PER_HOUR - 1):
            fired.extend(cycle.update())
        self.assertEqual((cycle.hours, cycle.minutes), (8, 59))
        self.assertEqual(fired, [TimeOfDay.MORNING, TimeOfDay.NOON, TimeOfDay.EVENING,
                                 TimeOfDay.NIGHT, TimeOfDay.DUSK])

    def test_screen_resolved_lazily(self):
        calls = []

        def provider():
            calls.append(1)
            return self.screen if len(calls) > 3 else None

        cycle = DayNightCycle(screen_provider=provider)
        self.run_frames(cycle, 3)
        self.assertIsNone(cycle.screen)
        self.assertEqual(cycle.frame_count, 3)
        self.assertEqual(self.screen.tone_requests, [])

        self.run_frames(cycle, 5)
        self.assertIs(cycle.screen, self.screen)
        self.assertEqual(len(calls), 4)
        self.assertEqual(cycle.frame_count, 8)
        # The first hour seen with a screen still fires.
        self.assertEqual([t for t, _ in self.screen.tone_requests], [TONE_TABLE[TimeOfDay.MORNING].tone])

    def test_screen_provider_from_locator(self):
        cycle = DayNightCycle(screen_provider=self.locator.screen_provider("screen"))
        cycle.update()
        self.assertIsNone(cycle.screen)
        self.locator.register_service("screen", self.screen)
        cycle.update()
        self.assertIs(cycle.screen, self.screen)

    def test_print_time(self):
        cycle = DayNightCycle(screen=self.screen)
        cycle.set_time(14, 7)
        self.assertEqual(cycle.print_time(), "14:07")
        self.assertLogContains("HOURS 14")
        self.assertLogContains("MINUTES 7")

    def test_time_of_day_queries(self):
        cycle = DayNightCycle(screen=self.screen)
        self.assertEqual(cycle.current_time_of_day(), TimeOfDay.MORNING)
        self.assertTrue(cycle.is_time_of_day("morning"))
        self.assertFalse(cycle.is_time_of_day(TimeOfDay.NIGHT))
        self.assertFalse(cycle.is_time_of_day("teatime"))
        cycle.set_time(10, 0)
        self.assertIsNone(cycle.current_time_of_day())

    def test_switch_tone_without_screen_is_ignored(self):
        cycle = DayNightCycle()
        self.assertIsNone(cycle.switch_tone("night"))
        cycle = DayNightCycle(screen=self.screen)
        self.assertIsNone(cycle.switch_tone("brunch"))
        self.assertEqual(cycle.switch_tone("night"), TimeOfDay.NIGHT)
        self.assertEqual(len(self.screen.tone_requests), 1)

    def test_publishes_time_of_day_events(self):
        events = self.record_events(TIME_OF_DAY_CHANGED)
        cycle = DayNightCycle(screen=self.screen, event_system=self.event_system)
        cycle.update()
        cycle.update()
        self.assertEqual(len(events), 1)
        self.assertEqual(events[0]["time_of_day"], TimeOfDay.MORNING)
        self.assertEqual(events[0]["hour"], 9)
        self.assertEqual(events[0]["tone"], TONE_TABLE[TimeOfDay.MORNING].tone)

    def test_update_screen_hook_is_harmless(self):
        cycle = DayNightCycle(screen=self.screen)
        cycle.update_screen()
        self.assertEqual(self.screen.tone_requests, [])

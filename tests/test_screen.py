import os
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from tests.fixtures import DayNightTestBase
from daynight.config import MAX_WEATHER_PARTICLES, STORM_PARTICLE_MULTIPLIER
from daynight.core.screen_service import ScreenService
from daynight.core.tones import TONE_TABLE, TimeOfDay, Tone
from daynight.core.weather_system import WeatherType
from daynight.ui.screen import Screen


class TestScreenTone(DayNightTestBase):

    def setUp(self):
        super().setUp()
        self.pg_screen = Screen((32, 24), self.rng)

    def test_implements_screen_service(self):
        self.assertIsInstance(self.pg_screen, ScreenService)
        self.assertIsInstance(self.screen, ScreenService)
        self.assertNotIsInstance(object(), ScreenService)

    def test_instant_tone_change(self):
        self.pg_screen.request_tone_change(Tone(-50, 0, 20, 0), 0)
        self.assertEqual(self.pg_screen.tone, Tone(-50, 0, 20, 0))

    def test_tone_fades_over_duration(self):
        night = TONE_TABLE[TimeOfDay.NIGHT].tone
        self.pg_screen.request_tone_change(night, 300)
        self.run_frames(self.pg_screen, 150)
        self.assertTrue(-62 <= self.pg_screen.tone.red <= -58)
        self.run_frames(self.pg_screen, 150)
        self.assertEqual(self.pg_screen.tone, night)
        self.assertEqual(self.pg_screen.tone_duration, 0)

    def test_draw_applies_channel_offsets(self):
        surface = pygame.Surface((32, 24))
        surface.fill((100, 100, 100))
        self.pg_screen.request_tone_change(Tone(-50, 0, 20, 0), 0)
        self.pg_screen.draw(surface)
        self.assertEqual(tuple(surface.get_at((5, 5)))[:3], (50, 100, 120))

    def test_draw_clamps_channels(self):
        surface = pygame.Surface((32, 24))
        surface.fill((30, 250, 100))
        self.pg_screen.request_tone_change(Tone(-119, 40, 0, 0), 0)
        self.pg_screen.draw(surface)
        self.assertEqual(tuple(surface.get_at((0, 0)))[:3], (0, 255, 100))

    def test_full_gray_desaturates(self):
        surface = pygame.Surface((32, 24))
        surface.fill((200, 40, 10))
        self.pg_screen.request_tone_change(Tone(0, 0, 0, 255), 0)
        self.pg_screen.draw(surface)
        r, g, b = tuple(surface.get_at((3, 3)))[:3]
        self.assertEqual(r, g)
        self.assertEqual(g, b)

    def test_neutral_tone_leaves_frame_alone(self):
        surface = pygame.Surface((32, 24))
        surface.fill((12, 34, 56))
        self.pg_screen.draw(surface)
        self.assertEqual(tuple(surface.get_at((0, 0)))[:3], (12, 34, 56))


class TestScreenWeather(DayNightTestBase):

    def setUp(self):
        super().setUp()
        self.pg_screen = Screen((64, 48), self.rng)

    def test_rain_waits_for_onset_then_ramps(self):
        self.pg_screen.request_weather_change(WeatherType.RAIN, 2, 10)
        self.run_frames(self.pg_screen, 2)
        self.assertEqual(self.pg_screen.weather_power, 0.0)
        self.assertEqual(self.pg_screen.particles, [])

        self.run_frames(self.pg_screen, 5)
        self.assertAlmostEqual(self.pg_screen.weather_power, 0.5)
        self.run_frames(self.pg_screen, 5)
        self.assertEqual(self.pg_screen.weather_power, 1.0)
        self.assertEqual(len(self.pg_screen.particles), MAX_WEATHER_PARTICLES)
        self.assertEqual(self.pg_screen.weather_type, WeatherType.RAIN)

    def test_clearing_fades_out(self):
        self.pg_screen.request_weather_change(WeatherType.RAIN, 0, 1)
        self.pg_screen.update()
        self.pg_screen.request_weather_change(WeatherType.NONE, 2, 10)
        self.run_frames(self.pg_screen, 7)
        self.assertEqual(self.pg_screen.weather_type, WeatherType.RAIN)
        self.run_frames(self.pg_screen, 5)
        self.assertEqual(self.pg_screen.weather_power, 0.0)
        self.assertEqual(self.pg_screen.weather_type, WeatherType.NONE)
        self.assertEqual(self.pg_screen.particles, [])

    def test_storm_doubles_particles(self):
        self.pg_screen.request_weather_change(WeatherType.STORM, 0, 1)
        self.pg_screen.update()
        self.assertEqual(len(self.pg_screen.particles), MAX_WEATHER_PARTICLES * STORM_PARTICLE_MULTIPLIER)

    def test_particles_stay_on_screen(self):
        self.pg_screen.request_weather_change(WeatherType.SNOW, 0, 1)
        self.run_frames(self.pg_screen, 200)
        for _, y in self.pg_screen.particles:
            self.assertLessEqual(y, 48)

    def test_draw_weather(self):
        surface = pygame.Surface((64, 48))
        for kind in (WeatherType.RAIN, WeatherType.SNOW):
            self.pg_screen.request_weather_change(kind, 0, 1)
            self.run_frames(self.pg_screen, 30)
            self.pg_screen.draw(surface)

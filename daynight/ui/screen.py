# daynight/ui/screen.py
"""
pygame implementation of the screen service: a fading colour tone over the
whole frame plus simple rain, storm and snow particles.

Hosts with their own renderer implement ScreenService themselves; this one
backs the demo launcher and the tests.
"""
import random
from typing import List, Optional, Tuple

import pygame

from daynight.config import MAX_WEATHER_PARTICLES, RAIN_COLOR, SNOW_COLOR, STORM_PARTICLE_MULTIPLIER
from daynight.core.tones import Tone
from daynight.core.weather_system import WeatherType
from daynight.utils.logger import Logger


class Screen:
    def __init__(self, size: Tuple[int, int], rng: Optional[random.Random] = None):
        self.width, self.height = size
        self.rng = rng if rng is not None else random.Random()

        # Tone channels as floats so fades stay smooth.
        self._tone: List[float] = [0.0, 0.0, 0.0, 0.0]
        self._tone_target: List[float] = [0.0, 0.0, 0.0, 0.0]
        self.tone_duration = 0

        self.weather_type = WeatherType.NONE
        self.weather_power = 0.0  # 0.0 (none) .. 1.0 (full)
        self._power_start = 0.0
        self._power_target = 0.0
        self._ramp_total = 0
        self._ramp_left = 0
        self.weather_onset = 0
        self.particles: List[List[float]] = []

    # --- Screen service ---

    def request_tone_change(self, tone: Tone, duration_frames: int) -> None:
        self._tone_target = [float(v) for v in tone.as_tuple()]
        self.tone_duration = max(0, duration_frames)
        if self.tone_duration == 0:
            self._tone = list(self._tone_target)
        Logger.debug("Screen", f"Tone change to {tone.as_tuple()} over {duration_frames} frames")

    def request_weather_change(self, kind: WeatherType, onset_frames: int, duration_frames: int) -> None:
        if kind != WeatherType.NONE:
            self.weather_type = kind
        self._power_target = 0.0 if kind == WeatherType.NONE else 1.0
        self.weather_onset = max(0, onset_frames)
        self._power_start = self.weather_power
        self._ramp_total = self._ramp_left = max(1, duration_frames)
        Logger.debug("Screen", f"Weather change to {kind.value} (onset {onset_frames}, duration {duration_frames})")

    # --- Per-frame ---

    @property
    def tone(self) -> Tone:
        return Tone(*(int(round(v)) for v in self._tone))

    def update(self) -> None:
        self._update_tone()
        self._update_weather()

    def _update_tone(self):
        if self.tone_duration >= 1:
            d = self.tone_duration
            self._tone = [(cur * (d - 1) + target) / d for cur, target in zip(self._tone, self._tone_target)]
            self.tone_duration -= 1

    def _update_weather(self):
        if self.weather_onset > 0:
            self.weather_onset -= 1
        elif self._ramp_left > 0:
            self._ramp_left -= 1
            span = self._power_start - self._power_target
            self.weather_power = self._power_target + span * self._ramp_left / self._ramp_total

        if self.weather_power == 0.0 and self._power_target == 0.0:
            self.weather_type = WeatherType.NONE

        wanted = self._particle_count()
        while len(self.particles) < wanted:
            self.particles.append([self.rng.uniform(0, self.width), self.rng.uniform(-self.height, 0)])
        del self.particles[wanted:]

        for p in self.particles:
            if self.weather_type == WeatherType.SNOW:
                p[0] += self.rng.choice((-1, 0, 1))
                p[1] += 2
            else:
                p[0] -= 3
                p[1] += 12
            if p[1] > self.height:
                p[0] = self.rng.uniform(0, self.width)
                p[1] = self.rng.uniform(-20, 0)

    def _particle_count(self) -> int:
        count = int(self.weather_power * MAX_WEATHER_PARTICLES)
        if self.weather_type == WeatherType.STORM:
            count *= STORM_PARTICLE_MULTIPLIER
        return count

    # --- Drawing ---

    def draw(self, surface: pygame.Surface) -> None:
        self._apply_tone(surface)
        self._draw_weather(surface)

    def _apply_tone(self, surface: pygame.Surface):
        red, green, blue, gray = self.tone.as_tuple()
        if gray > 0:
            gray_surface = pygame.transform.grayscale(surface)
            gray_surface.set_alpha(min(255, gray))
            surface.blit(gray_surface, (0, 0))

        add = tuple(min(255, max(0, v)) for v in (red, green, blue))
        sub = tuple(min(255, max(0, -v)) for v in (red, green, blue))
        if any(add):
            surface.fill(add, special_flags=pygame.BLEND_RGB_ADD)
        if any(sub):
            surface.fill(sub, special_flags=pygame.BLEND_RGB_SUB)

    def _draw_weather(self, surface: pygame.Surface):
        for x, y in self.particles:
            if self.weather_type == WeatherType.SNOW:
                pygame.draw.circle(surface, SNOW_COLOR, (int(x), int(y)), 2)
            else:
                pygame.draw.line(surface, RAIN_COLOR, (int(x), int(y)), (int(x) - 3, int(y) + 10))

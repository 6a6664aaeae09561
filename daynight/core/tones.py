# daynight/core/tones.py
"""
Screen tones for each time of day and the hours that trigger them.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from daynight.config import (
    DUSK_HOUR, DUSK_TONE, EVENING_HOUR, EVENING_TONE, MORNING_HOUR, MORNING_TONE,
    NIGHT_HOUR, NIGHT_TONE, NOON_HOUR, NOON_TONE
)


@dataclass(frozen=True)
class Tone:
    """Colour adjustment applied over the whole screen.

    red/green/blue are signed offsets in [-255, 255]; gray is the
    desaturation amount in [0, 255].
    """
    red: int = 0
    green: int = 0
    blue: int = 0
    gray: int = 0

    @classmethod
    def from_tuple(cls, values: Tuple[int, int, int, int]) -> "Tone":
        return cls(*values)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.gray)


class TimeOfDay(Enum):
    DUSK = "dusk"
    MORNING = "morning"
    NOON = "noon"
    EVENING = "evening"
    NIGHT = "night"

    @classmethod
    def from_label(cls, label: Union["TimeOfDay", str]) -> Optional["TimeOfDay"]:
        """Returns the matching member, or None for an unknown label."""
        if isinstance(label, cls):
            return label
        try:
            return cls(str(label).strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class ToneEntry:
    tone: Tone
    trigger_hour: int


TONE_TABLE: Mapping[TimeOfDay, ToneEntry] = MappingProxyType({
    TimeOfDay.DUSK: ToneEntry(Tone.from_tuple(DUSK_TONE), DUSK_HOUR),
    TimeOfDay.MORNING: ToneEntry(Tone.from_tuple(MORNING_TONE), MORNING_HOUR),
    TimeOfDay.NOON: ToneEntry(Tone.from_tuple(NOON_TONE), NOON_HOUR),
    TimeOfDay.EVENING: ToneEntry(Tone.from_tuple(EVENING_TONE), EVENING_HOUR),
    TimeOfDay.NIGHT: ToneEntry(Tone.from_tuple(NIGHT_TONE), NIGHT_HOUR),
})

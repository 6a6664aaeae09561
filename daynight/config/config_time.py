# daynight/config/config_time.py
"""
Configuration for the in-game clock and the day/night tone schedule.
"""

# --- Clock ---
TICK_SPEED = 1          # 1 is normal, 50 is very fast
MINUTE_FRAMES = 50      # Frames per in-game minute at TICK_SPEED 1
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

START_HOURS = 9
START_MINUTES = 0

# --- Tone Schedule ---
SWITCH_DURATION = 300   # Frames a tone transition takes

DUSK_HOUR = 5
MORNING_HOUR = 9
NOON_HOUR = 12
EVENING_HOUR = 17
NIGHT_HOUR = 20

# (red, green, blue, gray)
DUSK_TONE = (-119, -85, -34, 68)
MORNING_TONE = (-40, -30, -34, 20)
NOON_TONE = (0, 0, 0, 0)
EVENING_TONE = (-70, -60, -30, 200)
NIGHT_TONE = (-119, -95, -64, 255)

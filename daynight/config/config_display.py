# daynight/config/config_display.py
"""
Display settings for the demo window and the format markers used in command output.
"""

# --- Demo Window ---
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
TARGET_FPS = 60
BACKGROUND_COLOR = (70, 130, 80)
WINDOW_TITLE = "Day/Night & Weather"

# --- Format Markers ---
FORMAT_RED = "[[RED]]"
FORMAT_YELLOW = "[[YELLOW]]"
FORMAT_GREEN = "[[GREEN]]"
FORMAT_CYAN = "[[CYAN]]"
FORMAT_RESET = "[[/]]"

FORMAT_ERROR = FORMAT_RED
FORMAT_TITLE = FORMAT_YELLOW
FORMAT_HIGHLIGHT = FORMAT_GREEN
FORMAT_SUCCESS = FORMAT_GREEN
FORMAT_CATEGORY = FORMAT_CYAN

# --- Weather Rendering ---
RAIN_COLOR = (170, 190, 220)
SNOW_COLOR = (245, 245, 250)
MAX_WEATHER_PARTICLES = 120  # At full intensity
STORM_PARTICLE_MULTIPLIER = 2

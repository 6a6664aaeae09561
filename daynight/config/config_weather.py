# daynight/config/config_weather.py
"""
Configuration for the random weather toggle.
"""

# A draw in [0, WEATHER_TRIAL_RANGE) above the threshold flips the weather.
WEATHER_TRIAL_RANGE = 1_000_000
WEATHER_TRIAL_THRESHOLD = 995_999

WEATHER_ONSET_FRAMES = 2
WEATHER_DURATION_FRAMES = 10

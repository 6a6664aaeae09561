# daynight/commands/weather_commands.py
from daynight.commands.command_system import command
from daynight.config import FORMAT_ERROR, FORMAT_RESET, FORMAT_SUCCESS
from daynight.core.weather_system import WeatherType

WEATHER_DESCRIPTIONS = {
    WeatherType.NONE: "The sky is clear.",
    WeatherType.RAIN: "Rain falls steadily.",
    WeatherType.STORM: "Thunder rumbles as a storm rages.",
    WeatherType.SNOW: "Snowflakes drift down from the sky.",
}


@command("weather", ["forecast"], "weather", "Check the current weather conditions.")
def weather_command_handler(args, context):
    weather = context["game_system"].weather_system.current_weather
    return f"Current Weather: {weather.value.capitalize()}\n\n{WEATHER_DESCRIPTIONS[weather]}"


@command("setweather", [], "weather", "Set the current weather.\nUsage: setweather <none|rain|storm|snow>")
def setweather_command_handler(args, context):
    weather_system = context["game_system"].weather_system
    types = ", ".join(w.value for w in WeatherType)
    if not args:
        return f"{FORMAT_ERROR}Usage: setweather <type>.\nTypes: {types}.{FORMAT_RESET}"

    weather = WeatherType.from_label(args[0])
    if weather is None:
        return f"{FORMAT_ERROR}Invalid weather type '{args[0]}'.{FORMAT_RESET}"
    if weather_system.change_weather(weather) is None:
        return f"{FORMAT_ERROR}The screen is not ready yet.{FORMAT_RESET}"
    return f"{FORMAT_SUCCESS}Weather set to {weather.value}.{FORMAT_RESET}"

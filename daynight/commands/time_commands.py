# daynight/commands/time_commands.py
from daynight.commands.command_system import command
from daynight.config import FORMAT_ERROR, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_SUCCESS
from daynight.core.tones import TimeOfDay


@command("time", ["clock"], "time", "Display the current in-game time.")
def time_command_handler(args, context):
    cycle = context["game_system"].day_night_cycle
    time_str = cycle.print_time()
    response = f"Current Time: {FORMAT_HIGHLIGHT}{time_str}{FORMAT_RESET}\n"
    time_of_day = cycle.current_time_of_day()
    if time_of_day:
        response += f"It is {time_of_day.value}.\n"
    return response


@command("settime", [], "time", "Set the in-game time.\nUsage: settime <hour> [minute]")
def settime_command_handler(args, context):
    cycle = context["game_system"].day_night_cycle
    if not args:
        return f"{FORMAT_ERROR}Usage: settime <hour> [minute]{FORMAT_RESET}"

    new_minute = 0
    try:
        new_hour = int(args[0])
        if not (0 <= new_hour <= 23): return f"{FORMAT_ERROR}Hour must be 0-23.{FORMAT_RESET}"
        if len(args) > 1:
            new_minute = int(args[1])
            if not (0 <= new_minute <= 59): return f"{FORMAT_ERROR}Minute must be 0-59.{FORMAT_RESET}"
    except ValueError:
        return f"{FORMAT_ERROR}Invalid time format.{FORMAT_RESET}"

    cycle.set_time(new_hour, new_minute)
    return f"{FORMAT_SUCCESS}Time set to {new_hour:02d}:{new_minute:02d}.{FORMAT_RESET}"


@command("tone", [], "time", "Switch the screen tone to a time of day.\nUsage: tone <dusk|morning|noon|evening|night>")
def tone_command_handler(args, context):
    cycle = context["game_system"].day_night_cycle
    labels = ", ".join(t.value for t in TimeOfDay)
    if not args:
        return f"{FORMAT_ERROR}Usage: tone <{labels}>{FORMAT_RESET}"

    time_of_day = TimeOfDay.from_label(args[0])
    if time_of_day is None:
        return f"{FORMAT_ERROR}Unknown time of day '{args[0]}'. Choose from: {labels}.{FORMAT_RESET}"
    if cycle.switch_tone(time_of_day) is None:
        return f"{FORMAT_ERROR}The screen is not ready yet.{FORMAT_RESET}"
    return f"{FORMAT_SUCCESS}Tone switched to {time_of_day.value}.{FORMAT_RESET}"

# daynight/commands/system_commands.py
from daynight.commands.command_system import command


@command("help", ["h", "?"], "system", "Show help.\nUsage: help [command|category]")
def help_handler(args, context):
    cp = context["command_processor"]
    return cp.get_command_help(args[0]) if args else cp.get_help_text()

# daynight/commands/command_system.py
from typing import Any, Callable, Dict, List, Optional
from functools import wraps

from daynight.config import FORMAT_CATEGORY, FORMAT_ERROR, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_TITLE

# Dictionary to store all registered commands, keyed by name and alias
registered_commands: Dict[str, Dict[str, Any]] = {}
command_groups: Dict[str, List[Dict[str, Any]]] = {"system": [], "time": [], "weather": []}


def command(name: str, aliases: Optional[List[str]] = None, category: str = "other",
            help_text: str = "No help available."):
    """
    Decorator for registering console commands. Handlers take (args, context).
    """
    aliases = aliases or []

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        cmd_data = {
            "name": name,
            "aliases": aliases,
            "handler": wrapper,
            "help_text": help_text,
            "category": category,
        }

        registered_commands[name] = cmd_data
        for alias in aliases:
            registered_commands[alias] = cmd_data
        command_groups.setdefault(category, []).append(cmd_data)
        return wrapper
    return decorator


class CommandProcessor:
    """Dispatches console input to registered command handlers."""

    def process_input(self, text: str, context: Any = None) -> str:
        text = text.strip().lower()
        if not text:
            return ""
        parts = text.split()

        # Longest match first so multi-word commands win over their prefixes.
        for i in range(len(parts), 0, -1):
            potential_cmd = " ".join(parts[:i])
            if potential_cmd in registered_commands:
                cmd_data = registered_commands[potential_cmd]
                if context is not None and isinstance(context, dict):
                    context["executed_command_name"] = cmd_data["name"]
                return cmd_data["handler"](parts[i:], context)

        response = f"{FORMAT_ERROR}Unknown command: {parts[0]}{FORMAT_RESET}"
        suggestions = self.get_command_suggestions(parts[0])
        if suggestions:
            response += f"\nDid you mean: {', '.join(suggestions)}?"
        return response

    def get_help_text(self) -> str:
        """Overview of every non-empty command category."""
        sections = [self._get_category_help(category)
                    for category in sorted(command_groups) if command_groups[category]]
        return "\n".join(sections) + "\nType 'help <command>' for details."

    def get_command_help(self, name: str) -> str:
        name_lower = name.lower()
        if name_lower in command_groups and command_groups[name_lower]:
            return self._get_category_help(name_lower)

        if name_lower in registered_commands:
            cmd = registered_commands[name_lower]
            help_text = f"{FORMAT_TITLE}Command: {cmd['name'].upper()}{FORMAT_RESET}\n\n"
            help_text += f"{FORMAT_CATEGORY}Category:{FORMAT_RESET} {cmd['category'].capitalize()}\n"
            if cmd["aliases"]:
                help_text += f"{FORMAT_CATEGORY}Aliases:{FORMAT_RESET} {', '.join(cmd['aliases'])}\n"
            help_text += f"\n{FORMAT_CATEGORY}Description:{FORMAT_RESET}\n"
            for line in cmd["help_text"].split("\n"):
                help_text += f"  {line}\n"
            return help_text

        return f"{FORMAT_ERROR}No help found for '{name}'.{FORMAT_RESET}"

    def get_command_suggestions(self, partial_command: str) -> List[str]:
        """Command names and aliases starting with partial_command."""
        partial = partial_command.lower()
        return sorted(key for key in registered_commands if key.startswith(partial))

    def _get_category_help(self, category_name: str) -> str:
        help_text = f"{FORMAT_TITLE}Help: {category_name.capitalize()} Commands{FORMAT_RESET}\n\n"
        for cmd in sorted(command_groups[category_name], key=lambda c: c["name"]):
            aliases = f" ({', '.join(cmd['aliases'])})" if cmd["aliases"] else ""
            first_line_help = cmd["help_text"].split("\n")[0]
            help_text += f"  {FORMAT_HIGHLIGHT}{cmd['name']}{aliases}{FORMAT_RESET}\n"
            help_text += f"    - {first_line_help}\n"
        return help_text

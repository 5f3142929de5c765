"""Command table - data-driven help text and name resolution."""

from dataclasses import dataclass
from typing import List, Optional

from .messages import HELP_TITLE


@dataclass
class Command:
    """Complete command specification."""

    name: str
    description: str
    usage: str
    example: str


COMMANDS = [
    Command(
        name="add",
        description="Add a new account (prompts for details and password)",
        usage="add",
        example="passman add",
    ),
    Command(
        name="list",
        description="Show all saved accounts",
        usage="list",
        example="passman list",
    ),
    Command(
        name="get",
        description="Show or copy the password for an account",
        usage="get",
        example="passman get",
    ),
    Command(
        name="delete",
        description="Remove an account",
        usage="delete",
        example="passman delete",
    ),
    Command(
        name="help",
        description="Show this help message",
        usage="help",
        example="passman help",
    ),
]


def generate_help_text() -> str:
    """Generate usage text from command definitions."""
    width = max(len(cmd.usage) for cmd in COMMANDS) + 4
    lines: List[str] = [HELP_TITLE, "Usage:", "\tpassman <command>", "Commands:"]

    for cmd in COMMANDS:
        lines.append(f"\t{cmd.usage.ljust(width)}{cmd.description}")

    return "\n".join(lines)


def get_command(name: str) -> Optional[Command]:
    """Find a command by its canonical name."""
    return next((cmd for cmd in COMMANDS if cmd.name == name), None)


def resolve_command_name(name: str) -> Optional[str]:
    """Convert a command token to its canonical name, ignoring case."""
    cmd = get_command(name.lower())
    return cmd.name if cmd else None

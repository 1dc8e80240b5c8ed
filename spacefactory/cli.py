"""Interactive command line for managing recipes."""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence

from spacefactory.commands import (
    Command,
    add_recipe,
    load_recipes,
    save_recipes,
    view_recipes,
)
from spacefactory.recipe import Recipe

_COMMANDS: dict[str, Callable[[Command, list[Recipe]], object]] = {
    "add_recipe": add_recipe,
    "view_recipes": view_recipes,
    "load_recipes": load_recipes,
    "save_recipes": save_recipes,
}


def parse_command(line: str) -> Optional[Command]:
    """Parse ``name --key value ...``; return None for a blank line."""
    words = line.split()
    if not words:
        return None
    name, *rest = words
    args: dict[str, str] = {}
    position = 0
    while position < len(rest):
        word = rest[position]
        if word.startswith("--"):
            key = word[2:]
            following = rest[position + 1] if position + 1 < len(rest) else None
            if following is not None and not following.startswith("--"):
                args[key] = following
                position += 2
            else:
                args[key] = ""
                print(f"Added flag {key} with no value")
                position += 1
        else:
            print(f'Word did not have "--" in front of it: {word}')
            position += 1
    return Command(name=name, args=args)


def dispatch(command: Command, recipes: list[Recipe]) -> None:
    """Run ``command`` against ``recipes``; its name is matched case-insensitively."""
    handler = _COMMANDS.get(command.name.lower())
    if handler is None:
        print("Unknown command3")
        return
    handler(command, recipes)


def parse_and_dispatch(line: str, recipes: list[Recipe]) -> None:
    """Parse one input line and run the command it names."""
    command = parse_command(line)
    if command is None:
        print("Unknown Command2")
        return
    dispatch(command, recipes)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read commands from standard input until ``exit`` or end of input."""
    print("Enter your command. Type exit to exit program")
    recipes: list[Recipe] = []
    for line in sys.stdin:
        if line.strip() == "exit":
            break
        parse_and_dispatch(line, recipes)
    return 0
"""Commands operating on the session's recipe list."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

from spacefactory.codec import DecodeError, decode_recipes, encode_recipes
from spacefactory.item import Item
from spacefactory.recipe import Recipe

DEFAULT_LOCATION = "assets/recipe.sgs"

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass
class Command:
    """A parsed command: its name and its ``--key value`` arguments."""

    name: str = "error"
    args: dict[str, str] = field(default_factory=dict)


def _parse_unsigned(text: str, bits: int) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED_PATTERN.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text[1:] if text.startswith("+") else text)
    if value >= 1 << bits:
        raise ValueError("number too large to fit in target type")
    return value


def _required_unsigned(command: Command, key: str, bits: int) -> Optional[int]:
    raw = command.args.get(key)
    if raw is None:
        print(f"Missing {key} argument")
        return None
    try:
        return _parse_unsigned(raw, bits)
    except ValueError as exc:
        print(f"Error in parsing {key}: {exc}")
        return None


def add_recipe(command: Command, recipes: list[Recipe]) -> Optional[Recipe]:
    """Add a recipe needing ``item_count`` of ``item_id``; return it, or None on bad input."""
    item_id = _required_unsigned(command, "item_id", 64)
    if item_id is None:
        return None
    item_count = _required_unsigned(command, "item_count", 128)
    if item_count is None:
        return None
    recipe = Recipe(input_items=[Item(id=item_id, count=item_count)])
    print(repr(recipe))
    recipes.append(recipe)
    return recipe


def view_recipes(command: Command, recipes: list[Recipe]) -> None:
    """Print every recipe."""
    for recipe in recipes:
        print(repr(recipe))


def load_recipes(command: Command, recipes: list[Recipe]) -> None:
    """Replace ``recipes`` with those stored at ``--location`` (or the default file)."""
    location = command.args.get("location", DEFAULT_LOCATION)
    try:
        with open(location, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        print(f"Error opening file: {exc}")
        return
    try:
        decoded = decode_recipes(data)
    except DecodeError as exc:
        print(f"Error decoding recipes: {exc}")
        return
    print("Decoded Recipes")
    recipes[:] = decoded


def save_recipes(command: Command, recipes: list[Recipe]) -> None:
    """Write ``recipes`` to ``--location`` (or the default file)."""
    location = command.args.get("location", DEFAULT_LOCATION)
    try:
        handle = open(location, "wb")
    except OSError as exc:
        print(f"Failed to open file: {exc}")
        return
    with handle:
        print("Successfully created file")
        try:
            data = encode_recipes(recipes)
        except ValueError as exc:
            print(f"Error encoding data: {exc}")
            return
        try:
            handle.write(data)
        except OSError as exc:
            print(f"Error writing to file: {exc}")
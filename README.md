# spacefactory

A small space factory simulation. The library part models items, recipes,
inventories, assemblers and factories that advance tick by tick. An
interactive prompt lets you build a list of recipes, print it, and store it
in a compact binary file.

## Installation

```
pip install .
```

## The prompt

Start it with:

```
spacefactory
```

It prints `Enter your command. Type exit to exit program` and then reads one
command per line from standard input until a line reading `exit` or the end
of input. Each line is a command name followed by `--key value` pairs.
Command names are matched without regard to case. A `--key` with no value
after it is recorded with an empty value; a word without a leading `--` is
reported and ignored.

| Command        | Arguments                         | Effect                                                                 |
|----------------|-----------------------------------|------------------------------------------------------------------------|
| `add_recipe`   | `--item_id N --item_count N`      | Appends a recipe whose single input is `item_count` of `item_id`, and prints it |
| `view_recipes` |                                   | Prints every recipe in the list                                        |
| `save_recipes` | `--location PATH` (optional)      | Writes the recipe list to `PATH`                                       |
| `load_recipes` | `--location PATH` (optional)      | Replaces the recipe list with the one stored at `PATH`                 |

`item_id` must be an unsigned 64-bit number and `item_count` an unsigned
128-bit number; otherwise an error is printed and nothing is added. Without
`--location`, recipes are saved to and loaded from `assets/recipe.sgs`; the
`assets` directory is not created for you. Problems opening, reading,
decoding or writing a file are printed, and the recipe list is left as it
was. An unrecognised command prints `Unknown command3`, a blank line prints
`Unknown Command2`.

Example session:

```
add_recipe --item_id 1 --item_count 5
view_recipes
save_recipes --location recipes.sgs
load_recipes --location recipes.sgs
exit
```

## Library use

- `spacefactory.item` — `Item` (an `id` and a `count`, with `name()` looking
  up `"null"`, `"Iron Ore"` or `"Iron Ingot"`) and the chaining `ItemBuilder`.
- `spacefactory.transport_order` — `TransportOrder`, a list of items to move.
- `spacefactory.inventory` — `Inventory`, items keyed by id, with `add`,
  `get`, `remove`, `remove_by_id`, `remove_by_id_and_count`, `capacity`,
  `move_items_to`, `add_multiple`, `is_empty`, `clear` and `copy`.
- `spacefactory.recipe` — `Recipe` with inputs, outputs, power draw, heat
  and processing time; `can_be_produced(inventory)` checks the inputs.
- `spacefactory.processing_state` — `ProcessingState.IDLE` or
  `ProcessingState.processing(tick)`.
- `spacefactory.assembler` — `Assembler`, which on each `tick()` moves a
  recipe's inputs out of its input inventory and, after the recipe's
  processing time, adds the outputs to its output inventory.
- `spacefactory.factory` — `EntityBase` and `Factory`, a ticking entity
  built around one assembler.
- `spacefactory.codec` — `encode_recipes` and `decode_recipes` for the file
  format; malformed data raises `DecodeError`.

```python
from spacefactory.factory import Factory
from spacefactory.item import ItemBuilder
from spacefactory.recipe import Recipe

recipe = Recipe()
recipe.input_items = [ItemBuilder().set_count(5).set_id(1).build()]
recipe.output_items = [ItemBuilder().set_count(1).set_id(2).build()]

factory = Factory()
factory.assembler.recipe = recipe
factory.assembler.input_inventory.add(ItemBuilder().set_count(20).set_id(1).build())
factory.tick()
print(factory.assembler.output_inventory.get(2))
```

## What it does not do

- The prompt manages recipes only. Factories, assemblers and inventories
  are not reachable from it; running the simulation is done from Python.
- `add_recipe` only sets a single input item; outputs, power draw, heat and
  processing time keep their defaults.
- An inventory's `max_capacity` is recorded but never enforced, and a
  transport order's `saturate_inv` flag is not acted on.

## Running the tests

```
pip install ".[test]"
pytest
```
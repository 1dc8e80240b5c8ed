"""A space factory simulation: items, recipes, inventories, assemblers and a recipe prompt."""

__version__ = "0.1.0"
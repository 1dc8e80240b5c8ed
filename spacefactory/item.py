"""Items and a fluent builder for them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

ITEM_NAMES: tuple[str, ...] = (
    "null",
    "Iron Ore",
    "Iron Ingot",
)


@dataclass
class Item:
    """An item identified by ``id`` with a quantity ``count``."""

    id: int = 0
    count: int = 1

    def name(self) -> Optional[str]:
        """Return the display name for this item's id, or None if unknown."""
        if 0 <= self.id < len(ITEM_NAMES):
            return ITEM_NAMES[self.id]
        return None

    def copy(self) -> Item:
        """Return an independent copy of this item."""
        return replace(self)


class ItemBuilder:
    """Builds :class:`Item` instances with chained setters."""

    def __init__(self) -> None:
        self._item = Item()

    def set_id(self, item_id: int) -> ItemBuilder:
        """Set the id of the item being built."""
        self._item.id = item_id
        return self

    def set_count(self, count: int) -> ItemBuilder:
        """Set the count of the item being built."""
        self._item.count = count
        return self

    def build(self) -> Item:
        """Return the built item."""
        return self._item.copy()

    def id(self) -> int:
        """Return the id currently set on the builder."""
        return self._item.id

    def count(self) -> int:
        """Return the count currently set on the builder."""
        return self._item.count
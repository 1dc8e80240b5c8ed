"""Item storage keyed by item id."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from spacefactory.item import Item
from spacefactory.transport_order import TransportOrder

MAX_COUNT = 2**128 - 1


@dataclass
class Inventory:
    """Holds items indexed by id. ``max_capacity`` is recorded but not enforced."""

    items: dict[int, Item] = field(default_factory=dict)
    max_capacity: int = 100

    def add(self, item: Item) -> bool:
        """Add ``item``; return True if it merged into an existing stack."""
        existing = self.items.get(item.id)
        if existing is not None:
            existing.count = min(existing.count + item.count, MAX_COUNT)
            return True
        self.items[item.id] = item.copy()
        return False

    def get(self, item_id: int) -> Optional[Item]:
        """Return the stored item with ``item_id``, or None."""
        return self.items.get(item_id)

    def capacity(self) -> int:
        """Return the total count of all items held."""
        return sum(item.count for item in self.items.values())

    def remove(self, item: Item) -> Optional[Item]:
        """Remove up to ``item.count`` of ``item.id`` and return what was removed."""
        found = self.items.get(item.id)
        if found is None:
            return None
        if found.count > item.count:
            found.count -= item.count
            return item.copy()
        return self.items.pop(item.id)

    def remove_by_id(self, item_id: int) -> Optional[Item]:
        """Remove the whole stack with ``item_id`` and return it."""
        return self.items.pop(item_id, None)

    def remove_by_id_and_count(self, item_id: int, count: int) -> Optional[Item]:
        """Remove up to ``count`` of ``item_id`` and return what was removed."""
        found = self.items.get(item_id)
        if found is None:
            return None
        if found.count > count:
            found.count -= count
            return Item(id=item_id, count=count)
        return self.remove_by_id(item_id)

    def get_all(self) -> list[Item]:
        """Return all stored items."""
        return list(self.items.values())

    def move_items_to(self, order: TransportOrder, target: Inventory) -> None:
        """Move the items listed in ``order`` from this inventory into ``target``."""
        for item in order.items:
            removed = self.remove_by_id_and_count(item.id, item.count)
            if removed is not None:
                target.add(removed)

    def add_multiple(self, items: Iterable[Item]) -> None:
        """Add every item in ``items``."""
        for item in items:
            self.add(item)

    def is_empty(self) -> bool:
        """Return True if no items are held."""
        return not self.items

    def clear(self) -> None:
        """Remove all items."""
        self.items.clear()

    def copy(self) -> Inventory:
        """Return an independent copy of this inventory."""
        return Inventory(
            items={key: item.copy() for key, item in self.items.items()},
            max_capacity=self.max_capacity,
        )
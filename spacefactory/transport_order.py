"""Orders describing items to move between inventories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from spacefactory.item import Item


@dataclass
class TransportOrder:
    """A list of items to move and whether to fill the target inventory on overflow."""

    items: list[Item] = field(default_factory=list)
    saturate_inv: bool = True

    def set_items(self, items: Iterable[Item]) -> None:
        """Replace the items of this order with copies of ``items``."""
        self.items = [item.copy() for item in items]
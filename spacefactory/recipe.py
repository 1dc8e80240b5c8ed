"""Recipes describing item conversions."""

from __future__ import annotations

from dataclasses import dataclass, field

from spacefactory.inventory import Inventory
from spacefactory.item import Item
from spacefactory.transport_order import TransportOrder


@dataclass
class Recipe:
    """Input items, output items, power draw, heat per tick and processing time."""

    name: str = "Default"
    input_items: list[Item] = field(default_factory=list)
    output_items: list[Item] = field(default_factory=list)
    power_draw: int = 1
    heat_produced: int = 1
    processing_time: int = 1

    def can_be_produced(self, inventory: Inventory) -> bool:
        """Return True if ``inventory`` holds every required input."""
        for required in self.input_items:
            held = inventory.get(required.id)
            if held is None:
                if required.count != 0:
                    return False
            elif held.count < required.count:
                return False
        return True

    def input_items_as_transport_order(self) -> TransportOrder:
        """Return the non-empty input items as a transport order."""
        return TransportOrder(items=[i.copy() for i in self.input_items if i.count > 0])

    def output_items_as_transport_order(self) -> TransportOrder:
        """Return the non-empty output items as a transport order."""
        return TransportOrder(items=[i.copy() for i in self.output_items if i.count > 0])
"""Factories: ticking entities built around an assembler."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from spacefactory.assembler import Assembler
from spacefactory.inventory import Inventory
from spacefactory.transport_order import TransportOrder


class EntityBase(ABC):
    """Anything that advances with the simulation clock."""

    @abstractmethod
    def tick(self) -> None:
        """Advance the entity by one tick."""


@dataclass
class Factory(EntityBase):
    """A factory whose work is done by a single assembler."""

    assembler: Assembler = field(default_factory=Assembler)

    def move_items_from_output_to(self, target: Inventory, order: TransportOrder) -> None:
        """Move the items in ``order`` from the assembler's output into ``target``."""
        self.assembler.output_inventory.move_items_to(order, target)

    def move_items_from_input_to(self, target: Inventory, order: TransportOrder) -> None:
        """Move the items in ``order`` from the assembler's input into ``target``."""
        self.assembler.input_inventory.move_items_to(order, target)

    def tick(self) -> None:
        """Advance the assembler by one tick."""
        self.assembler.tick()
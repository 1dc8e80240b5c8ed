"""The assembler component that turns input items into output items."""

from __future__ import annotations

from dataclasses import dataclass, field

from spacefactory.inventory import Inventory
from spacefactory.processing_state import ProcessingState
from spacefactory.recipe import Recipe


@dataclass
class Assembler:
    """Crafts its recipe from the input inventory into the output inventory."""

    input_inventory: Inventory = field(default_factory=Inventory)
    processing_inventory: Inventory = field(default_factory=Inventory)
    output_inventory: Inventory = field(default_factory=Inventory)
    recipe: Recipe = field(default_factory=Recipe)
    processing_state: ProcessingState = ProcessingState.IDLE

    def tick(self) -> None:
        """Advance the assembler by one tick."""
        state = self.processing_state
        if state.is_idle():
            if self.recipe.can_be_produced(self.input_inventory):
                self._start_processing()
                if self.recipe.processing_time <= 1:
                    self._end_processing()
            return

        if state.tick + 1 >= self.recipe.processing_time:
            self._end_processing()
            if self.recipe.can_be_produced(self.input_inventory):
                self._start_processing()
        else:
            self.processing_state = state + 1

    def _start_processing(self) -> None:
        self.input_inventory.move_items_to(
            self.recipe.input_items_as_transport_order(),
            self.processing_inventory,
        )
        self.processing_state = ProcessingState.processing(1)

    def _end_processing(self) -> None:
        self.output_inventory.add_multiple(item.copy() for item in self.recipe.output_items)
        self.processing_inventory.clear()
        self.processing_state = ProcessingState.IDLE
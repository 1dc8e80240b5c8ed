"""Processing state of a factory component."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class ProcessingState:
    """Either idle (``tick`` is None) or processing at the given tick."""

    tick: Optional[int] = None

    IDLE: ClassVar[ProcessingState]

    def __post_init__(self) -> None:
        if self.tick is not None and not 0 <= self.tick <= U32_MAX:
            raise ValueError(f"processing tick out of range: {self.tick}")

    @classmethod
    def processing(cls, tick: int) -> ProcessingState:
        """Return a state that is processing at ``tick``."""
        return cls(tick)

    def is_idle(self) -> bool:
        """Return True if nothing is being processed."""
        return self.tick is None

    def __add__(self, other: object) -> ProcessingState:
        """Advance by ``other`` ticks; an idle state starts processing at ``other``."""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        if self.tick is None:
            return ProcessingState.processing(other)
        return ProcessingState.processing(self.tick + other)

    def __repr__(self) -> str:
        if self.tick is None:
            return "ProcessingState.IDLE"
        return f"ProcessingState.processing({self.tick})"


ProcessingState.IDLE = ProcessingState()
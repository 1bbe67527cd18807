"""Two-slot history of the global bulk time constraint."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class StabilityHistory:
    """Most recent and previous global time constraint.

    After every push, previous holds what current held before it.
    """

    current: float | None = None
    previous: float | None = None

    def push(self, value: float) -> float:
        self.previous = self.current
        self.current = value
        return value

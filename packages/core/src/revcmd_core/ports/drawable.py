"""IDrawable: effect sink consumed by target-bound commands."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IDrawable(Protocol):
    """Port for a receiver that performs an effect at a pair of coordinates.

    Supplied by the embedding application; ``DrawCommand`` only delegates.
    """

    def draw(self, x: int, y: int) -> Any:
        """Perform the effect at ``(x, y)``."""
        ...

"""DrawCommand: an action bound to a drawable target and coordinates."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..ports.drawable import IDrawable

logger = logging.getLogger("revcmd.commands")


class DrawCommand(BaseModel):
    """Delegates to ``drawable.draw(x, y)`` with values fixed at construction.

    The target is shared, not copied: every ``execute()`` reproduces the
    same effect on the same drawable, including when nested in a
    ``MacroCommand``. Draw commands are forward-only.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    drawable: IDrawable
    x: int = Field(ge=0)
    y: int = Field(ge=0)

    def execute(self) -> Any:
        return self.drawable.draw(self.x, self.y)


class DrawCanvas:
    """In-memory drawable that records each stroke."""

    def __init__(self) -> None:
        self.strokes: list[tuple[int, int]] = []

    def draw(self, x: int, y: int) -> str:
        self.strokes.append((x, y))
        logger.debug("draw(x:%d, y:%d)", x, y)
        return f"draw(x:{x}, y:{y})"

    def reset(self) -> None:
        """Forget all recorded strokes."""
        self.strokes.clear()

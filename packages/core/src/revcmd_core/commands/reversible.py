"""ReversibleCommand / ActionCommand: commands built from plain callables."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict


class ActionCommand(BaseModel):
    """A forward-only command wrapping a zero-argument callable.

    Has no ``rollback`` so it never satisfies ``IReversibleCommand`` and
    cannot be recorded in a ``CommandHistory``; it can be nested in a
    ``MacroCommand``.

    Usage::

        cmd = action(lambda: canvas.draw(1, 1), name="dot")
        cmd.execute()
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    forward: Callable[[], Any]
    name: str = ""

    def execute(self) -> Any:
        return self.forward()

    def __str__(self) -> str:
        return self.name or type(self).__name__


class ReversibleCommand(BaseModel):
    """A command holding a forward effect and its declared inverse.

    Neither ``execute()`` nor ``rollback()`` touches the command's own
    state, so both can be re-invoked freely.

    Usage::

        schema.add(
            reversible(lambda: "create table", lambda: "drop table")
        )
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    forward: Callable[[], Any]
    inverse: Callable[[], Any]
    name: str = ""

    def execute(self) -> Any:
        return self.forward()

    def rollback(self) -> Any:
        return self.inverse()

    def __str__(self) -> str:
        return self.name or type(self).__name__


def action(forward: Callable[[], Any], name: str = "") -> ActionCommand:
    """Build an :class:`ActionCommand` from a forward callable."""
    return ActionCommand(forward=forward, name=name)


def reversible(
    forward: Callable[[], Any],
    inverse: Callable[[], Any],
    name: str = "",
) -> ReversibleCommand:
    """Build a :class:`ReversibleCommand` from a forward/inverse pair."""
    return ReversibleCommand(forward=forward, inverse=inverse, name=name)

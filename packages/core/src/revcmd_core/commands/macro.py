"""MacroCommand: an ordered composite of commands behind ``execute()``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..dispatch import run_pass
from ..primitives.exceptions import CommandAliasingError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..instrumentation import HookRegistry
    from ..ports.command import ICommand

logger = logging.getLogger("revcmd.macro")


class MacroCommand:
    """Aggregates sub-commands and forwards ``execute()`` to each in order.

    A macro satisfies ``ICommand`` so macros nest inside macros. It
    deliberately has no ``rollback()``: ``undo()`` only forgets the most
    recently appended member and never runs an inverse effect. Use
    ``CommandHistory.rollback()`` when inverse effects are wanted.

    Usage::

        macro = MacroCommand()
        macro.append(DrawCommand(drawable=canvas, x=1, y=1))
        macro.append(DrawCommand(drawable=canvas, x=2, y=2))
        macro.execute()   # draws (1, 1) then (2, 2)
        macro.undo()      # forgets (2, 2); nothing is drawn or erased
    """

    def __init__(
        self,
        commands: list[ICommand[Any]] | None = None,
        *,
        name: str = "macro",
        hooks: HookRegistry | None = None,
    ) -> None:
        self.name = name
        self._hooks = hooks
        self._parent: MacroCommand | None = None
        self._commands: list[ICommand[Any]] = []
        for command in commands or []:
            self.append(command)

    def append(self, command: ICommand[Any]) -> None:
        """Add ``command`` at the tail.

        A nested macro is owned by exactly one parent: appending a macro that
        already belongs to another one, or one that would close a cycle,
        raises ``CommandAliasingError``. ``undo()`` and ``clear()`` release
        ownership.
        """
        if command is self:
            raise CommandAliasingError(f"{self.name} cannot contain itself")
        if isinstance(command, MacroCommand):
            if command._parent is not None:
                raise CommandAliasingError(
                    f"{command.name} is already a member of {command._parent.name}"
                )
            if command in self._ancestors():
                raise CommandAliasingError(
                    f"appending {command.name} to {self.name} would create a cycle"
                )
        if any(existing is command for existing in self._commands):
            raise CommandAliasingError(
                f"{type(command).__name__} instance is already a member of {self.name}"
            )
        self._commands.append(command)
        if isinstance(command, MacroCommand):
            command._parent = self
        logger.debug(
            "Appended %s to %s (size=%d)",
            type(command).__name__,
            self.name,
            len(self._commands),
        )

    def undo(self) -> ICommand[Any] | None:
        """Discard the most recently appended command without running it.

        Returns the discarded command, or ``None`` when the macro is empty.
        """
        if not self._commands:
            logger.debug("Nothing to undo in %s", self.name)
            return None
        command = self._commands.pop()
        _release(command)
        logger.debug(
            "Undid %s from %s (size=%d)",
            type(command).__name__,
            self.name,
            len(self._commands),
        )
        return command

    def clear(self) -> None:
        """Discard every member without running any of them."""
        for command in self._commands:
            _release(command)
        self._commands.clear()
        logger.debug("Cleared %s", self.name)

    def execute(self) -> None:
        """Execute every member in insertion order.

        Results are discarded; only side effects remain. Raises
        ``CommandExecutionError`` at the first failing member.
        """
        run_pass(
            enumerate(list(self._commands)),
            phase="execute",
            operation="macro.execute",
            container=self.name,
            hooks=self._hooks,
        )

    @property
    def commands(self) -> tuple[ICommand[Any], ...]:
        """Snapshot of the current members in insertion order."""
        return tuple(self._commands)

    @property
    def is_empty(self) -> bool:
        return not self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[ICommand[Any]]:
        return iter(tuple(self._commands))

    def __repr__(self) -> str:
        return f"MacroCommand(name={self.name!r}, size={len(self._commands)})"

    def _ancestors(self) -> list[MacroCommand]:
        chain: list[MacroCommand] = []
        parent = self._parent
        while parent is not None:
            chain.append(parent)
            parent = parent._parent
        return chain


def _release(command: ICommand[Any]) -> None:
    if isinstance(command, MacroCommand):
        command._parent = None

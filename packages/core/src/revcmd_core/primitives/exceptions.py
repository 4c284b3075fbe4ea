"""Exceptions for revcmd-core."""

from __future__ import annotations

from typing import Any


class RevCmdError(Exception):
    """Root exception for the entire revcmd toolkit."""


class ConfigurationError(RevCmdError, ValueError):
    """Raised when a history or registry is configured with invalid values."""


class CommandError(RevCmdError):
    """Base class for all command related errors."""


class NotReversibleError(CommandError, TypeError):
    """Raised when a command without a ``rollback`` is added to a history.

    Usage: ``CommandHistory.add`` raises this for action-only commands
    (e.g. ``ActionCommand`` or ``MacroCommand``) since a history must be
    able to roll every entry back.
    """

    def __init__(self, command: object) -> None:
        self.command = command
        super().__init__(
            f"{type(command).__name__} has no rollback() and cannot be "
            f"recorded in a reversible history"
        )


class CommandAliasingError(CommandError, ValueError):
    """Raised when the same command instance would be owned twice.

    Usage: ``MacroCommand.append`` raises this when asked to append itself
    or an instance that is already one of its members.
    """


class CommandExecutionError(CommandError):
    """A command failed during an execute or rollback pass.

    The pass is abandoned at the failing entry. Effects already applied by
    earlier entries are left in place; compensating for them is the
    caller's responsibility.

    Attributes:
        phase: ``"execute"`` or ``"rollback"``.
        position: 0-based offset of the failing entry within the pass.
        index: 0-based offset of the failing entry within its container.
        command: The command that raised.
        container: Name of the history or macro that ran the pass.
    """

    def __init__(
        self,
        *,
        phase: str,
        position: int,
        index: int,
        command: Any,
        container: str,
        cause: BaseException,
    ) -> None:
        self.phase = phase
        self.position = position
        self.index = index
        self.command = command
        self.container = container
        super().__init__(
            f"{phase} failed in {container} at position {position} "
            f"(index {index}, {type(command).__name__}): {cause}"
        )

"""CommandHistory / Schema: ordered ledger of reversible commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .commands.reversible import ReversibleCommand
from .config import HistoryConfig
from .dispatch import run_pass
from .ports.command import IReversibleCommand
from .primitives.exceptions import NotReversibleError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from .instrumentation import HookRegistry

logger = logging.getLogger("revcmd.history")


class CommandHistory:
    """Records reversible commands, executes them forward, rolls them back.

    ``execute()`` visits entries oldest first; ``rollback()`` visits them
    newest first and runs each entry's inverse effect. Neither pass
    changes membership: only ``add``, ``undo`` and ``clear`` do, and the
    latter two never run any effect.

    Both passes are fail-fast. A failing entry aborts the pass with
    ``CommandExecutionError`` and earlier effects are not compensated;
    callers needing atomicity must handle that themselves.

    Usage::

        history = CommandHistory()
        history.add(CreateTable())
        history.add(AddField())
        history.execute()    # ["create table", "add field"]
        history.rollback()   # ["remove field", "drop table"]
        len(history)         # still 2
    """

    def __init__(
        self,
        config: HistoryConfig | None = None,
        *,
        hooks: HookRegistry | None = None,
    ) -> None:
        self.config = config or HistoryConfig()
        self._hooks = hooks
        self._commands: list[IReversibleCommand[Any]] = []

    @property
    def name(self) -> str:
        return self.config.name

    def add(self, command: IReversibleCommand[Any]) -> None:
        """Append ``command`` at the tail.

        Raises:
            NotReversibleError: If ``command`` has no ``rollback()``.
        """
        if not isinstance(command, IReversibleCommand):
            raise NotReversibleError(command)
        self._commands.append(command)
        max_size = self.config.max_size
        if max_size is not None and len(self._commands) > max_size:
            evicted = self._commands.pop(0)
            logger.debug(
                "Evicted %s from %s (max_size=%d)",
                type(evicted).__name__,
                self.name,
                max_size,
            )
        logger.debug(
            "Added %s to %s (size=%d)",
            type(command).__name__,
            self.name,
            len(self._commands),
        )

    def execute(self) -> list[Any]:
        """Execute every entry in insertion order and collect the results."""
        results = run_pass(
            enumerate(list(self._commands)),
            phase="execute",
            operation="history.execute",
            container=self.name,
            hooks=self._hooks,
        )
        self._log_pass("execute", results)
        return results

    def rollback(self) -> list[Any]:
        """Roll back every entry in reverse insertion order and collect results.

        This is a traversal, not an undo: the recorded entries stay put.
        """
        entries = list(enumerate(self._commands))
        entries.reverse()
        results = run_pass(
            entries,
            phase="rollback",
            operation="history.rollback",
            container=self.name,
            hooks=self._hooks,
        )
        self._log_pass("rollback", results)
        return results

    def undo(self) -> IReversibleCommand[Any] | None:
        """Forget the most recent entry without running its rollback.

        Returns the discarded command, or ``None`` when the history is empty.
        """
        if not self._commands:
            logger.debug("Nothing to undo in %s", self.name)
            return None
        command = self._commands.pop()
        logger.debug(
            "Undid %s from %s (size=%d)",
            type(command).__name__,
            self.name,
            len(self._commands),
        )
        return command

    def clear(self) -> None:
        """Forget every entry without running any effect."""
        self._commands.clear()
        logger.debug("Cleared %s", self.name)

    @property
    def commands(self) -> tuple[IReversibleCommand[Any], ...]:
        """Snapshot of the recorded entries in insertion order."""
        return tuple(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[IReversibleCommand[Any]]:
        return iter(tuple(self._commands))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, size={len(self._commands)})"

    def _log_pass(self, phase: str, results: list[Any]) -> None:
        logger.info("%s %s completed: %d command(s)", self.name, phase, len(results))
        if self.config.log_results:
            logger.debug("%s %s results: %r", self.name, phase, results)


class Schema(CommandHistory):
    """A ``CommandHistory`` of schema migrations.

    Accepts named migration steps and ad hoc forward/inverse pairs side by
    side; the history itself only relies on ``execute``/``rollback``.

    Usage::

        schema = Schema()
        schema.add_migration(lambda: "create table", lambda: "drop table")
        schema.add_migration(AddField())
    """

    def __init__(
        self,
        config: HistoryConfig | None = None,
        *,
        hooks: HookRegistry | None = None,
    ) -> None:
        super().__init__(config or HistoryConfig(name="schema"), hooks=hooks)

    def add_migration(
        self,
        execute: IReversibleCommand[Any] | Callable[[], Any],
        rollback: Callable[[], Any] | None = None,
    ) -> None:
        """Record a migration step.

        Either pass a reversible command alone, or a forward callable and
        its inverse callable.
        """
        if rollback is None:
            if not isinstance(execute, IReversibleCommand):
                raise NotReversibleError(execute)
            self.add(execute)
            return
        if not callable(execute) or not callable(rollback):
            raise TypeError("execute and rollback must both be callables")
        self.add(ReversibleCommand(forward=execute, inverse=rollback))

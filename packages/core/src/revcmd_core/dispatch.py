"""Fail-fast traversal shared by ``CommandHistory`` and ``MacroCommand``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .instrumentation import get_hook_registry
from .primitives.exceptions import CommandExecutionError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .instrumentation import HookRegistry

logger = logging.getLogger("revcmd.dispatch")


def run_pass(
    entries: Iterable[tuple[int, Any]],
    *,
    phase: str,
    operation: str,
    container: str,
    hooks: HookRegistry | None = None,
) -> list[Any]:
    """Invoke ``phase`` ("execute" or "rollback") on each ``(index, command)``.

    Entries are visited in the order given; results are collected in that
    same order. The first exception aborts the pass and is re-raised as
    :class:`CommandExecutionError` chained to the original. Nothing already
    applied is compensated.
    """
    registry = hooks if hooks is not None else get_hook_registry()
    results: list[Any] = []
    for position, (index, command) in enumerate(entries):
        method = getattr(command, phase)
        attributes = {
            "container": container,
            "command_type": type(command),
            "index": index,
            "position": position,
        }
        try:
            result = registry.execute_all(operation, attributes, method)
        except Exception as exc:
            if not isinstance(exc, CommandExecutionError):
                logger.exception(
                    "%s of %s failed in %s at position %d (index %d)",
                    phase,
                    type(command).__name__,
                    container,
                    position,
                    index,
                )
            raise CommandExecutionError(
                phase=phase,
                position=position,
                index=index,
                command=command,
                container=container,
                cause=exc,
            ) from exc
        results.append(result)
    return results

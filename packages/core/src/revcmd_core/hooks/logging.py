"""LoggingHook: logs every command invocation with its duration."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import CommandExecutionError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("revcmd.hooks")


class LoggingHook:
    """Logs command invocations: operation, command type, position, duration."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def __call__(
        self,
        operation: str,
        attributes: dict[str, Any],
        next_handler: Callable[[], Any],
    ) -> Any:
        cmd_type = attributes.get("command_type")
        cmd_name = cmd_type.__name__ if isinstance(cmd_type, type) else "<unknown>"
        container = attributes.get("container")
        position = attributes.get("position")
        logger.log(
            self.level,
            "%s %s (container=%s, position=%s)",
            operation,
            cmd_name,
            container,
            position,
        )
        start = time.perf_counter()
        try:
            result = next_handler()
        except CommandExecutionError:
            # already logged where the nested pass failed
            raise
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            logger.exception(
                "%s %s failed after %.2fms", operation, cmd_name, elapsed
            )
            raise
        elapsed = (time.perf_counter() - start) * 1000
        logger.log(
            self.level, "%s %s completed in %.2fms", operation, cmd_name, elapsed
        )
        return result

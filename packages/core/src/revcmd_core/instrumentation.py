"""Instrumentation hooks: wrap every command invocation with filtering."""

from __future__ import annotations

import fnmatch
import logging
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("revcmd.instrumentation")

_MATCH_CACHE_MAX_SIZE = 2048


@runtime_checkable
class InstrumentationHook(Protocol):
    """Protocol for instrumentation hooks (tracing, timing, auditing, etc.).

    A hook must call ``next_handler()`` exactly once and return its result,
    or raise. Exceptions raised by the command propagate through every hook.
    """

    def __call__(
        self,
        operation: str,
        attributes: dict[str, Any],
        next_handler: Callable[[], Any],
    ) -> Any:
        """Wrap a command invocation with instrumentation."""
        ...


class HookRegistration:
    """A registered hook with filtering and priority."""

    def __init__(
        self,
        hook: InstrumentationHook,
        *,
        priority: int = 0,
        predicate: Callable[[str, dict[str, Any]], bool] | None = None,
        operations: list[str] | None = None,
        command_types: list[type[Any]] | None = None,
        enabled: bool = True,
    ) -> None:
        self.hook = hook
        self.priority = priority
        self.predicate = predicate
        self.operations = operations or []
        self.command_types = command_types or []
        self.enabled = enabled
        self._match_cache: dict[str, bool] = {}

    def matches(self, operation: str, attributes: dict[str, Any]) -> bool:
        """Check if this registration applies to the operation."""
        if not self.enabled:
            return False

        if self.predicate is not None and not self.predicate(operation, attributes):
            return False

        if not self._matches_operation(operation):
            return False

        return self._matches_command_type(attributes)

    def _matches_operation(self, operation: str) -> bool:
        if not self.operations:
            return True
        if operation in self._match_cache:
            return self._match_cache[operation]
        matched = any(
            fnmatch.fnmatch(operation, pattern) for pattern in self.operations
        )
        if len(self._match_cache) >= _MATCH_CACHE_MAX_SIZE:
            self._match_cache.clear()
        self._match_cache[operation] = matched
        return matched

    def _matches_command_type(self, attributes: dict[str, Any]) -> bool:
        if not self.command_types:
            return True
        cmd_type = attributes.get("command_type")
        if cmd_type is None:
            return True
        return cmd_type in self.command_types

    def clear_cache(self) -> None:
        """Clear the match cache."""
        self._match_cache.clear()


class HookRegistry:
    """Registry for multiple instrumentation hooks with filtering.

    Usage::

        registry = HookRegistry()
        registry.register(LoggingHook(), operations=["history.*"])
        history = CommandHistory(hooks=registry)
    """

    def __init__(self) -> None:
        self._registrations: list[HookRegistration] = []

    def register(
        self,
        hook: InstrumentationHook,
        *,
        priority: int = 0,
        predicate: Callable[[str, dict[str, Any]], bool] | None = None,
        operations: list[str] | None = None,
        command_types: list[type[Any]] | None = None,
        enabled: bool = True,
    ) -> HookRegistration:
        """Register a hook with optional filtering.

        Lower ``priority`` values wrap outermost.
        """
        registration = HookRegistration(
            hook,
            priority=priority,
            predicate=predicate,
            operations=operations,
            command_types=command_types,
            enabled=enabled,
        )
        self._registrations.append(registration)
        self._registrations.sort(key=lambda r: r.priority)
        logger.debug(
            "Registered hook %s (priority=%d, operations=%s)",
            type(hook).__name__,
            priority,
            registration.operations or ["*"],
        )
        return registration

    def execute_all(
        self,
        operation: str,
        attributes: dict[str, Any],
        next_handler: Callable[[], Any],
    ) -> Any:
        """Run ``next_handler`` wrapped by all matching hooks in priority order."""
        matching = [r for r in self._registrations if r.matches(operation, attributes)]
        if not matching:
            return next_handler()

        def pipeline(index: int = 0) -> Any:
            if index >= len(matching):
                return next_handler()
            registration = matching[index]
            return registration.hook(
                operation,
                attributes,
                lambda: pipeline(index + 1),
            )

        return pipeline()

    def __len__(self) -> int:
        return len(self._registrations)

    def clear(self) -> None:
        """Remove all registrations and clear caches."""
        self.clear_caches()
        self._registrations.clear()

    def clear_caches(self) -> None:
        """Clear all match caches without removing registrations."""
        for registration in self._registrations:
            registration.clear_cache()


_hook_registry_var: ContextVar[HookRegistry | None] = ContextVar(
    "revcmd_hook_registry", default=None
)


def get_hook_registry() -> HookRegistry:
    """Get the hook registry for the current context.

    Creates a fresh ``HookRegistry`` on first access within each context.
    Containers built without an explicit ``hooks`` argument resolve this
    registry at invocation time.
    """
    registry = _hook_registry_var.get()
    if registry is None:
        registry = HookRegistry()
        _hook_registry_var.set(registry)
    return registry


def set_hook_registry(registry: HookRegistry | None) -> None:
    """Set a custom hook registry in the current context.

    Passing ``None`` resets it so the next ``get_hook_registry()`` call
    creates a fresh one.
    """
    _hook_registry_var.set(registry)

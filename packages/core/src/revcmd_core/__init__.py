"""revcmd-core: reversible command execution.

Commands record deferred effects; ``MacroCommand`` composes them;
``CommandHistory`` / ``Schema`` execute them in order and roll them back
in reverse order.
"""

from __future__ import annotations

# ── Commands ─────────────────────────────────────────────────────
from .commands import (
    ActionCommand,
    AddField,
    CreateTable,
    DrawCanvas,
    DrawCommand,
    MacroCommand,
    MigrationStep,
    ReversibleCommand,
    action,
    reversible,
)
from .config import HistoryConfig

# ── History ──────────────────────────────────────────────────────
from .history import CommandHistory, Schema

# ── Instrumentation ──────────────────────────────────────────────
from .hooks import LoggingHook
from .instrumentation import (
    HookRegistration,
    HookRegistry,
    InstrumentationHook,
    get_hook_registry,
    set_hook_registry,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import ICommand, IDrawable, IReversibleCommand

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    CommandAliasingError,
    CommandError,
    CommandExecutionError,
    ConfigurationError,
    NotReversibleError,
    RevCmdError,
)

__all__ = [
    "ActionCommand",
    "AddField",
    "CommandAliasingError",
    "CommandError",
    "CommandExecutionError",
    "CommandHistory",
    "ConfigurationError",
    "CreateTable",
    "DrawCanvas",
    "DrawCommand",
    "HistoryConfig",
    "HookRegistration",
    "HookRegistry",
    "ICommand",
    "IDrawable",
    "IReversibleCommand",
    "InstrumentationHook",
    "LoggingHook",
    "MacroCommand",
    "MigrationStep",
    "NotReversibleError",
    "RevCmdError",
    "ReversibleCommand",
    "Schema",
    "action",
    "get_hook_registry",
    "reversible",
    "set_hook_registry",
]

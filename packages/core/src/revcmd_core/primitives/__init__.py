"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    CommandAliasingError,
    CommandError,
    CommandExecutionError,
    ConfigurationError,
    NotReversibleError,
    RevCmdError,
)

__all__ = [
    "CommandAliasingError",
    "CommandError",
    "CommandExecutionError",
    "ConfigurationError",
    "NotReversibleError",
    "RevCmdError",
]

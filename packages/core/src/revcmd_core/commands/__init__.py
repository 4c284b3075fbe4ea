"""Concrete command types."""

from .draw import DrawCanvas, DrawCommand
from .macro import MacroCommand
from .migrations import AddField, CreateTable, MigrationStep
from .reversible import ActionCommand, ReversibleCommand, action, reversible

__all__ = [
    "ActionCommand",
    "AddField",
    "CreateTable",
    "DrawCanvas",
    "DrawCommand",
    "MacroCommand",
    "MigrationStep",
    "ReversibleCommand",
    "action",
    "reversible",
]

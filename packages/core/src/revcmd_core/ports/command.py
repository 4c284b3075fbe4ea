"""ICommand / IReversibleCommand: command capability protocols."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ICommand(Protocol[T_co]):
    """Port for a single deferred, effectful operation.

    Calling ``execute()`` must not mutate the command itself, so it can be
    invoked any number of times (including from inside a ``MacroCommand``).
    Whatever the operation returns is treated as an opaque result.
    """

    def execute(self) -> T_co:
        """Perform the forward effect and return a descriptive result."""
        ...


@runtime_checkable
class IReversibleCommand(Protocol[T_co]):
    """Port for a command that also declares an inverse effect.

    The framework does not verify that ``rollback()`` truly undoes
    ``execute()``; it is a contract honoured by the command author.
    Only commands satisfying this protocol can be recorded in a
    ``CommandHistory``.
    """

    def execute(self) -> T_co:
        """Perform the forward effect and return a descriptive result."""
        ...

    def rollback(self) -> T_co:
        """Perform the inverse effect and return a descriptive result."""
        ...

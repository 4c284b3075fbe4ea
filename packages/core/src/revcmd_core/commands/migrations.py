"""Named migration steps: one type per kind of schema change."""

from __future__ import annotations

from abc import abstractmethod

from pydantic import BaseModel, ConfigDict


class MigrationStep(BaseModel):
    """Base for named, reversible schema migration steps.

    Subclasses return a label describing the change from ``execute()`` and
    the label of its inverse from ``rollback()``.
    """

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def execute(self) -> str: ...

    @abstractmethod
    def rollback(self) -> str: ...


class CreateTable(MigrationStep):
    def execute(self) -> str:
        return "create table"

    def rollback(self) -> str:
        return "drop table"


class AddField(MigrationStep):
    def execute(self) -> str:
        return "add field"

    def rollback(self) -> str:
        return "remove field"

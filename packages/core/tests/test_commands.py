from __future__ import annotations

import pydantic
import pytest

from revcmd_core.commands.draw import DrawCanvas, DrawCommand
from revcmd_core.commands.migrations import AddField, CreateTable, MigrationStep
from revcmd_core.commands.reversible import (
    ActionCommand,
    ReversibleCommand,
    action,
    reversible,
)
from revcmd_core.ports.command import ICommand, IReversibleCommand
from revcmd_core.ports.drawable import IDrawable


def test_reversible_command_runs_forward_and_inverse() -> None:
    cmd = reversible(lambda: "create table", lambda: "drop table", name="t")

    assert cmd.execute() == "create table"
    assert cmd.rollback() == "drop table"
    assert cmd.execute() == "create table"
    assert str(cmd) == "t"
    assert isinstance(cmd, IReversibleCommand)


def test_action_command_has_no_rollback() -> None:
    cmd = action(lambda: 42)

    assert cmd.execute() == 42
    assert isinstance(cmd, ICommand)
    assert not isinstance(cmd, IReversibleCommand)
    assert str(cmd) == "ActionCommand"


def test_commands_are_frozen() -> None:
    cmd = reversible(lambda: "a", lambda: "b")

    with pytest.raises(pydantic.ValidationError):
        cmd.name = "renamed"  # type: ignore[misc]


def test_constructors_require_callables() -> None:
    with pytest.raises(pydantic.ValidationError):
        ReversibleCommand(forward="a", inverse=lambda: "b")  # type: ignore[arg-type]
    with pytest.raises(pydantic.ValidationError):
        ActionCommand(forward=None)  # type: ignore[arg-type]


def test_named_migration_steps() -> None:
    assert (CreateTable().execute(), CreateTable().rollback()) == (
        "create table",
        "drop table",
    )
    assert (AddField().execute(), AddField().rollback()) == (
        "add field",
        "remove field",
    )
    assert isinstance(CreateTable(), IReversibleCommand)


def test_migration_step_is_abstract() -> None:
    with pytest.raises(TypeError):
        MigrationStep()  # type: ignore[abstract]


def test_draw_command_delegates_to_the_bound_target() -> None:
    canvas = DrawCanvas()
    cmd = DrawCommand(drawable=canvas, x=3, y=7)

    assert cmd.execute() == "draw(x:3, y:7)"
    assert cmd.execute() == "draw(x:3, y:7)"
    assert canvas.strokes == [(3, 7), (3, 7)]
    assert isinstance(canvas, IDrawable)
    assert not isinstance(cmd, IReversibleCommand)


def test_draw_command_shares_its_target() -> None:
    canvas = DrawCanvas()
    first = DrawCommand(drawable=canvas, x=1, y=1)
    second = DrawCommand(drawable=canvas, x=2, y=2)

    first.execute()
    second.execute()

    assert first.drawable is second.drawable is canvas
    assert canvas.strokes == [(1, 1), (2, 2)]


def test_draw_command_accepts_any_drawable() -> None:
    class Plotter:
        def __init__(self) -> None:
            self.points: list[tuple[int, int]] = []

        def draw(self, x: int, y: int) -> None:
            self.points.append((x, y))

    plotter = Plotter()
    DrawCommand(drawable=plotter, x=0, y=9).execute()

    assert plotter.points == [(0, 9)]


@pytest.mark.parametrize(
    ("x", "y"),
    [(-1, 0), (0, -5)],
)
def test_draw_command_rejects_negative_coordinates(x: int, y: int) -> None:
    with pytest.raises(pydantic.ValidationError):
        DrawCommand(drawable=DrawCanvas(), x=x, y=y)


def test_canvas_logs_strokes_and_resets(caplog: pytest.LogCaptureFixture) -> None:
    canvas = DrawCanvas()

    with caplog.at_level("DEBUG", logger="revcmd.commands"):
        DrawCommand(drawable=canvas, x=4, y=2).execute()

    assert [r.getMessage() for r in caplog.records] == ["draw(x:4, y:2)"]
    assert caplog.records[0].args == (4, 2)

    canvas.reset()
    assert canvas.strokes == []


def test_draw_command_rejects_non_drawable_targets() -> None:
    with pytest.raises(pydantic.ValidationError):
        DrawCommand(drawable=object(), x=1, y=1)  # type: ignore[arg-type]

"""Mini README: Tests for the Typer console entry point."""

from __future__ import annotations

from typer.testing import CliRunner

import main_route_console
from main_route_console import cli

runner = CliRunner()


def test_fly_instant_prints_every_step() -> None:
    result = runner.invoke(cli, ["fly", "SYD", "SIN", "--segments", "5", "--instant"])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0].startswith("Viewport")
    assert sum("heading" in line for line in lines) == 5
    assert lines[-1] == "Arrived at SIN."


def test_fly_unknown_code_exits_with_error() -> None:
    result = runner.invoke(cli, ["fly", "ZZZ", "SIN", "--instant"])

    assert result.exit_code == 1


def test_airports_lists_demo_table() -> None:
    result = runner.invoke(cli, ["airports"])

    assert result.exit_code == 0
    assert "SYD" in result.stdout
    assert "from $450" in result.stdout


def test_fly_rejects_non_positive_interval() -> None:
    result = runner.invoke(cli, ["fly", "SYD", "SIN", "--interval-ms", "0"])

    assert result.exit_code == 2
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_fly_live_surfaces_output_errors_instead_of_hanging(monkeypatch) -> None:
    """A closed stdout during a live run ends the command with that error."""

    def closed_pipe(position, heading) -> None:
        raise BrokenPipeError("stdout closed")

    monkeypatch.setattr(main_route_console, "_echo_tick", closed_pipe)

    result = runner.invoke(cli, ["fly", "SYD", "SIN", "--segments", "3", "--interval-ms", "1"])

    assert result.exit_code != 0
    assert isinstance(result.exception, BrokenPipeError)
    assert "Arrived" not in result.stdout

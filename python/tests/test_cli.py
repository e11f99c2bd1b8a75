"""Command-line option handling (the interactive UI is never started)."""

from __future__ import annotations

import pytest
import typer
from typer.testing import CliRunner

import main
from backend.models.config import GameConfig

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [
        ["--size", "1"],
        ["--size", "9"],
        ["--duration", "0"],
        ["--max-moves", "-5"],
        ["--theme", "neon"],
    ],
    ids=["size-small", "size-large", "duration", "max-moves", "theme"],
)
def test_bad_options_exit_with_usage_error(
    args: list[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    started: list[GameConfig] = []
    monkeypatch.setattr(main, "run", lambda config, **kw: started.append(config))
    result = runner.invoke(main.app, args)
    assert result.exit_code == 2
    assert started == []


def test_options_reach_the_frontend(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[GameConfig, dict]] = []
    monkeypatch.setattr(main, "run", lambda config, **kw: calls.append((config, kw)))
    result = runner.invoke(
        main.app, ["-s", "4", "-d", "90", "--theme", "ocean", "--seed", "3"]
    )
    assert result.exit_code == 0, result.output
    config, kwargs = calls[0]
    assert (config.grid_size, config.duration, config.max_moves) == (4, 90, 500)
    assert kwargs == {"theme": "ocean", "seed": 3}


def test_build_config_reports_bad_values() -> None:
    with pytest.raises(typer.BadParameter, match="Duration"):
        main.build_config(3, -1, 500)

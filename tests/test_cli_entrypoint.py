from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from coraline import main
from coraline.config import Settings

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def test_console_script_points_at_typer_app() -> None:
    tomllib = pytest.importorskip("tomllib")

    scripts = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]["scripts"]

    module_name, _, attribute = scripts["coraline"].partition(":")
    assert module_name == "coraline.main"
    assert getattr(main, attribute) is main.app


def test_help_lists_commands_and_hides_aliases() -> None:
    result = CliRunner().invoke(main.app, ["--help"])

    assert result.exit_code == 0
    for command in ("speak", "listen", "voices"):
        assert command in result.stdout
    assert "speech-to-text" not in result.stdout


@pytest.mark.parametrize("alias", ["text-to-speech", "speech-to-text"])
def test_aliases_resolve_to_commands(alias: str, monkeypatch) -> None:
    loaded = Settings(_env_file=None, openai_api_key="sk-test")
    monkeypatch.setattr(main, "get_settings", lambda: loaded)

    result = CliRunner().invoke(main.app, [alias, "--help"])

    assert result.exit_code == 0
    assert "--output-file" in result.stdout

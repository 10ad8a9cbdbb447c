# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from tictactoe_build.config import Settings

from .fakes import make_project, write_fake_elm_make

VALID_ELM = """\
module Main exposing (main)

import Html exposing (text)

main =
    text "tic-tac-toe"
"""

INVALID_ELM = """\
module Main exposing (main)

main = syntax error (
"""


@pytest.fixture()
def fake_elm_command(tmp_path: Path) -> tuple[str, ...]:
    tools = tmp_path / "tools"
    tools.mkdir()
    return write_fake_elm_make(tools)


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    """
    Project root with a vendored Bootstrap dist and no Elm source yet.

    We intentionally keep the project under its own directory so that
    file-set assertions on <project>/src are not polluted by test tooling.
    """
    return make_project(tmp_path / "project")


@pytest.fixture()
def settings(project: Path, fake_elm_command: tuple[str, ...]) -> Settings:
    return Settings.for_project(project, elm_command=fake_elm_command)


@pytest.fixture()
def write_elm(settings: Settings):
    def _write(text: str = VALID_ELM) -> Path:
        settings.elm_source.parent.mkdir(parents=True, exist_ok=True)
        settings.elm_source.write_text(text, "utf-8")
        return settings.elm_source

    return _write

# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from tictactoe_build.config import Settings


def test_defaults_without_environment(monkeypatch, tmp_path: Path) -> None:
    # Keep a stray .env in the working directory out of the picture.
    monkeypatch.chdir(tmp_path)
    for var in ("PROJECT_ROOT", "WEBROOT", "ELM_SOURCE", "ELM_COMMAND", "STRICT_COPY", "BOOTSTRAP_DIST"):
        monkeypatch.delenv(f"TTT_{var}", raising=False)

    s = Settings.from_env()

    assert s.project_root == Path(".")
    assert s.bootstrap_dist == Path("bower_components/bootstrap/dist")
    assert s.webroot == Path("src")
    assert s.elm_source == Path("src/scripts/tictactoe.elm")
    assert s.elm_command == ("elm-make",)
    assert s.strict_copy is False
    assert s.scripts_dir == Path("src/scripts")


def test_environment_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TTT_PROJECT_ROOT", str(tmp_path))
    monkeypatch.setenv("TTT_ELM_COMMAND", "npx elm-make")
    monkeypatch.setenv("TTT_STRICT_COPY", "yes")

    s = Settings.from_env()

    assert s.webroot == tmp_path / "src"
    assert s.fonts_dir == tmp_path / "src" / "fonts"
    assert s.elm_command == ("npx", "elm-make")
    assert s.strict_copy is True


def test_for_project_matches_env_layout(tmp_path: Path) -> None:
    s = Settings.for_project(tmp_path)
    assert s.bootstrap_dist == tmp_path / "bower_components" / "bootstrap" / "dist"
    assert s.styles_dir == tmp_path / "src" / "styles"

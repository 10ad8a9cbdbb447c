# src/tictactoe_build/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole build.
- Every value has a default: a plain `tictactoe-build` needs no variables.
- Paths derive from the project root unless overridden one by one.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TTT"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_argv(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return tuple(shlex.split(raw))


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- Project layout ----
    project_root: Path
    bootstrap_dist: Path
    webroot: Path
    elm_source: Path

    # ---- Tools ----
    elm_command: tuple[str, ...]
    strict_copy: bool

    @property
    def styles_dir(self) -> Path:
        return self.webroot / "styles"

    @property
    def scripts_dir(self) -> Path:
        return self.webroot / "scripts"

    @property
    def fonts_dir(self) -> Path:
        return self.webroot / "fonts"

    @staticmethod
    def for_project(
        project_root: str | Path,
        *,
        elm_command: tuple[str, ...] = ("elm-make",),
        strict_copy: bool = False,
    ) -> "Settings":
        """Default layout rooted at `project_root` (no environment involved)."""
        root = Path(project_root)
        webroot = root / "src"
        return Settings(
            app_name="tictactoe-build",
            log_level="INFO",
            log_dir=root / ".local" / "tictactoe-build",
            project_root=root,
            bootstrap_dist=root / "bower_components" / "bootstrap" / "dist",
            webroot=webroot,
            elm_source=webroot / "scripts" / "tictactoe.elm",
            elm_command=elm_command,
            strict_copy=strict_copy,
        )

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv(find_dotenv(usecwd=True), override=False)

        project_root = _env_path(_k("PROJECT_ROOT"), Path("."))
        webroot = _env_path(_k("WEBROOT"), project_root / "src")

        return Settings(
            app_name=_env(_k("APP_NAME"), "tictactoe-build"),
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            log_dir=_env_path(_k("LOG_DIR"), project_root / ".local" / "tictactoe-build"),
            project_root=project_root,
            bootstrap_dist=_env_path(
                _k("BOOTSTRAP_DIST"), project_root / "bower_components" / "bootstrap" / "dist"
            ),
            webroot=webroot,
            elm_source=_env_path(_k("ELM_SOURCE"), webroot / "scripts" / "tictactoe.elm"),
            elm_command=_env_argv(_k("ELM_COMMAND"), ("elm-make",)),
            strict_copy=_env_bool(_k("STRICT_COPY"), False),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS

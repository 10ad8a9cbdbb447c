# src/tictactoe_build/errors.py

"""
Build error taxonomy.

ConfigurationError and its subclasses are raised before any action runs.
SourceNotFoundError and CompilerError abort only the failing task (and its dependents).
"""

from __future__ import annotations

from collections.abc import Sequence


class BuildError(Exception):
    """Base class for every error the build reports."""


class ConfigurationError(BuildError):
    pass


class DuplicateTaskError(ConfigurationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Task '{name}' is already registered")
        self.name = name


class CyclicDependencyError(ConfigurationError):
    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = tuple(cycle)
        super().__init__("Cyclic dependency: " + " -> ".join(self.cycle))


class UnknownTaskError(BuildError):
    def __init__(self, name: str, *, required_by: str | None = None) -> None:
        msg = f"Unknown task '{name}'"
        if required_by:
            msg += f" (required by '{required_by}')"
        super().__init__(msg)
        self.name = name
        self.required_by = required_by


class SourceNotFoundError(BuildError):
    def __init__(self, pattern: str) -> None:
        super().__init__(f"Source not found: {pattern}")
        self.pattern = pattern


class CompilerError(BuildError):
    """The external compiler failed; `diagnostic` holds the tool's own output."""

    def __init__(self, message: str, *, diagnostic: str = "", returncode: int | None = None) -> None:
        full = message if not diagnostic else f"{message}\n{diagnostic.rstrip()}"
        super().__init__(full)
        self.diagnostic = diagnostic
        self.returncode = returncode

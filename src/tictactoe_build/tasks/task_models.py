# src/tictactoe_build/tasks/task_models.py

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

TaskAction = Callable[[], Awaitable[None]]


class TaskStatus(StrEnum):
    """
    Per-run task lifecycle status.

    Notes:
    - SUCCEEDED and FAILED are terminal for a run; there are no retries.
    - A task whose prerequisite failed never starts and stays PENDING.
    """

    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class Task:
    name: str
    prerequisites: tuple[str, ...] = ()
    action: TaskAction | None = None
    description: str = ""


@dataclass(slots=True, frozen=True)
class CopySpec:
    """
    `files` are exact paths (never glob-expanded, must exist).
    `sources` are glob patterns; escape literal parts with glob.escape.
    """

    dest: Path
    files: tuple[Path, ...] = ()
    sources: tuple[str, ...] = ()
    strict: bool = False


@dataclass(slots=True, frozen=True)
class CompileSpec:
    source: Path
    dest: Path
    warn: bool = False

    @property
    def output_name(self) -> str:
        return self.source.stem + ".js"


@dataclass(slots=True)
class RunReport:
    """What happened during one `TaskRunner.run` call."""

    target: str
    statuses: dict[str, TaskStatus] = field(default_factory=dict)
    durations: dict[str, float] = field(default_factory=dict)
    executed: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.statuses.get(self.target) == TaskStatus.SUCCEEDED

    def failed_tasks(self) -> list[str]:
        return [name for name, st in self.statuses.items() if st == TaskStatus.FAILED]

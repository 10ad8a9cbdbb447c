# src/tictactoe_build/tasks/task_registry.py

from __future__ import annotations

"""
Task registry.

An explicit object built by the caller (one per build invocation) that holds the
prerequisite graph as an adjacency mapping: task name -> prerequisite names.

Acyclicity is checked on every registration with a three-colour depth-first visit.
Prerequisites may be forward references; a cycle can only close once all of its
members are registered, so it is always caught by the registration that closes it.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from ..errors import ConfigurationError, CyclicDependencyError, DuplicateTaskError, UnknownTaskError
from .task_models import Task, TaskAction

logger = logging.getLogger(__name__)


class _Mark(Enum):
    WHITE = 0  # unvisited
    GREY = 1  # on the current DFS path
    BLACK = 2  # fully explored


class TaskRegistry:
    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._frozen = False

    def register(
        self,
        name: str,
        prerequisites: Iterable[str] = (),
        action: TaskAction | None = None,
        *,
        description: str = "",
    ) -> Task:
        if self._frozen:
            raise ConfigurationError(f"Cannot register '{name}': registry is frozen for a running build")

        name = (name or "").strip()
        if not name:
            raise ConfigurationError("Task name must be a non-empty string")
        if name in self._tasks:
            raise DuplicateTaskError(name)

        prereqs = tuple((dep or "").strip() for dep in prerequisites)
        if not all(prereqs):
            raise ConfigurationError(f"Task '{name}' lists an empty prerequisite name")
        if name in prereqs:
            raise CyclicDependencyError((name, name))

        task = Task(name=name, prerequisites=prereqs, action=action, description=description)
        self._tasks[name] = task

        cycle = self._find_cycle(name)
        if cycle is not None:
            del self._tasks[name]
            raise CyclicDependencyError(cycle)

        logger.debug("Registered task %r prerequisites=%s", name, list(prereqs))
        return task

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> Task:
        task = self._tasks.get(name)
        if task is None:
            raise UnknownTaskError(name)
        return task

    def names(self) -> list[str]:
        return list(self._tasks)

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def plan(self, name: str) -> list[str]:
        """
        Return the prerequisite closure of `name` in dependency order (prerequisites first).

        Raises UnknownTaskError if `name` or any transitive prerequisite is not registered,
        and CyclicDependencyError if a cycle is reachable. Performs no side effects.
        """
        if name not in self._tasks:
            raise UnknownTaskError(name)

        marks: dict[str, _Mark] = {}
        order: list[str] = []
        path: list[str] = []

        def visit(current: str, required_by: str | None) -> None:
            task = self._tasks.get(current)
            if task is None:
                raise UnknownTaskError(current, required_by=required_by)

            mark = marks.get(current, _Mark.WHITE)
            if mark is _Mark.BLACK:
                return
            if mark is _Mark.GREY:
                raise CyclicDependencyError(path[path.index(current):] + [current])

            marks[current] = _Mark.GREY
            path.append(current)
            for dep in task.prerequisites:
                visit(dep, current)
            path.pop()
            marks[current] = _Mark.BLACK
            order.append(current)

        visit(name, None)
        return order

    def _find_cycle(self, start: str) -> list[str] | None:
        """Three-colour DFS from `start`; unregistered names are treated as leaves."""
        marks: dict[str, _Mark] = {}
        path: list[str] = []

        def visit(current: str) -> list[str] | None:
            mark = marks.get(current, _Mark.WHITE)
            if mark is _Mark.GREY:
                return path[path.index(current):] + [current]
            if mark is _Mark.BLACK:
                return None

            task = self._tasks.get(current)
            if task is None:
                return None

            marks[current] = _Mark.GREY
            path.append(current)
            for dep in task.prerequisites:
                found = visit(dep)
                if found is not None:
                    return found
            path.pop()
            marks[current] = _Mark.BLACK
            return None

        return visit(start)

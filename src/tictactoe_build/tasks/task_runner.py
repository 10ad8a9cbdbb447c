# src/tictactoe_build/tasks/task_runner.py

from __future__ import annotations

"""
Task runner.

Executes a registered task and, depth-first, every transitive prerequisite:
- each task is scheduled at most once per run (memoized by name),
- prerequisites of one task run concurrently with each other,
- a task's own action starts only after all of its prerequisites succeeded,
- the first prerequisite failure is re-raised to the dependent (and so to `run`).

Siblings already in flight are not cancelled when one of them fails; the runner
joins them before propagating, so no work is left running after `run` returns.
"""

import asyncio
import logging
import time
from collections.abc import Callable

from .task_models import RunReport, TaskStatus
from .task_registry import TaskRegistry

logger = logging.getLogger(__name__)

_Schedule = Callable[[str], "asyncio.Task[None]"]


def format_elapsed(seconds: float) -> str:
    if seconds < 1.0:
        return f"{seconds * 1000:.0f} ms"
    return f"{seconds:.2f} s"


class TaskRunner:
    def __init__(self, registry: TaskRegistry) -> None:
        self.registry = registry
        # Report of the most recent run, kept even when the run raised.
        self.last_report: RunReport | None = None

    async def run(self, name: str) -> RunReport:
        """
        Run `name` and its prerequisites.

        Unknown names and cycles are reported by `registry.plan` before anything executes.
        """
        order = self.registry.plan(name)
        self.registry.freeze()

        report = RunReport(target=name, statuses={n: TaskStatus.PENDING for n in order})
        self.last_report = report
        scheduled: dict[str, asyncio.Task[None]] = {}

        def schedule(task_name: str) -> asyncio.Task[None]:
            existing = scheduled.get(task_name)
            if existing is None:
                existing = asyncio.create_task(
                    self._execute(task_name, schedule, report),
                    name=f"build:{task_name}",
                )
                scheduled[task_name] = existing
            return existing

        logger.debug("Run plan for %r: %s", name, order)
        await schedule(name)
        return report

    async def _execute(self, name: str, schedule: _Schedule, report: RunReport) -> None:
        task = self.registry.get(name)

        if task.prerequisites:
            results = await asyncio.gather(
                *(schedule(dep) for dep in task.prerequisites),
                return_exceptions=True,
            )
            for dep, result in zip(task.prerequisites, results):
                if isinstance(result, BaseException):
                    logger.debug("Task %r not started: prerequisite %r failed", name, dep)
                    raise result

        report.statuses[name] = TaskStatus.RUNNING
        logger.info("Starting '%s'...", name)
        started = time.perf_counter()

        try:
            if task.action is not None:
                await task.action()
        except Exception:
            elapsed = time.perf_counter() - started
            report.statuses[name] = TaskStatus.FAILED
            report.durations[name] = elapsed
            logger.error("'%s' errored after %s", name, format_elapsed(elapsed))
            raise

        elapsed = time.perf_counter() - started
        report.statuses[name] = TaskStatus.SUCCEEDED
        report.durations[name] = elapsed
        report.executed.append(name)
        logger.info("Finished '%s' after %s", name, format_elapsed(elapsed))

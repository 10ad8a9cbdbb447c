# src/tictactoe_build/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads settings, builds the task registry, then runs the requested
tasks (`default` when none are given) one after another. Exit status is 0 on success
and 1 on the first error.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time

from ..build import DEFAULT_TASK, build_registry, render_tree
from ..config import Settings, get_settings
from ..errors import BuildError
from ..logging_setup import setup_logging
from ..tasks.task_runner import TaskRunner, format_elapsed

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tictactoe-build",
        description="Copy Bootstrap assets and compile the tic-tac-toe Elm program.",
    )
    parser.add_argument(
        "tasks",
        nargs="*",
        metavar="TASK",
        help=f"tasks to run in order (default: {DEFAULT_TASK})",
    )
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="print the task tree and exit",
    )
    return parser.parse_args(argv)


async def run_tasks(settings: Settings, names: list[str]) -> None:
    runner = TaskRunner(build_registry(settings))
    for name in names:
        await runner.run(name)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    if args.list:
        print(render_tree(build_registry(settings)))
        return 0

    names = args.tasks or [DEFAULT_TASK]
    logger.info("Starting %s in %s", settings.app_name, settings.project_root.resolve())
    started = time.perf_counter()

    try:
        asyncio.run(run_tasks(settings, names))
    except BuildError as e:
        logger.error("%s", e)
        return 1
    except Exception:
        logger.exception("Unexpected build failure")
        return 1

    logger.info("Build finished after %s", format_elapsed(time.perf_counter() - started))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()

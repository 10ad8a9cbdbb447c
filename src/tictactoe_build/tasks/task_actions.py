# src/tictactoe_build/tasks/task_actions.py

from __future__ import annotations

"""
Build actions: copy assets, compile the Elm source.

Both are coroutines. Blocking filesystem work is pushed to a worker thread with
asyncio.to_thread, so sibling tasks overlap on I/O.
"""

import asyncio
import glob
import logging
import os
import shutil
import tempfile
from functools import partial
from pathlib import Path

from ..compiler import ElmCompiler
from ..errors import SourceNotFoundError
from .task_models import CompileSpec, CopySpec, TaskAction

logger = logging.getLogger(__name__)


def _expand(pattern: str, *, strict: bool) -> list[Path]:
    """
    Expand one glob pattern into existing regular files (sorted for stable output).

    No matches: warning, or SourceNotFoundError when strict.
    """
    matches = sorted(Path(p) for p in glob.glob(pattern) if os.path.isfile(p))
    if not matches:
        if strict:
            raise SourceNotFoundError(pattern)
        logger.warning("Pattern matched no files: %s", pattern)
    return matches


def _copy_one(src: Path, dest_dir: Path) -> Path:
    target = dest_dir / src.name
    shutil.copyfile(src, target)
    return target


async def copy_files(spec: CopySpec) -> list[Path]:
    """
    Copy `spec.files` and every file matched by `spec.sources` into `spec.dest`
    (flat, name preserved, overwrite).

    A missing exact file always raises SourceNotFoundError. All sources are resolved
    before anything is written.
    """
    files: list[Path] = []
    for path in spec.files:
        if not await asyncio.to_thread(path.is_file):
            raise SourceNotFoundError(str(path))
        files.append(path)
    for pattern in spec.sources:
        files.extend(await asyncio.to_thread(_expand, pattern, strict=spec.strict))

    if not files:
        return []

    await asyncio.to_thread(partial(spec.dest.mkdir, parents=True, exist_ok=True))
    written = await asyncio.gather(*(asyncio.to_thread(_copy_one, f, spec.dest) for f in files))

    for path in written:
        logger.debug("Copied %s", path)
    logger.info("Copied %d file(s) to %s", len(written), spec.dest)
    return list(written)


async def compile_source(spec: CompileSpec, compiler: ElmCompiler) -> Path:
    """
    Compile `spec.source` into `spec.dest/<stem>.js`.

    The compiler writes into a private temporary directory inside `spec.dest`; only a
    successful result is moved over the previous output, so a failed compile leaves it as-is.
    """
    if not await asyncio.to_thread(spec.source.is_file):
        raise SourceNotFoundError(str(spec.source))

    await asyncio.to_thread(partial(spec.dest.mkdir, parents=True, exist_ok=True))
    target = spec.dest / spec.output_name

    tmp = Path(await asyncio.to_thread(tempfile.mkdtemp, prefix=".elm-build-", dir=spec.dest))
    try:
        staged = tmp / spec.output_name
        await compiler.compile(spec.source, staged, warn=spec.warn)
        await asyncio.to_thread(os.replace, staged, target)
    finally:
        await asyncio.to_thread(shutil.rmtree, tmp, ignore_errors=True)

    logger.info("Compiled %s -> %s", spec.source, target)
    return target


def copy_action(spec: CopySpec) -> TaskAction:
    async def action() -> None:
        await copy_files(spec)

    return action


def compile_action(spec: CompileSpec, compiler: ElmCompiler) -> TaskAction:
    async def action() -> None:
        await compile_source(spec, compiler)

    return action

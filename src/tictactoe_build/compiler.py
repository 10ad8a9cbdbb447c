# src/tictactoe_build/compiler.py

"""
Elm compiler adapter.

The compiler is an opaque executable. We only know how to call it:

    <command...> <source> --yes --output <output.js> [--warn]

and that a non-zero exit status means failure, with the diagnostic on stderr
(elm-make prints type errors on stdout in some versions, so stdout is the fallback).
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from .errors import CompilerError

logger = logging.getLogger(__name__)

DEFAULT_COMMAND: tuple[str, ...] = ("elm-make",)
DEFAULT_EXTRA_ARGS: tuple[str, ...] = ("--yes",)


class ElmCompiler:
    def __init__(
        self,
        command: Sequence[str] = DEFAULT_COMMAND,
        *,
        extra_args: Sequence[str] = DEFAULT_EXTRA_ARGS,
    ) -> None:
        if not command:
            raise ValueError("compiler command must not be empty")
        self.command = tuple(command)
        self.extra_args = tuple(extra_args)

    def build_argv(self, source: Path, output: Path, *, warn: bool = False) -> list[str]:
        argv = [*self.command, str(source), *self.extra_args, "--output", str(output)]
        if warn:
            argv.append("--warn")
        return argv

    async def compile(self, source: Path, output: Path, *, warn: bool = False) -> None:
        argv = self.build_argv(source, output, warn=warn)
        logger.debug("Running compiler: %s", argv)

        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise CompilerError(f"Compiler not found: {self.command[0]}") from e

        stdout, stderr = await proc.communicate()
        out_text = stdout.decode("utf-8", errors="replace")
        err_text = stderr.decode("utf-8", errors="replace")

        if proc.returncode != 0:
            diagnostic = err_text.strip() or out_text.strip()
            raise CompilerError(
                f"Failed to compile {source.name} (exit status {proc.returncode})",
                diagnostic=diagnostic,
                returncode=proc.returncode,
            )

        if not output.is_file():
            raise CompilerError(
                f"Compiler reported success but produced no output for {source.name}",
                diagnostic=err_text.strip() or out_text.strip(),
                returncode=proc.returncode,
            )

        if out_text.strip():
            logger.debug("Compiler output for %s:\n%s", source.name, out_text.rstrip())

# src/tictactoe_build/build.py

"""
The project build graph.

    default
    ├── compile-tic-tac-toe
    └── copy-bootstrap
        ├── copy-bootstrap-css
        ├── copy-bootstrap-js
        └── copy-glyphicons

No two tasks write the same destination file, so siblings can run concurrently without locking.
"""

from __future__ import annotations

import glob
import os

from .compiler import ElmCompiler
from .config import Settings
from .tasks.task_actions import compile_action, copy_action
from .tasks.task_models import CompileSpec, CopySpec
from .tasks.task_registry import TaskRegistry

DEFAULT_TASK = "default"


def build_registry(settings: Settings, compiler: ElmCompiler | None = None) -> TaskRegistry:
    if compiler is None:
        compiler = ElmCompiler(settings.elm_command)

    dist = settings.bootstrap_dist
    strict = settings.strict_copy
    fonts_glob = os.path.join(glob.escape(str(dist / "fonts")), "*")
    reg = TaskRegistry()

    reg.register(
        "copy-bootstrap-css",
        action=copy_action(
            CopySpec(dest=settings.styles_dir, files=(dist / "css" / "bootstrap.min.css",), strict=strict)
        ),
        description="Copy bootstrap.min.css into styles/",
    )
    reg.register(
        "copy-bootstrap-js",
        action=copy_action(
            CopySpec(dest=settings.scripts_dir, files=(dist / "js" / "bootstrap.min.js",), strict=strict)
        ),
        description="Copy bootstrap.min.js into scripts/",
    )
    reg.register(
        "copy-glyphicons",
        action=copy_action(
            CopySpec(dest=settings.fonts_dir, sources=(fonts_glob,), strict=strict)
        ),
        description="Copy glyphicon fonts into fonts/",
    )
    reg.register(
        "copy-bootstrap",
        ["copy-bootstrap-css", "copy-bootstrap-js", "copy-glyphicons"],
        description="Copy all Bootstrap assets",
    )
    reg.register(
        "compile-tic-tac-toe",
        action=compile_action(
            CompileSpec(source=settings.elm_source, dest=settings.scripts_dir, warn=False),
            compiler,
        ),
        description="Compile the tic-tac-toe Elm program into scripts/",
    )
    reg.register(
        DEFAULT_TASK,
        ["compile-tic-tac-toe", "copy-bootstrap"],
        description="Compile the game and copy Bootstrap",
    )
    return reg


def render_tree(registry: TaskRegistry) -> str:
    """Render the task graph as an indented tree, one root per top-level task."""
    depended_on = {dep for name in registry.names() for dep in registry.get(name).prerequisites}
    roots = [n for n in registry.names() if n not in depended_on]

    lines: list[str] = []

    def walk(name: str, prefix: str, is_last: bool, is_root: bool) -> None:
        task = registry.get(name)
        label = f"{name}  # {task.description}" if task.description else name
        if is_root:
            lines.append(label)
            child_prefix = ""
        else:
            lines.append(f"{prefix}{'└── ' if is_last else '├── '}{label}")
            child_prefix = prefix + ("    " if is_last else "│   ")
        deps = task.prerequisites
        for i, dep in enumerate(deps):
            walk(dep, child_prefix, i == len(deps) - 1, False)

    for root_name in roots:
        walk(root_name, "", True, True)
    return "\n".join(lines)

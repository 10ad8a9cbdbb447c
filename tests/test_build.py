# tests/test_build.py

from __future__ import annotations

import pytest

from tictactoe_build.build import DEFAULT_TASK, build_registry, render_tree
from tictactoe_build.config import Settings
from tictactoe_build.errors import CompilerError, SourceNotFoundError
from tictactoe_build.tasks.task_models import TaskStatus
from tictactoe_build.tasks.task_runner import TaskRunner

from .conftest import INVALID_ELM
from .fakes import files_under, make_project


def test_registry_has_the_fixed_graph(settings) -> None:
    reg = build_registry(settings)

    assert reg.names() == [
        "copy-bootstrap-css",
        "copy-bootstrap-js",
        "copy-glyphicons",
        "copy-bootstrap",
        "compile-tic-tac-toe",
        "default",
    ]
    assert reg.get("copy-bootstrap").prerequisites == (
        "copy-bootstrap-css",
        "copy-bootstrap-js",
        "copy-glyphicons",
    )
    assert reg.get("copy-bootstrap").action is None
    assert reg.get(DEFAULT_TASK).prerequisites == ("compile-tic-tac-toe", "copy-bootstrap")
    assert reg.get(DEFAULT_TASK).action is None


def test_render_tree_has_single_root(settings) -> None:
    tree = render_tree(build_registry(settings)).splitlines()
    assert tree[0].startswith("default")
    assert any("└── copy-glyphicons" in line for line in tree)


@pytest.mark.asyncio
async def test_copy_bootstrap_produces_exactly_three_files(settings) -> None:
    report = await TaskRunner(build_registry(settings)).run("copy-bootstrap")

    assert report.succeeded
    assert files_under(settings.webroot) == {
        "styles/bootstrap.min.css",
        "scripts/bootstrap.min.js",
        "fonts/a.woff",
    }


@pytest.mark.asyncio
async def test_invalid_elm_fails_and_keeps_previous_output(settings, write_elm) -> None:
    write_elm(INVALID_ELM)
    previous = settings.scripts_dir / "tictactoe.js"
    previous.write_text("// last good build", "utf-8")

    runner = TaskRunner(build_registry(settings))
    with pytest.raises(CompilerError):
        await runner.run("compile-tic-tac-toe")

    assert previous.read_text("utf-8") == "// last good build"
    assert runner.last_report.statuses["compile-tic-tac-toe"] == TaskStatus.FAILED


@pytest.mark.asyncio
async def test_default_builds_everything_and_is_idempotent(settings, write_elm) -> None:
    write_elm()
    reg = build_registry(settings)

    report = await TaskRunner(reg).run(DEFAULT_TASK)
    assert report.succeeded
    assert len(report.executed) == 6

    expected = {
        "styles/bootstrap.min.css",
        "scripts/bootstrap.min.js",
        "scripts/tictactoe.elm",
        "scripts/tictactoe.js",
        "fonts/a.woff",
    }
    assert files_under(settings.webroot) == expected
    first = {rel: (settings.webroot / rel).read_bytes() for rel in expected}

    await TaskRunner(reg).run(DEFAULT_TASK)
    second = {rel: (settings.webroot / rel).read_bytes() for rel in expected}

    assert files_under(settings.webroot) == expected
    assert first == second


@pytest.mark.asyncio
async def test_compile_failure_does_not_stop_copy_branch(settings, write_elm) -> None:
    write_elm(INVALID_ELM)
    runner = TaskRunner(build_registry(settings))

    with pytest.raises(CompilerError):
        await runner.run(DEFAULT_TASK)

    statuses = runner.last_report.statuses
    assert statuses["copy-bootstrap"] == TaskStatus.SUCCEEDED
    assert statuses[DEFAULT_TASK] == TaskStatus.PENDING
    assert (settings.styles_dir / "bootstrap.min.css").is_file()


@pytest.mark.asyncio
async def test_copy_bootstrap_with_glob_characters_in_project_path(tmp_path, fake_elm_command) -> None:
    root = make_project(tmp_path / "proj[1]")
    settings = Settings.for_project(root, elm_command=fake_elm_command)

    report = await TaskRunner(build_registry(settings)).run("copy-bootstrap")

    assert report.succeeded
    assert files_under(settings.webroot) == {
        "styles/bootstrap.min.css",
        "scripts/bootstrap.min.js",
        "fonts/a.woff",
    }


@pytest.mark.asyncio
async def test_missing_bootstrap_css_fails_even_when_not_strict(settings) -> None:
    (settings.bootstrap_dist / "css" / "bootstrap.min.css").unlink()

    with pytest.raises(SourceNotFoundError):
        await TaskRunner(build_registry(settings)).run("copy-bootstrap-css")

    assert not settings.styles_dir.exists()


@pytest.mark.asyncio
async def test_strict_copy_fails_on_empty_fonts_but_other_copies_finish(project, fake_elm_command) -> None:
    (project / "bower_components" / "bootstrap" / "dist" / "fonts" / "a.woff").unlink()
    settings = Settings.for_project(project, elm_command=fake_elm_command, strict_copy=True)
    runner = TaskRunner(build_registry(settings))

    with pytest.raises(SourceNotFoundError):
        await runner.run("copy-bootstrap")

    statuses = runner.last_report.statuses
    assert statuses["copy-glyphicons"] == TaskStatus.FAILED
    assert statuses["copy-bootstrap-css"] == TaskStatus.SUCCEEDED
    assert statuses["copy-bootstrap-js"] == TaskStatus.SUCCEEDED
    assert statuses["copy-bootstrap"] == TaskStatus.PENDING
    assert files_under(settings.webroot) == {"styles/bootstrap.min.css", "scripts/bootstrap.min.js"}

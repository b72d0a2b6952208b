"""Orchestrator for the fixed project scaffolding sequence.

Runs the setup steps in their strict order and applies the failure policy:

1. validate the directory name (fatal),
2. create the Vite project (non-fatal),
3. install TailwindCSS (non-fatal),
4. initialize TailwindCSS (fatal), then patch ``tailwind.config.ts`` and
   ``src/index.css`` (fatal on I/O errors),
5. ask whether to initialize git; if so ``git init`` and rename the branch
   (both non-fatal),
6. install dependencies (non-fatal), print the summary and the banner.

Fatal conditions raise an ``AppError`` subclass; the runner maps them to an
exit code. Everything else is reported on the console and the sequence goes
on, so a run that gets past step 4 always reaches the completion banner.

Typical usage::

    from vite_tw.setup.pipeline import orchestrator
    orchestrator.run_setup("my-app")

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from vite_tw.exceptions import CommandFailedError, PatchError, UserInputError
from vite_tw.setup import i18n
from vite_tw.setup.console_helpers import _RICH_CONSOLE
from vite_tw.setup.i18n import _ as _
from vite_tw.setup.patching import patch_index_css, patch_tailwind_config
from vite_tw.setup.ui.basic import (
    ui_banner,
    ui_blank,
    ui_error,
    ui_header,
    ui_success,
    ui_warning,
)
from vite_tw.setup.ui.prompts import PromptSession, ask_confirm

from .commands import COMMANDS
from .run import run_command
from .status import FAIL, OK, SKIPPED, StepResult, render_summary_table

logger = logging.getLogger(__name__)


def validate_project_name(name: str | None) -> str:
    """Return the directory name, or raise if it is missing or empty.

    Raises
    ------
    UserInputError
        If ``name`` is ``None`` or empty.
    """
    if not name:
        raise UserInputError(_("missing_directory"))
    return name


def _run_step(
    key: str, project: str, results: list[StepResult], *, fatal: bool = False
) -> bool:
    """Run one command from the table, report it and record the outcome.

    Parameters
    ----------
    key : str
        Name of the command in ``COMMANDS``; also the i18n key prefix.
    project : str
        Target directory name.
    results : list[StepResult]
        Outcome log, appended to.
    fatal : bool, optional
        Raise ``CommandFailedError`` instead of reporting a failure.

    Returns
    -------
    bool
        Whether the command succeeded.
    """
    template = COMMANDS[key]
    command = template.render(project)
    ok = run_command(command, cwd=template.cwd(project))
    results.append(StepResult(key, OK if ok else FAIL))
    if ok:
        ui_success(_(f"{key}_ok"))
        return True
    if fatal:
        raise CommandFailedError(_(f"{key}_fail"), command=command)
    ui_error(_(f"{key}_fail"))
    return False


_PATCHES = {
    "patch_config": patch_tailwind_config,
    "patch_stylesheet": patch_index_css,
}


def _patch(key: str, project: str, results: list[StepResult]) -> None:
    try:
        _PATCHES[key](Path(project))
    except PatchError as error:
        results.append(StepResult(key, FAIL))
        raise PatchError(
            f"{_(f'{key}_fail')}: {error.message}", context=error.context
        ) from error
    results.append(StepResult(key, OK))
    ui_success(_(f"{key}_ok"))


def initialize_tailwind(project: str, results: list[StepResult]) -> None:
    """Generate the Tailwind config and patch the generated files.

    Raises
    ------
    CommandFailedError
        If ``tailwindcss init`` fails; no file is touched in that case.
    PatchError
        If either generated file cannot be read or written.
    """
    _run_step("init_styling_config", project, results, fatal=True)
    _patch("patch_config", project, results)
    _patch("patch_stylesheet", project, results)


def initialize_git(project: str, results: list[StepResult]) -> None:
    """Run ``git init`` and rename the branch; failures are reported only.

    The branch rename is not attempted when ``git init`` fails.
    """
    if not _run_step("init_vcs", project, results):
        results.append(StepResult("rename_branch", SKIPPED))
        return
    _run_step("rename_branch", project, results)


def prompt_git_initialization(session: PromptSession) -> bool:
    """Ask whether to initialize git, consuming and closing ``session``."""
    ui_blank()
    return ask_confirm(session, _("git_prompt"))


def continue_setup(project: str, results: list[StepResult]) -> None:
    """Install dependencies, then print the summary and completion banner."""
    _run_step("install_deps", project, results)
    _RICH_CONSOLE.print(render_summary_table(_, i18n.LANG, results))
    ui_banner(_("completed"))


def run_setup(
    project: str | None,
    *,
    init_git: bool | None = None,
    input_stream: TextIO | None = None,
) -> list[StepResult]:
    r"""Run the whole scaffolding sequence for ``project``.

    Parameters
    ----------
    project : str | None
        Target directory name as given on the command line.
    init_git : bool | None, optional
        Answer to the git question. ``None`` asks the user.
    input_stream : TextIO | None, optional
        Where to read the git answer from; defaults to the console.

    Returns
    -------
    list[StepResult]
        Outcome of every step, in execution order.

    Raises
    ------
    UserInputError
        If the directory name is missing; nothing has run yet.
    CommandFailedError
        If TailwindCSS could not be initialized.
    PatchError
        If a generated file could not be patched.
    """
    name = validate_project_name(project)
    results: list[StepResult] = []
    logger.info(f"Scaffolding project in {name}")
    ui_header(_("intro"))

    _run_step("create_project", name, results)
    _run_step("install_styling_deps", name, results)
    initialize_tailwind(name, results)

    if init_git is None:
        with PromptSession(stream=input_stream) as session:
            init_git = prompt_git_initialization(session)
    if init_git:
        initialize_git(name, results)
    else:
        results.append(StepResult("init_vcs", SKIPPED))
        ui_warning(_("git_skipped"))

    continue_setup(name, results)
    return results


__all__ = [
    "continue_setup",
    "initialize_git",
    "initialize_tailwind",
    "prompt_git_initialization",
    "run_setup",
    "validate_project_name",
]

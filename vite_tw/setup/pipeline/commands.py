"""Fixed table of external commands run by the scaffolder.

Each entry maps a symbolic step name to a shell command template whose only
parameter is the target directory name. The orchestrator refers to commands
by name and never builds shell syntax itself.

Typical usage::

    from vite_tw.setup.pipeline.commands import COMMANDS
    COMMANDS["install_deps"].render("my-app")  # 'npm install'

"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path

from vite_tw.config import DEFAULT_BRANCH, TAILWIND_PACKAGES, VITE_TEMPLATE


@dataclass(frozen=True)
class CommandTemplate:
    """A shell command parameterized by the project directory.

    Attributes
    ----------
    template : str
        Command text; ``{project}`` is replaced by the shell-quoted directory.
    in_project : bool
        Run with the project directory as working directory.
    """

    template: str
    in_project: bool = True

    def render(self, project: str) -> str:
        return self.template.format(project=shlex.quote(project))

    def cwd(self, project: str) -> Path | None:
        return Path(project) if self.in_project else None


COMMANDS: dict[str, CommandTemplate] = {
    "create_project": CommandTemplate(
        f"npm init vite@latest {{project}} -- --template {VITE_TEMPLATE}",
        in_project=False,
    ),
    "install_styling_deps": CommandTemplate(
        "npm install -D " + " ".join(TAILWIND_PACKAGES)
    ),
    "init_styling_config": CommandTemplate("npx tailwindcss init -p --ts"),
    "init_vcs": CommandTemplate("git init"),
    "rename_branch": CommandTemplate(f"git branch -M {DEFAULT_BRANCH}"),
    "install_deps": CommandTemplate("npm install"),
}


__all__ = ["COMMANDS", "CommandTemplate"]

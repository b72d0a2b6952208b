"""Subprocess runner for the scaffolder's external commands.

This module's sole responsibility is launching one external command through
the shell, with the child's output going straight to the user's terminal,
and reporting whether it succeeded.

Error & Result Branches
-----------------------
- Logs failures (non-zero exit and failures to spawn the shell).
- Does not raise; returns explicit status. Whether a failure is fatal is
  decided by the orchestrator.

"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def run_command(command: str, *, cwd: Path | None = None) -> bool:
    r"""Run a shell command synchronously with inherited standard streams.

    Parameters
    ----------
    command : str
        Complete shell command line.
    cwd : Path | None, optional
        Working directory for the child process. Defaults to the current
        directory.

    Returns
    -------
    bool
        True if the command exited with status 0, False otherwise (including
        when it could not be started at all).

    Notes
    -----
    The command is attempted exactly once. stdin, stdout and stderr are not
    redirected, so tools like ``npm init`` can still ask their own questions.

    Examples
    --------
    >>> run_command("true")
    True
    >>> run_command("exit 3")
    False
    """
    where = f" (in {cwd})" if cwd is not None else ""
    logger.info(f"Running: {command}{where}")
    try:
        result = subprocess.run(command, shell=True, cwd=cwd, check=False)
    except OSError as error:
        logger.error(f"Failed to execute command {command}: {error}")
        return False
    if result.returncode == 0:
        return True
    logger.error(
        f"Failed to execute command {command} (Return code: {result.returncode})"
    )
    return False


__all__ = ["run_command"]

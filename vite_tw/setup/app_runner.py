"""Entrypoint helpers for the scaffolder CLI.

This module parses the command line, configures logging, selects the UI
language and runs the orchestrator. It is the only place where application
errors are turned into console messages and process exit codes.

Examples
--------
>>> import vite_tw.setup.app_runner as runner
>>> args = runner.parse_cli_args(["my-app", "--lang", "en"])
>>> runner.run(args)  # doctest: +SKIP
>>> runner.entry_point()  # doctest: +SKIP

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from vite_tw import __version__
from vite_tw.config import (
    DEFAULT_LOG_LEVEL,
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_OK,
    LANG,
    LOG_FORMAT,
    SUPPORTED_LANGUAGES,
)
from vite_tw.exceptions import AppError
from vite_tw.setup import i18n
from vite_tw.setup.pipeline import orchestrator
from vite_tw.setup.ui.basic import ui_error

logger = logging.getLogger(__name__)


def configure_logging(level: str = DEFAULT_LOG_LEVEL, log_file: Path | None = None) -> None:
    r"""Configure root logging for the CLI.

    Installs a stderr stream handler and, when ``log_file`` is given and
    ``DISABLE_FILE_LOGS`` is not set, an appending file handler. Existing
    root handlers are removed first so repeated calls do not duplicate output.

    Parameters
    ----------
    level : str, optional
        Logging level name such as ``"INFO"``; unknown names fall back to
        ``WARNING``.
    log_file : Path | None, optional
        File to append log records to.

    Examples
    --------
    >>> configure_logging("DEBUG")
    """
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None and not os.environ.get("DISABLE_FILE_LOGS"):
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as error:
            sys.stderr.write(f"Could not open log file {log_file}: {error}\n")
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    r"""Parse command-line arguments for the scaffolder.

    The directory is optional at the parser level so that a missing value is
    reported by the orchestrator's own validation with its own exit code.

    Parameters
    ----------
    argv : list of str or None, optional
        Argument strings to parse. ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    argparse.Namespace
        Fields ``directory``, ``lang``, ``log_level``, ``log_file`` and
        ``init_git`` (``True``, ``False`` or ``None`` to ask).

    Examples
    --------
    >>> ns = parse_cli_args(["my-app", "--lang", "sv", "--no-git"])
    >>> ns.directory, ns.lang, ns.init_git
    ('my-app', 'sv', False)
    """
    parser = argparse.ArgumentParser(
        prog="vite-ts-tw",
        description="Create a React + TypeScript project with Vite and TailwindCSS",
    )
    parser.add_argument("directory", nargs="?", default=None, help="Project directory name")
    # Only the first positional names the project; any others are ignored
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument("--lang", choices=SUPPORTED_LANGUAGES, default=LANG)
    parser.add_argument(
        "--log-level",
        default=os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument("--log-file", type=Path, default=None)
    git = parser.add_mutually_exclusive_group()
    git.add_argument(
        "--yes",
        dest="init_git",
        action="store_const",
        const=True,
        help="Initialize git without asking",
    )
    git.add_argument(
        "--no-git",
        dest="init_git",
        action="store_const",
        const=False,
        help="Skip git initialization without asking",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.set_defaults(init_git=None)
    return parser.parse_intermixed_args(argv)


def run(args: argparse.Namespace) -> int:
    r"""Run the scaffolder with parsed arguments and return the exit code.

    Parameters
    ----------
    args : argparse.Namespace
        Result of ``parse_cli_args``.

    Returns
    -------
    int
        ``EXIT_OK`` on completion (even if some non-fatal steps failed),
        ``EXIT_FAILURE`` on a fatal error, ``EXIT_INTERRUPTED`` on Ctrl-C.
    """
    i18n.set_language(args.lang)
    try:
        orchestrator.run_setup(args.directory, init_git=args.init_git)
    except AppError as error:
        logger.error(str(error), extra={"error": error.to_dict()})
        ui_error(error.message)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        ui_error(i18n.translate("exiting"))
        return EXIT_INTERRUPTED
    return EXIT_OK


def entry_point(argv: list[str] | None = None) -> None:
    """Console-script entrypoint: parse, configure logging, run and exit."""
    args = parse_cli_args(argv)
    configure_logging(args.log_level, args.log_file)
    sys.exit(run(args))


__all__ = ["configure_logging", "entry_point", "parse_cli_args", "run"]

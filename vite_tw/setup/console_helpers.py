"""console_helpers.py — Rich/Questionary integration for the terminal UI.

This module is the single place where the scaffolder touches Rich and
Questionary. Every other module imports the console primitives from here, so
tests can monkeypatch one module to redirect or silence output.

Features
--------
- Exposes ``rprint`` and the shared ``_RICH_CONSOLE`` as the canonical
  primitives for styled terminal output.
- Re-exports the Rich renderables used by the UI (``Table``, ``Text``).
- Re-exports ``questionary`` for the interactive prompt.

Canonical Usage
---------------
>>> from vite_tw.setup.console_helpers import rprint
>>> rprint("[green]Hello Rich![/green]")
Hello Rich!

References
----------
- Rich Docs: https://rich.readthedocs.io/en/latest/
- Questionary Docs: https://github.com/tmbo/questionary

"""

from __future__ import annotations

from typing import IO, Any

import questionary
from rich import print as rich_print
from rich.console import Console
from rich.table import Table
from rich.text import Text

# Console writes to whatever sys.stdout is at print time, so pytest's capsys
# sees the output.
_RICH_CONSOLE: Console = Console(highlight=False)


def rprint(
    *objects: Any,
    sep: str = " ",
    end: str = "\n",
    file: IO[str] | None = None,
    flush: bool = False,
) -> None:
    r"""Print objects to the terminal using Rich markup.

    All parameters mirror Python's builtin print.

    Parameters
    ----------
    *objects : Any
        Objects to be printed, separated by sep.
    sep : str, optional
        Separator between objects, default ' '.
    end : str, optional
        Line ending, default newline.
    file : IO[str], optional
        File-like object to print to, default sys.stdout.
    flush : bool, optional
        Forcibly flush output.

    Examples
    --------
    >>> import io
    >>> buf = io.StringIO()
    >>> rprint("FileOut", file=buf)
    >>> "FileOut" in buf.getvalue()
    True
    """
    rich_print(*objects, sep=sep, end=end, file=file, flush=flush)


__all__ = [
    "_RICH_CONSOLE",
    "Table",
    "Text",
    "questionary",
    "rprint",
]

"""Minimal UI output primitives for the scaffolder console.

This module renders messaging for the setup flow: headers, blank lines,
success, warning and error outputs, plus the completion banner.
It holds no logic beyond rendering and never touches the filesystem or
subprocesses.
"""

from __future__ import annotations

from vite_tw.setup.console_helpers import _RICH_CONSOLE, Text, rprint

BANNER: str = (
    "           (`-')      (`-').->           <-.(`-') (`-')  _    (`-')  (`-')  _ \n"
    "     .->   ( OO).->   ( OO)_       .->    __( OO) (OO ).-/ <-.(OO )  ( OO).-/ \n"
    "(`-')----. /    '._  (_)--\\_) ,--.(,--.  '-'. ,--./ ,---.  ,------,)(,------. \n"
    "( OO).-.  '|'--...__)/    _ / |  | |(`-')|  .'   /| \\ /`\\. |   /`. ' |  .---' \n"
    "( _) | |  |`--.  .--'\\_..`--. |  | |(OO )|      /)'-'|_.' ||  |_.' |(|  '--.  \n"
    " \\|  |)|  |   |  |   .-._)   \\|  | | |  \\|  .   '(|  .-.  ||  .   .' |  .--'  \n"
    "  '  '-'  '   |  |   \\       /\\  '-'(_ .'|  |\\   \\|  | |  ||  |\\  \\  |  `---. \n"
    "   `-----'    `--'    `-----'  `-----'   `--' '--'`--' `--'`--' '--' `------' \n"
)


def ui_header(title: str) -> None:
    r"""Render a prominent yellow header line surrounded by blank lines.

    Used once at startup to announce what the scaffolder is about to do.

    Parameters
    ----------
    title : str
        Header text to display.
    """
    rprint()
    _RICH_CONSOLE.print(Text(title, style="yellow"))
    rprint()


def ui_blank() -> None:
    """Print an empty line."""
    rprint()


def ui_success(message: str) -> None:
    r"""Display a success message prefixed with a check mark.

    Parameters
    ----------
    message : str
        Text of the success message to display.

    See Also
    --------
    ui_warning, ui_error
    """
    _RICH_CONSOLE.print(Text(f"✅ {message}", style="green"))


def ui_warning(message: str) -> None:
    """Display a warning message (skips and other non-errors)."""
    _RICH_CONSOLE.print(Text(message, style="yellow"))


def ui_error(message: str) -> None:
    r"""Display an error message.

    Used for both non-fatal command failures and fatal errors; the caller
    decides whether the setup continues.

    Parameters
    ----------
    message : str
        Error text.
    """
    _RICH_CONSOLE.print(Text(message, style="bold red"))


def ui_banner(message: str) -> None:
    r"""Render the completion banner followed by a closing message.

    Parameters
    ----------
    message : str
        Text printed in green below the ASCII-art banner.
    """
    rprint("\n\n")
    _RICH_CONSOLE.print(Text(BANNER, style="blue"))
    _RICH_CONSOLE.print(Text(f"\n{message}\n", style="green"))


__all__ = [
    "BANNER",
    "ui_banner",
    "ui_blank",
    "ui_error",
    "ui_header",
    "ui_success",
    "ui_warning",
]

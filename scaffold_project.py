"""Minimal launcher for the scaffolder.

Its single responsibility is delegating to ``vite_tw.setup.app_runner`` so
the tool can be run from a checkout without installing it.

Usage:
    python scaffold_project.py <directory> [--lang en|sv] [--yes | --no-git]

"""

from __future__ import annotations


def entry_point(argv: list[str] | None = None) -> None:
    """Run the scaffolder.

    The runner is imported inside the function so importing this file stays
    cheap.
    """
    from vite_tw.setup.app_runner import entry_point as app_entry_point

    app_entry_point(argv)


if __name__ == "__main__":
    entry_point()

"""Vite + React + TypeScript + TailwindCSS project scaffolder.

This package creates a new front-end project by driving external tools
(``npm``, ``npx``, ``git``) in a fixed order, patches two generated files so
TailwindCSS is wired in, and optionally initializes a git repository.

Package Structure
-----------------
- `setup/`:
    Orchestration of the scaffolding sequence, the command table, the
    subprocess runner, the file patches and the console UI (Rich/Questionary).
- `config.py`: All configuration constants, as UPPER_SNAKE_CASE.
- `exceptions.py`: Project-specific exception classes.

Examples
--------
Run the scaffolder through the launcher:

>>> from vite_tw.setup.app_runner import entry_point
>>> entry_point(["my-app"])  # doctest: +SKIP

"""

__version__ = "1.0.0"

"""In-place text patches for files generated by the TailwindCSS init step.

Two whole-file edits wire TailwindCSS into a fresh Vite project:

- ``patch_tailwind_config``: point the empty ``content`` list of
  ``tailwind.config.ts`` at the project's HTML entry point and sources.
- ``patch_index_css``: prepend the Tailwind ``@import`` directives to
  ``src/index.css``.

Each patch reads the file fully, transforms the text and writes it back in
full. Newlines are preserved byte for byte. Any I/O failure is raised as
``PatchError``.

Functions
---------
- ``apply_content_patch`` / ``prepend_tailwind_directives``: pure transforms.
- ``patch_tailwind_config`` / ``patch_index_css``: read-transform-write.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from pathlib import Path

from vite_tw.config import (
    FILE_ENCODING,
    INDEX_CSS_RELATIVE_PATH,
    TAILWIND_CONFIG_FILENAME,
    TAILWIND_CONTENT_PATTERN,
    TAILWIND_CONTENT_REPLACEMENT,
    TAILWIND_DIRECTIVES,
)
from vite_tw.exceptions import PatchError

logger = logging.getLogger(__name__)

_CONTENT_RE = re.compile(TAILWIND_CONTENT_PATTERN)


def apply_content_patch(text: str) -> str:
    r"""Replace the first empty ``content: []`` declaration.

    Text without the declaration (for instance an already patched config) is
    returned unchanged.

    Examples
    --------
    >>> apply_content_patch("export default { content: [], }")
    'export default { content: ["./index.html", "./src/**/*.{js,ts,jsx,tsx}"], }'
    """
    # Callable replacement: the literal must not be parsed for backreferences
    return _CONTENT_RE.sub(lambda _m: TAILWIND_CONTENT_REPLACEMENT, text, count=1)


def prepend_tailwind_directives(text: str) -> str:
    r"""Return ``text`` with the three Tailwind imports and a blank line in front.

    Not idempotent: applying it twice prepends the directives twice.

    Examples
    --------
    >>> print(prepend_tailwind_directives("body{}"))
    @import 'tailwindcss/base';
    @import 'tailwindcss/components';
    @import 'tailwindcss/utilities';
    <BLANKLINE>
    body{}
    """
    return f"{TAILWIND_DIRECTIVES}{text}"


def _rewrite(path: Path, transform: Callable[[str], str]) -> None:
    try:
        with path.open("r", encoding=FILE_ENCODING, newline="") as fh:
            data = fh.read()
        updated = transform(data)
        with path.open("w", encoding=FILE_ENCODING, newline="") as fh:
            fh.write(updated)
    except (OSError, UnicodeError) as error:
        raise PatchError(str(error), context={"path": str(path)}) from error
    logger.info(f"Patched {path}")


def patch_tailwind_config(project_dir: Path) -> Path:
    r"""Point the Tailwind ``content`` globs at the project sources.

    Parameters
    ----------
    project_dir : Path
        Root of the generated project.

    Returns
    -------
    Path
        The patched config file.

    Raises
    ------
    PatchError
        If the file cannot be read or written.
    """
    path = Path(project_dir) / TAILWIND_CONFIG_FILENAME
    _rewrite(path, apply_content_patch)
    return path


def patch_index_css(project_dir: Path) -> Path:
    r"""Prepend the Tailwind directives to the project's entry stylesheet.

    Parameters
    ----------
    project_dir : Path
        Root of the generated project.

    Returns
    -------
    Path
        The patched stylesheet.

    Raises
    ------
    PatchError
        If the file cannot be read or written.
    """
    path = Path(project_dir) / INDEX_CSS_RELATIVE_PATH
    _rewrite(path, prepend_tailwind_directives)
    return path


__all__ = [
    "apply_content_patch",
    "patch_index_css",
    "patch_tailwind_config",
    "prepend_tailwind_directives",
]

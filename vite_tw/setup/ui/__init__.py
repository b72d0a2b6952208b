"""Console UI for the scaffolder: output primitives and the git prompt.

Typical usage::

    from vite_tw.setup.ui import ui_success, PromptSession, ask_confirm

"""

from __future__ import annotations

from vite_tw.setup.ui.basic import (
    ui_banner,
    ui_blank,
    ui_error,
    ui_header,
    ui_success,
    ui_warning,
)
from vite_tw.setup.ui.prompts import PromptSession, ask_confirm, is_affirmative

__all__ = [
    "PromptSession",
    "ask_confirm",
    "is_affirmative",
    "ui_banner",
    "ui_blank",
    "ui_error",
    "ui_header",
    "ui_success",
    "ui_warning",
]

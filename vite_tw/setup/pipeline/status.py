"""Step outcome records and the end-of-run summary table.

Provides localized status labels and a Rich table summarising which setup
steps succeeded, failed or were skipped.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from vite_tw.setup.console_helpers import Table

OK = "ok"
FAIL = "fail"
SKIPPED = "skipped"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one orchestrated step.

    Attributes
    ----------
    key : str
        Step name, matching the command table or a patch name.
    status : str
        One of ``OK``, ``FAIL`` or ``SKIPPED``.
    """

    key: str
    status: str

    @property
    def ok(self) -> bool:
        return self.status == OK


def _status_label(lang: str, base: str) -> str:
    """Return a localized status label for a given step status key.

    Parameters
    ----------
    lang : str
        Language code (e.g., ``'en'`` or ``'sv'``).
    base : str
        Status key such as ``'ok'``, ``'fail'`` or ``'skipped'``.

    Returns
    -------
    str
        Localized label; unknown keys are returned unchanged.

    Examples
    --------
    >>> _status_label("sv", "ok")
    '✅ Klart'
    """
    if lang == "sv":
        labels = {
            OK: "✅ Klart",
            FAIL: "❌ Misslyckades",
            SKIPPED: "⏭  Överhoppad",
        }
    else:
        labels = {
            OK: "✅ Done",
            FAIL: "❌ Failed",
            SKIPPED: "⏭  Skipped",
        }
    return labels.get(base, base)


def render_summary_table(
    translate: Callable[[str], str],
    lang: str,
    results: Iterable[StepResult],
) -> Table:
    """Construct a Rich table listing each step and its outcome.

    Parameters
    ----------
    translate : Callable[[str], str]
        Translation function for i18n keys.
    lang : str
        Language used for the status labels.
    results : Iterable[StepResult]
        Step outcomes in execution order.

    Returns
    -------
    Table
        Renderable ready for ``Console.print``.
    """
    table = Table(
        title=translate("summary_title"),
        show_header=True,
        header_style="bold blue",
    )
    table.add_column(translate("summary_step"), style="bold")
    table.add_column(translate("summary_status"))
    for result in results:
        table.add_row(translate(f"step_{result.key}"), _status_label(lang, result.status))
    return table


__all__ = [
    "FAIL",
    "OK",
    "SKIPPED",
    "StepResult",
    "_status_label",
    "render_summary_table",
]

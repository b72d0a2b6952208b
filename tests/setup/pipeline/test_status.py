"""Tests for `vite_tw/setup/pipeline/status.py`."""

from vite_tw.setup.console_helpers import Table
from vite_tw.setup.i18n import translate
from vite_tw.setup.pipeline import status


def test_status_labels_localized():
    assert status._status_label("en", status.OK) == "✅ Done"
    assert status._status_label("sv", status.FAIL) == "❌ Misslyckades"
    assert status._status_label("en", "unknown") == "unknown"


def test_step_result_ok():
    assert status.StepResult("init_vcs", status.OK).ok is True
    assert status.StepResult("init_vcs", status.SKIPPED).ok is False


def test_render_summary_table_rows():
    results = [
        status.StepResult("create_project", status.OK),
        status.StepResult("init_vcs", status.SKIPPED),
    ]
    table = status.render_summary_table(translate, "en", results)
    assert isinstance(table, Table)
    assert table.row_count == 2
    assert table.title == "Setup summary"
    steps = list(table.columns[0].cells)
    labels = list(table.columns[1].cells)
    assert steps == ["Create Vite project", "Initialize Git"]
    assert labels == ["✅ Done", "⏭  Skipped"]

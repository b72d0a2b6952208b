"""Tests for the top-level `scaffold_project.py` launcher."""

import scaffold_project
import vite_tw.setup.app_runner as app_runner


def test_launcher_delegates_to_app_runner(monkeypatch):
    seen = {}
    monkeypatch.setattr(app_runner, "entry_point", lambda argv=None: seen.setdefault("argv", argv))
    scaffold_project.entry_point(["my-app", "--yes"])
    assert seen["argv"] == ["my-app", "--yes"]

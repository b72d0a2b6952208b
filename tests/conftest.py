"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides a fake command runner and a generated-project fixture so no test
  ever spawns ``npm`` or ``git``.
"""

import logging
import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

import vite_tw.setup.i18n as i18n  # noqa: E402
import vite_tw.setup.pipeline.orchestrator as orch  # noqa: E402

GENERATED_CONFIG = """/** @type {import('tailwindcss').Config} */
export default {
  content: [],
  theme: {
    extend: {},
  },
  plugins: [],
}
"""

GENERATED_CSS = ":root {\n  font-family: Inter, system-ui;\n}\n"


class FakeRunner:
    """Stand-in for ``run_command`` that records calls and fails on demand."""

    def __init__(self, failing: tuple[str, ...] = ()) -> None:
        self.failing = failing
        self.calls: list[tuple[str, Path | None]] = []

    def __call__(self, command: str, *, cwd: Path | None = None) -> bool:
        self.calls.append((command, cwd))
        return not any(fragment in command for fragment in self.failing)

    @property
    def commands(self) -> list[str]:
        return [command for command, _ in self.calls]


def _is_pytest_handler(handler: logging.Handler) -> bool:
    # pytest installs and removes its own capture handlers per test phase
    return type(handler).__module__.startswith("_pytest")


@pytest.fixture(autouse=True)
def _reset_language():
    """Every test starts in English."""
    i18n.set_language("en")
    yield
    i18n.set_language("en")


@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers and level after tests that reconfigure logging."""
    root = logging.getLogger()
    saved_handlers = [h for h in root.handlers if not _is_pytest_handler(h)]
    saved_level = root.level
    yield
    for handler in root.handlers[:]:
        if _is_pytest_handler(handler):
            continue
        if handler not in saved_handlers:
            handler.close()
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


@pytest.fixture
def generated_project(tmp_path, monkeypatch):
    """Create the files ``tailwindcss init`` and Vite would have generated.

    The working directory is switched to ``tmp_path`` and the project
    directory name (relative) is returned.
    """
    monkeypatch.chdir(tmp_path)
    project = tmp_path / "my-app"
    (project / "src").mkdir(parents=True)
    (project / "tailwind.config.ts").write_text(GENERATED_CONFIG, encoding="utf-8")
    (project / "src" / "index.css").write_text(GENERATED_CSS, encoding="utf-8")
    return "my-app"


@pytest.fixture
def install_runner(monkeypatch):
    """Return a factory installing a ``FakeRunner`` that fails on given fragments."""

    def _install(*failing: str) -> FakeRunner:
        runner = FakeRunner(failing=failing)
        monkeypatch.setattr(orch, "run_command", runner)
        return runner

    return _install


@pytest.fixture
def fake_runner(install_runner):
    """Install a succeeding ``FakeRunner`` on the orchestrator and return it."""
    return install_runner()

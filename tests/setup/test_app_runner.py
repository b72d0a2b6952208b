"""Tests for `vite_tw/setup/app_runner.py`."""

import logging

import pytest

import vite_tw.setup.app_runner as runner
import vite_tw.setup.pipeline.orchestrator as orch
from vite_tw.config import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_OK


def test_parse_cli_args_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    ns = runner.parse_cli_args(["my-app"])
    assert ns.directory == "my-app"
    assert ns.lang == "en"
    assert ns.log_level == "WARNING"
    assert ns.log_file is None
    assert ns.init_git is None


def test_parse_cli_args_flags(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    ns = runner.parse_cli_args(["my-app", "--lang", "sv", "--yes"])
    assert ns.lang == "sv" and ns.init_git is True and ns.log_level == "DEBUG"
    assert runner.parse_cli_args(["my-app", "--no-git"]).init_git is False
    assert runner.parse_cli_args([]).directory is None


def test_parse_cli_args_ignores_trailing_positionals():
    ns = runner.parse_cli_args(["my-app", "extra", "--no-git", "more"])
    assert ns.directory == "my-app"
    assert ns.init_git is False


def test_run_with_trailing_positional_uses_first(generated_project, fake_runner):
    code = runner.run(runner.parse_cli_args([generated_project, "extra", "--no-git"]))
    assert code == EXIT_OK
    assert fake_runner.commands[0].startswith(f"npm init vite@latest {generated_project} ")
    assert not any("extra" in c for c in fake_runner.commands)


def test_yes_and_no_git_are_exclusive():
    with pytest.raises(SystemExit):
        runner.parse_cli_args(["my-app", "--yes", "--no-git"])


def test_run_missing_directory_fails_without_commands(fake_runner, capsys):
    code = runner.run(runner.parse_cli_args([]))
    assert code == EXIT_FAILURE
    assert fake_runner.calls == []
    assert "Please enter the directory name" in capsys.readouterr().out


def test_run_styling_failure_exit_code(generated_project, install_runner, capsys):
    install_runner("tailwindcss init")
    code = runner.run(runner.parse_cli_args([generated_project, "--yes"]))
    assert code == EXIT_FAILURE
    assert "Failed to initialize Tailwind CSS" in capsys.readouterr().out


def test_run_patch_failure_exit_code(tmp_path, monkeypatch, fake_runner, capsys):
    monkeypatch.chdir(tmp_path)
    code = runner.run(runner.parse_cli_args(["missing-app", "--yes"]))
    assert code == EXIT_FAILURE
    assert "Error updating tailwind.config.ts" in capsys.readouterr().out


def test_run_git_failure_still_exits_ok(generated_project, install_runner):
    install_runner("git init")
    assert runner.run(runner.parse_cli_args([generated_project, "--yes"])) == EXIT_OK


def test_run_interrupt_exit_code(monkeypatch, capsys):
    def interrupted(project, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(orch, "run_setup", interrupted)
    assert runner.run(runner.parse_cli_args(["my-app"])) == EXIT_INTERRUPTED
    assert "Exiting." in capsys.readouterr().out


def test_run_sets_language(monkeypatch):
    from vite_tw.setup import i18n

    monkeypatch.setattr(orch, "run_setup", lambda project, **kwargs: [])
    runner.run(runner.parse_cli_args(["my-app", "--lang", "sv"]))
    assert i18n.LANG == "sv"


def test_entry_point_exits_with_run_code(monkeypatch, restore_root_logging):
    seen = {}

    def fake_run_setup(project, *, init_git=None, input_stream=None):
        seen["project"] = project
        seen["init_git"] = init_git
        return []

    monkeypatch.setattr(orch, "run_setup", fake_run_setup)
    with pytest.raises(SystemExit) as excinfo:
        runner.entry_point(["my-app", "--no-git"])
    assert excinfo.value.code == EXIT_OK
    assert seen == {"project": "my-app", "init_git": False}


def test_entry_point_missing_directory_exit_code(fake_runner, restore_root_logging):
    with pytest.raises(SystemExit) as excinfo:
        runner.entry_point([])
    assert excinfo.value.code == EXIT_FAILURE
    assert fake_runner.calls == []


def test_configure_logging_stream_only_when_file_logs_disabled(
    tmp_path, monkeypatch, restore_root_logging
):
    monkeypatch.setenv("DISABLE_FILE_LOGS", "1")
    log_file = tmp_path / "logs" / "scaffold.log"
    runner.configure_logging("INFO", log_file)
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
    assert not log_file.exists()


def test_configure_logging_writes_file(tmp_path, monkeypatch, restore_root_logging):
    monkeypatch.delenv("DISABLE_FILE_LOGS", raising=False)
    log_file = tmp_path / "logs" / "scaffold.log"
    runner.configure_logging("debug", log_file)
    logging.getLogger("vite_tw.test").debug("hello log")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "hello log" in log_file.read_text(encoding="utf-8")
    assert " - vite_tw.test - DEBUG - " in log_file.read_text(encoding="utf-8")


def test_configure_logging_unknown_level_falls_back(restore_root_logging):
    runner.configure_logging("chatty")
    assert logging.getLogger().level == logging.WARNING

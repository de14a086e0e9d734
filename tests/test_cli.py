from __future__ import annotations

from typer.testing import CliRunner

import automata.cli as cli

runner = CliRunner()


def test_no_arguments_launches_tui(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "_run_tui", lambda: calls.append("tui") or 0)

    result = runner.invoke(cli.app, [])

    assert result.exit_code == 0
    assert calls == ["tui"]


def test_exit_code_comes_from_tui(monkeypatch):
    monkeypatch.setattr(cli, "_run_tui", lambda: 1)
    assert runner.invoke(cli.app, []).exit_code == 1


def test_host_failure_is_reported_and_exits_nonzero(monkeypatch, settings_factory, tmp_path):
    """Regression: a broken terminal must not leave a traceback and exit 0."""
    monkeypatch.setattr(cli, "load_settings", lambda: settings_factory())
    monkeypatch.setattr(cli, "setup_logging", lambda settings: tmp_path / "automata.log")

    class BrokenHost:
        def __init__(self, router):
            self.router = router

        def run(self):
            raise OSError("not a terminal")

    monkeypatch.setattr(cli, "Host", BrokenHost)

    assert cli._run_tui() == 1


def test_normal_quit_exits_zero(monkeypatch, settings_factory, tmp_path):
    monkeypatch.setattr(cli, "load_settings", lambda: settings_factory())
    monkeypatch.setattr(cli, "setup_logging", lambda settings: tmp_path / "automata.log")
    class QuitHost:
        def __init__(self, router):
            self.router = router

        def run(self):
            return 0

    monkeypatch.setattr(cli, "Host", QuitHost)

    assert cli._run_tui() == 0


def test_invalid_settings_exit_with_usage_error(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("AUTOMATA_REENTRY_POLICY", "sometimes")

    assert cli._run_tui() == 2

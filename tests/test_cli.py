"""Tests for the extdemo command line."""

from __future__ import annotations

import pytest
import yaml

from extdemo.cli import main


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run every CLI test from an empty directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestRun:
    def test_run_defaults(self, capsys):
        assert main(["run", "add"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "1 + 2 = 3\n"
        assert "> Task :add" in captured.err

    def test_run_with_flags(self, capsys):
        assert main(["run", "add", "--alpha", "5", "--bravo", "6"]) == 0
        assert capsys.readouterr().out == "5 + 6 = 11\n"

    def test_run_with_config(self, build_yaml, capsys):
        assert main(["run", "add", "-c", str(build_yaml)]) == 0
        assert capsys.readouterr().out == "5 + 6 = 11\n"

    def test_default_config_picked_up(self, workdir, capsys):
        (workdir / "extdemo.yaml").write_text(yaml.dump({"hello": {"alpha": 3, "bravo": 4}}))
        assert main(["run", "add"]) == 0
        assert capsys.readouterr().out == "3 + 4 = 7\n"

    def test_flags_override_config(self, build_yaml, capsys):
        assert main(["run", "add", "-c", str(build_yaml), "--bravo", "0"]) == 0
        assert capsys.readouterr().out == "5 + 0 = 5\n"

    def test_unknown_task(self, capsys):
        assert main(["run", "subtract"]) == 1
        assert "Unknown task: subtract" in capsys.readouterr().err

    def test_invalid_config(self, workdir, capsys):
        bad = workdir / "bad.yaml"
        bad.write_text("hello:\n  alpha: five\n")
        assert main(["run", "add", "-c", str(bad)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "must be an integer" in captured.err

    def test_missing_config(self, capsys):
        assert main(["run", "add", "-c", "nope.yaml"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_non_integer_flag(self):
        with pytest.raises(SystemExit) as exc:
            main(["run", "add", "--alpha", "x"])
        assert exc.value.code == 2

    def test_verbose_logs_operands(self, capsys):
        assert main(["-v", "run", "add"]) == 0
        assert "Adding alpha=1 and bravo=2" in capsys.readouterr().err


class TestTasksAndShow:
    def test_tasks(self, capsys):
        assert main(["tasks"]) == 0
        out = capsys.readouterr().out
        assert "add" in out
        assert "demo" in out
        assert "Adds some numbers together" in out
        assert "1 task(s)" in out

    def test_show(self, capsys):
        assert main(["show", "--alpha", "8"]) == 0
        data = yaml.safe_load(capsys.readouterr().out)
        assert data == {"hello": {"alpha": 8, "bravo": 2, "sum": 0}}

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out


class TestTasksIgnoresConfig:
    def test_broken_config_does_not_break_listing(self, workdir, capsys):
        (workdir / "extdemo.yaml").write_text("hello:\n  alpha: five\n")
        assert main(["tasks"]) == 0
        assert "add" in capsys.readouterr().out

    def test_broken_config_still_breaks_run(self, workdir, capsys):
        (workdir / "extdemo.yaml").write_text("hello:\n  alpha: five\n")
        assert main(["run", "add"]) == 1
        assert "must be an integer" in capsys.readouterr().err

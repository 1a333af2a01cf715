"""Tests for locheck.cli.main entry point."""

import importlib

from locheck.cli import main


def test_version_flag(capsys, monkeypatch):
    version_module = importlib.import_module("locheck.api.config.get_package_version")
    monkeypatch.setattr(version_module, "_VERSION_CACHE", "0.2.0")
    assert main(["--version"]) == 0
    assert capsys.readouterr().out == "locheck 0.2.0\n"


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "check" in capsys.readouterr().out


def test_check_returns_exit_code(tmp_path, capsys):
    source = tmp_path / "Localizable.strings"
    source.write_text('"a" = "b";\n', encoding="utf-8")
    project = tmp_path / "project"
    project.mkdir()
    (project / "App.swift").write_text('f("a")\n', encoding="utf-8")

    assert main(["check", str(source), str(project), "0"]) == 0
    assert "finished!" in capsys.readouterr().out


def test_missing_inputs_return_failure(tmp_path, capsys):
    assert main(["check", str(tmp_path / "missing.strings"), str(tmp_path), "0"]) == 1
    assert "does not exist" in capsys.readouterr().out


def test_usage_error_returns_two(capsys):
    assert main(["check"]) == 2
    assert "Missing argument" in capsys.readouterr().err


def test_main_writes_log_file(tmp_path, locheck_home):
    source = tmp_path / "Localizable.strings"
    source.write_text('"a" = "b";\n', encoding="utf-8")

    main(["check", str(source), str(tmp_path), "5"])

    assert "Audit finished" in (locheck_home / "locheck.log").read_text(encoding="utf-8")


def test_version_command(capsys, monkeypatch):
    monkeypatch.setattr("locheck.api.config.cmd_version.get_package_version", lambda: "0.2.0")
    assert main(["version"]) == 0
    assert "locheck version: 0.2.0" in capsys.readouterr().out

"""CLI tests for the check and run commands."""

import json

import yaml
from typer.testing import CliRunner

from locheck.cli._create_app import _create_app

runner = CliRunner()


def _scenario(make_strings, make_tree):
    source = make_strings("/* Home */", '"a.b" = "X";', '"c.d" = "";')
    project = make_tree({"App.swift": 'label = "a.b";\n', "Notes.md": '"c.d" is documented\n'})
    return source, project


def test_check_reports_unused_and_empty_keys(make_strings, make_tree):
    source, project = _scenario(make_strings, make_tree)

    result = runner.invoke(
        _create_app(), ["check", str(source), str(project), "0", "--extensions", "swift", "--log-empty-values"]
    )

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert "Checking keys from file..." in lines
    assert "in files with extension swift from directory..." in lines
    assert "Empty values will be logged." in lines
    assert "⚠ warning, key '\"c.d\"' has an empty value." in lines
    assert "✗ key '\"c.d\"' is unused (found 0 time)." in lines
    assert not any("a.b" in line and "used" in line for line in lines)
    assert lines[-1] == "✓ finished!"
    assert lines.index("⚠ warning, key '\"c.d\"' has an empty value.") < lines.index(
        "✗ key '\"c.d\"' is unused (found 0 time)."
    )


def test_anxious_mode_prints_used_keys(make_strings, make_tree):
    source, project = _scenario(make_strings, make_tree)

    result = runner.invoke(_create_app(), ["check", str(source), str(project), "0", "--anxious-mode"])

    assert result.exit_code == 0
    assert "✓ key '\"a.b\"' is used 1 time." in result.stdout.splitlines()
    # Notes.md is searched too when no extension is given
    assert "key '\"c.d\"' is used 1 time." in result.stdout


def test_missing_project_exits_non_zero(make_strings, tmp_path):
    source = make_strings('"a.b" = "X";')
    missing = tmp_path / "nowhere"

    result = runner.invoke(_create_app(), ["check", str(source), str(missing), "0"])

    assert result.exit_code == 1
    assert f"Directory {missing} does not exist. Could not start tool." in result.stdout
    assert "key '" not in result.stdout
    assert "finished!" not in result.stdout


def test_negative_threshold_is_a_usage_error(make_strings, make_tree):
    source, project = _scenario(make_strings, make_tree)

    result = runner.invoke(_create_app(), ["check", str(source), str(project), "-1"])

    assert result.exit_code == 2


def test_json_display_appends_summary(make_strings, make_tree):
    source, project = _scenario(make_strings, make_tree)

    result = runner.invoke(
        _create_app(),
        ["--display", "json", "check", str(source), str(project), "0", "-e", "swift", "--log-empty-values"],
    )

    assert result.exit_code == 0
    summary = json.loads(result.stdout[result.stdout.index("{\n") :])
    assert summary["keys_checked"] == 2
    assert summary["unused_keys"] == {'"c.d"': 0}
    assert summary["empty_value_keys"] == ['"c.d"']
    assert summary["project_path"] == str(project)


def test_yaml_display_appends_summary(make_strings, make_tree):
    source, project = _scenario(make_strings, make_tree)

    result = runner.invoke(_create_app(), ["-d", "yaml", "check", str(source), str(project), "0", "-e", "swift"])

    assert result.exit_code == 0
    summary_text = result.stdout[result.stdout.index("errors:") :]
    summary = yaml.safe_load(summary_text)
    assert summary["unused_keys"] == {'"c.d"': 0}


def test_invalid_display_format(make_strings, make_tree):
    source, project = _scenario(make_strings, make_tree)

    result = runner.invoke(_create_app(), ["--display", "xml", "check", str(source), str(project), "0"])

    assert result.exit_code == 2


def test_keys_with_markup_are_printed_verbatim(make_strings, make_tree):
    source = make_strings('"list[bold]" = "x";')
    project = make_tree({"App.swift": ""})

    result = runner.invoke(_create_app(), ["check", str(source), str(project), "0"])

    assert "key '\"list[bold]\"' is unused (found 0 time)." in result.stdout


def test_run_command(make_strings, make_tree, tmp_path):
    source, project = _scenario(make_strings, make_tree)
    config_path = tmp_path / "audit.json"
    config_path.write_text(
        json.dumps(
            {
                "source_file_path": str(source),
                "project_path": str(project),
                "min_occurrence_threshold": 0,
                "allowed_extensions": ["swift"],
            }
        ),
        encoding="utf-8",
    )

    result = runner.invoke(_create_app(), ["run", str(config_path)])

    assert result.exit_code == 0
    assert "✗ key '\"c.d\"' is unused (found 0 time)." in result.stdout.splitlines()


def test_run_command_with_bad_config(tmp_path):
    result = runner.invoke(_create_app(), ["run", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "Configuration file not found" in result.stdout

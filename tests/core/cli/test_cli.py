"""Tests for the CLI entry point."""

import json

from click.testing import CliRunner

from chronicles.core.cli import main


class TestCliGroup:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Chronicles" in result.output
        assert "serve" in result.output
        assert "search" in result.output
        assert "show" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestServeCommand:
    def test_serve_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["serve", "--help"])
        assert result.exit_code == 0
        assert "HTTP" in result.output


class TestSearchCommand:
    def test_lists_dates_as_json(self, scenario_journal):
        runner = CliRunner()
        result = runner.invoke(main, ["--log-level", "ERROR", "search", str(scenario_journal)])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload == {
            "count": 2,
            "journal": str(scenario_journal),
            "results": ["2020-02-15", "2020-01-02"],
            "complete": True,
            "errors": [],
        }


class TestShowCommand:
    def test_prints_html(self, scenario_journal):
        runner = CliRunner()
        result = runner.invoke(main, ["--log-level", "ERROR", "show", str(scenario_journal), "2020-02-15"])
        assert result.exit_code == 0
        assert "<h1>February</h1>" in result.output

    def test_prints_raw(self, scenario_journal):
        runner = CliRunner()
        result = runner.invoke(
            main, ["--log-level", "ERROR", "show", str(scenario_journal), "2020-01-02", "--raw"]
        )
        assert result.exit_code == 0
        assert "# January" in result.output
        assert "<h1>" not in result.output

    def test_missing_entry_exits_nonzero(self, scenario_journal):
        runner = CliRunner()
        result = runner.invoke(main, ["--log-level", "ERROR", "show", str(scenario_journal), "1999-01-01"])
        assert result.exit_code == 1
        assert "No entry found" in result.output


class TestPartialSearch:
    def test_unreadable_journal_is_flagged(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["--log-level", "ERROR", "search", str(tmp_path / "missing")])
        assert result.exit_code == 0
        assert '"complete": false' in result.output
        assert "results are partial" in result.output

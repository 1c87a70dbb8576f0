"""Tests for the CLI main module."""

import json
from unittest.mock import patch

import pytest

from xml_tag_checker.cli.main import (
    create_argument_parser,
    format_reports,
    load_config,
    main,
)
from xml_tag_checker.shared import SUCCESS_MESSAGE, CheckerConfig, ValidationReport
from xml_tag_checker.shared.result import Diagnostic


@pytest.fixture
def good_file(tmp_path):
    path = tmp_path / "good.xml"
    path.write_text('<?xml version="1.0"?>\n<a>\n<b>text</b>\n</a>\n', encoding="utf-8")
    return path


@pytest.fixture
def bad_file(tmp_path):
    path = tmp_path / "bad.xml"
    path.write_text("<a>\n<b>\n</a>\n</z>\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("xml_tag_checker.cli.main.configure_logging") as mock_configure:
        yield mock_configure


class TestArgumentParser:
    """Test argument parsing."""

    def test_check_command(self):
        """Test check arguments are parsed."""
        parser = create_argument_parser()
        args = parser.parse_args(["check", "a.xml", "b.xml", "--format", "json"])
        assert args.command == "check"
        assert [str(p) for p in args.paths] == ["a.xml", "b.xml"]
        assert args.format == "json"

    def test_benchmark_defaults(self):
        """Test benchmark defaults."""
        args = create_argument_parser().parse_args(["benchmark"])
        assert args.size == 1000
        assert args.iterations == 5
        assert args.no_containers is False

    def test_check_requires_paths(self):
        """Test check without paths is a usage error."""
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(["check"])


class TestLoadConfig:
    """Test configuration assembly from arguments."""

    def test_overrides(self, tmp_path):
        """Test command-line options override the config file."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"output_format": "json", "encoding": "latin-1"}))
        args = create_argument_parser().parse_args(
            ["--verbose", "check", "x.xml", "--config", str(config_path), "--format", "text"]
        )
        config = load_config(args)
        assert config.output_format == "text"
        assert config.encoding == "latin-1"
        assert config.logging_level == "DEBUG"

    def test_lenient_and_quiet(self):
        """Test --lenient and --quiet map onto config fields."""
        args = create_argument_parser().parse_args(["--quiet", "check", "x.xml", "--lenient"])
        config = load_config(args)
        assert config.decode_errors == "replace"
        assert config.logging_level == "ERROR"

    def test_defaults(self):
        """Test no options gives the default config."""
        args = create_argument_parser().parse_args(["check", "x.xml"])
        assert load_config(args) == CheckerConfig.default()


class TestFormatReports:
    """Test output formatting."""

    def test_single_report_text(self):
        """Test one report prints bare."""
        assert format_reports([ValidationReport(source="a")], {}, "text") == SUCCESS_MESSAGE

    def test_multiple_reports_text(self):
        """Test several reports get a header each."""
        reports = [
            ValidationReport(source="a.xml"),
            ValidationReport(diagnostics=[Diagnostic.stray_closing(1, "z")], source="b.xml"),
        ]
        output = format_reports(reports, {}, "text")
        assert output == (
            f"==> a.xml <==\n{SUCCESS_MESSAGE}\n\n"
            "==> b.xml <==\nError at line 1 </z> is not constructed correctly."
        )

    def test_json_includes_failures(self):
        """Test JSON output lists unreadable files with their error."""
        output = json.loads(
            format_reports([ValidationReport(source="a.xml")], {"b.xml": "missing"}, "json")
        )
        assert output[0]["well_formed"] is True
        assert output[1] == {"source": "b.xml", "error": "missing"}


class TestMain:
    """Test the CLI entry point end to end."""

    def test_no_command(self, capsys):
        """Test running without a command prints help and fails."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_check_well_formed(self, good_file, capsys):
        """Test a well-formed file prints the success message."""
        assert main(["check", str(good_file)]) == 0
        assert capsys.readouterr().out.strip() == SUCCESS_MESSAGE

    def test_check_malformed_still_exits_zero(self, bad_file, capsys):
        """Test diagnostics are printed and the exit status stays 0."""
        assert main(["check", str(bad_file)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Error at line 3 <b> is not constructed correctly.",
            "Error at line 4 </z> is not constructed correctly.",
        ]

    def test_check_json(self, bad_file, capsys):
        """Test JSON output."""
        assert main(["check", str(bad_file), "--format", "json"]) == 0
        (entry,) = json.loads(capsys.readouterr().out)
        assert entry["source"] == str(bad_file)
        assert entry["error_count"] == 2

    def test_check_missing_file(self, tmp_path, capsys):
        """Test an unreadable file is reported on stderr with exit status 1."""
        missing = tmp_path / "missing.xml"
        assert main(["check", str(missing)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error:")

    def test_check_mixed_files(self, good_file, tmp_path, capsys):
        """Test readable files are still reported when another one fails."""
        assert main(["check", str(good_file), str(tmp_path / "missing.xml")]) == 1
        captured = capsys.readouterr()
        assert SUCCESS_MESSAGE in captured.out
        assert "Error:" in captured.err

    def test_invalid_config(self, tmp_path, good_file, capsys):
        """Test an invalid config file fails before checking."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"output_format": "yaml"}))
        assert main(["check", str(good_file), "--config", str(config_path)]) == 1
        assert "output_format" in capsys.readouterr().err

    def test_non_text_encoding(self, good_file, capsys):
        """Test a binary codec is rejected as invalid configuration."""
        assert main(["check", str(good_file), "--encoding", "hex"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "non-text encoding: hex" in captured.err

    def test_wrongly_typed_config_value(self, tmp_path, good_file, capsys):
        """Test a config value of the wrong type fails cleanly."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"encoding": 5}))
        assert main(["check", str(good_file), "--config", str(config_path)]) == 1
        assert "encoding must be a string" in capsys.readouterr().err

    def test_check_help_documents_exit_status(self, capsys):
        """Test the check help text explains the exit status."""
        with pytest.raises(SystemExit):
            main(["check", "--help"])
        assert "Exit status is 0 whether or not" in capsys.readouterr().out

    def test_logging_configured_from_config(self, good_file, no_logging_setup):
        """Test the configured level is applied."""
        main(["--verbose", "check", str(good_file)])
        no_logging_setup.assert_called_once_with("DEBUG")

    def test_benchmark(self, capsys):
        """Test the benchmark command prints a JSON report."""
        assert main(["benchmark", "--size", "20", "--iterations", "1", "--no-containers"]) == 0
        report = json.loads(capsys.readouterr().out)
        assert set(report["detailed_results"]) == {
            "balanced_document",
            "deeply_nested_document",
            "mismatched_document",
        }

    def test_benchmark_invalid_size(self, capsys):
        """Test invalid benchmark parameters fail cleanly."""
        assert main(["benchmark", "--size", "0"]) == 1
        assert "document_size" in capsys.readouterr().err

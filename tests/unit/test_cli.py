"""Unit tests for the plugdoc CLI.

This module tests argument parsing, each subcommand handler, and the mapping
from library errors to exit codes.
"""

import io
import logging
from unittest.mock import patch

import pytest
from utils import parse_ansi, strip_ansi

from plugdoc import __version__
from plugdoc.cli import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_FILE_ERROR,
    EXIT_NETWORK_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    main,
)
from plugdoc.cli.output import print_entries_plain, should_use_rich_output
from plugdoc.exceptions import ContentDecodingError, DependencyError, FetchError
from plugdoc.registry import get_plugin_entries


pytestmark = pytest.mark.usefixtures("restore_root_logger")


@pytest.mark.unit
@pytest.mark.cli
class TestParser:
    """Test argument parsing."""

    def test_text_command_defaults_to_stdin(self):
        """Test that text commands read stdin when no input is given."""
        args = create_parser().parse_args(["html2md"])
        assert args.input == "-"
        assert args.log_level is None

    def test_url_options(self):
        """Test url2md timeout and HTTPS flags."""
        args = create_parser().parse_args(["url2md", "https://example.com", "--timeout", "3", "--require-https"])
        assert args.timeout == 3.0
        assert args.require_https is True

    def test_log_level_from_environment(self, monkeypatch):
        """Test that PLUGDOC_LOG_LEVEL sets the default level."""
        monkeypatch.setenv("PLUGDOC_LOG_LEVEL", "DEBUG")
        assert main(["entries"]) == EXIT_SUCCESS
        assert logging.getLogger().level == logging.DEBUG

    def test_log_level_flag_overrides_environment(self, monkeypatch):
        """Test that --log-level wins over PLUGDOC_LOG_LEVEL."""
        monkeypatch.setenv("PLUGDOC_LOG_LEVEL", "DEBUG")
        assert main(["--log-level", "ERROR", "entries"]) == EXIT_SUCCESS
        assert logging.getLogger().level == logging.ERROR

    def test_missing_command(self, capsys):
        """Test that running without a subcommand is a usage error."""
        assert main([]) == 2
        assert "usage" in capsys.readouterr().err

    def test_version(self, capsys):
        """Test --version output."""
        assert main(["--version"]) == EXIT_SUCCESS
        assert __version__ in capsys.readouterr().out

    def test_rgb_requires_integers(self, capsys):
        """Test that non-integer RGB components are rejected by the parser."""
        assert main(["rgb", "1", "two", "3"]) == 2
        assert "invalid int value" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestTextCommands:
    """Test the string-to-string subcommands."""

    @pytest.mark.parametrize(
        "command,source,expected",
        [
            ("html2md", "<h1>Title</h1><p>Body &amp; more</p>", "# Title\n\nBody & more\n\n"),
            ("md2html", "## Sub\n- **x**", "<h2>Sub</h2>\n<li><strong>x</strong></li>"),
            ("collapse", "a\n\n\n\nb", "a\n\nb"),
            ("decode", "&lt;p&gt; &#8220;q&#8221;", "<p> \"q\""),
            ("encode", "<a & 'b'>", "&lt;a &amp; &#39;b&#39;&gt;"),
        ],
    )
    def test_file_input(self, tmp_path, capsys, command, source, expected):
        """Test each transform reading from a file."""
        path = tmp_path / "input.txt"
        path.write_text(source, encoding="utf-8")

        assert main([command, str(path)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == expected

    def test_stdin_input(self, monkeypatch, capsys):
        """Test reading input from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("<b>bold</b>"))
        assert main(["html2md", "-"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "**bold**"

    def test_missing_file(self, tmp_path, capsys):
        """Test that a missing input file yields the file error code."""
        assert main(["html2md", str(tmp_path / "missing.html")]) == EXIT_FILE_ERROR
        assert "Input file not found" in capsys.readouterr().err

    def test_undecodable_file(self, tmp_path, capsys):
        """Test that a non-UTF-8 input file yields the file error code."""
        path = tmp_path / "latin1.html"
        path.write_bytes(b"caf\xe9")
        assert main(["decode", str(path)]) == EXIT_FILE_ERROR
        assert "Cannot read" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestUrlCommand:
    """Test the url2md subcommand."""

    @patch("plugdoc.cli.commands.url_to_markdown")
    def test_success(self, mock_url_to_markdown, capsys):
        """Test that fetched Markdown is written to stdout."""
        mock_url_to_markdown.return_value = "# Remote\n\n"

        assert main(["url2md", "https://example.com", "--timeout", "2"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "# Remote\n\n"
        options = mock_url_to_markdown.call_args.kwargs["options"]
        assert options.timeout == 2.0
        assert options.require_https is False

    @pytest.mark.parametrize(
        "error",
        [FetchError("HTTP request failed", url="https://example.com"), ContentDecodingError("not UTF-8")],
    )
    def test_failures(self, capsys, error):
        """Test that fetch and decode failures yield the network error code."""
        with patch("plugdoc.cli.commands.url_to_markdown", side_effect=error):
            assert main(["url2md", "https://example.com"]) == EXIT_NETWORK_ERROR
        assert error.message in capsys.readouterr().err

    def test_missing_httpx(self, capsys):
        """Test that a missing HTTP client yields the dependency error code."""
        error = DependencyError("network", [("httpx", ">=0.28.1")])
        with patch("plugdoc.cli.commands.url_to_markdown", side_effect=error):
            assert main(["url2md", "https://example.com"]) == EXIT_DEPENDENCY_ERROR
        assert "pip install httpx>=0.28.1" in capsys.readouterr().err

    def test_invalid_timeout(self, capsys):
        """Test that a non-positive timeout is a validation error."""
        assert main(["url2md", "https://example.com", "--timeout", "0"]) == EXIT_VALIDATION_ERROR
        assert "timeout" in capsys.readouterr().err

    def test_bad_scheme(self, capsys, no_network_env):
        """Test that a non-http URL fails before any request is made."""
        assert main(["url2md", "ftp://example.com"]) == EXIT_NETWORK_ERROR
        assert "scheme" in capsys.readouterr().err

    def test_unencodable_host(self, capsys, no_network_env):
        """Test that a host httpx cannot encode is reported, not raised."""
        assert main(["url2md", "http://xn--.com/"]) == EXIT_NETWORK_ERROR
        assert "Error:" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestRenderAndColor:
    """Test the terminal output subcommands."""

    def test_render(self, tmp_path, capsys):
        """Test rendering a Markdown file in color."""
        path = tmp_path / "doc.md"
        path.write_text("# Title\n- item\n", encoding="utf-8")

        assert main(["render", str(path)]) == EXIT_SUCCESS
        output = capsys.readouterr().out
        assert parse_ansi(output) == [("#FF0000", "# Title"), ("#00FFFF", "- item")]
        assert strip_ansi(output) == "# Title\n- item\n"

    def test_render_missing_file(self, tmp_path):
        """Test that render reports unreadable input."""
        assert main(["render", str(tmp_path / "nope.md")]) == EXIT_FILE_ERROR

    def test_color(self, capsys):
        """Test printing text in a color."""
        assert main(["color", "warning", "#FFAA00"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "\x1b[38;2;255;170;0mwarning\x1b[0m\n"

    def test_color_invalid(self, capsys):
        """Test that a malformed color is a validation error."""
        assert main(["color", "warning", "orange"]) == EXIT_VALIDATION_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Expected format: #RRGGBB" in captured.err

    def test_rgb(self, capsys):
        """Test RGB to hex conversion."""
        assert main(["rgb", "255", "0", "128"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "#FF0080\n"


@pytest.mark.unit
@pytest.mark.cli
class TestEntriesCommand:
    """Test listing the plugin discovery record."""

    def test_plain_listing(self, capsys):
        """Test the plain-text listing."""
        assert main(["entries"]) == EXIT_SUCCESS
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == len(get_plugin_entries())
        assert lines[7].startswith("RGBtoHex")
        assert lines[7].endswith("(integer, integer, integer) -> string")

    def test_print_entries_plain_to_stream(self, output_stream):
        """Test writing the listing to an explicit stream."""
        print_entries_plain(get_plugin_entries()[:1], stream=output_stream)
        assert output_stream.getvalue() == f"{'HTMLtoMarkdown':<20} (string) -> string\n"

    def test_rich_listing(self, capsys):
        """Test the Rich table listing."""
        pytest.importorskip("rich")
        assert main(["entries", "--rich"]) == EXIT_SUCCESS
        output = capsys.readouterr().out
        assert "Plugin Entries" in output
        assert "PrintColorMarkdown" in output

    def test_rich_missing(self, capsys):
        """Test that --rich without Rich installed is a dependency error."""
        with patch("plugdoc.cli.output.check_rich_available", return_value=False):
            assert main(["entries", "--rich"]) == EXIT_DEPENDENCY_ERROR
        assert "pip install plugdoc[rich]" in capsys.readouterr().err

    def test_should_use_rich_output_without_flag(self):
        """Test that Rich is not used unless requested."""
        args = create_parser().parse_args(["entries"])
        assert should_use_rich_output(args) is False


@pytest.mark.unit
@pytest.mark.cli
class TestLogging:
    """Test logging flags."""

    def test_log_file(self, tmp_path, capsys):
        """Test that --log-file receives log records."""
        log_path = tmp_path / "plugdoc.log"
        assert main(["--log-level", "INFO", "--log-file", str(log_path), "entries"]) == EXIT_SUCCESS
        assert "Logging to file" in log_path.read_text(encoding="utf-8")

    def test_warnings_go_to_stderr(self, capsys):
        """Test that log records never reach stdout."""
        assert main(["--log-level", "WARNING", "rgb", "1", "2", "3"]) == EXIT_SUCCESS
        logging.getLogger("plugdoc.renderers.console").warning("palette problem")
        captured = capsys.readouterr()
        assert captured.out == "#010203\n"
        assert "WARNING: palette problem" in captured.err

    def test_render_failure_exit_code(self, monkeypatch):
        """Test that a failed render maps to the generic error code."""
        monkeypatch.setattr("sys.stdin", io.StringIO("# x"))
        with patch("plugdoc.cli.commands.render_markdown", return_value=False):
            assert main(["render", "-"]) == 1

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/plugdoc/cli/__init__.py
"""Command-line interface for plugdoc.

Examples
--------
    plugdoc html2md page.html
    plugdoc url2md https://example.com --timeout 5
    cat README.md | plugdoc render -
    plugdoc color "warning" "#FFAA00"
    plugdoc entries --rich

"""

import argparse
import sys

from plugdoc import __version__
from plugdoc.cli.commands import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_NETWORK_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    handle_color_command,
    handle_entries_command,
    handle_render_command,
    handle_rgb_command,
    handle_text_command,
    handle_url_command,
)
from plugdoc.constants import DEFAULT_FETCH_TIMEOUT
from plugdoc.logging_utils import configure_logging

__all__ = [
    "EXIT_DEPENDENCY_ERROR",
    "EXIT_ERROR",
    "EXIT_FILE_ERROR",
    "EXIT_NETWORK_ERROR",
    "EXIT_SUCCESS",
    "EXIT_VALIDATION_ERROR",
    "create_parser",
    "main",
]

_TEXT_COMMAND_HELP = {
    "html2md": "Convert HTML to Markdown",
    "md2html": "Convert Markdown to HTML",
    "collapse": "Collapse runs of blank lines",
    "decode": "Decode HTML character entities",
    "encode": "Encode special characters as HTML entities",
}


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="plugdoc",
        description="Convert between HTML and Markdown and render Markdown in the terminal.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: PLUGDOC_LOG_LEVEL, or WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    for name, help_text in _TEXT_COMMAND_HELP.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("input", nargs="?", default="-", help="Input file (default: '-' for stdin)")
        sub.set_defaults(handler=handle_text_command)

    url_parser = subparsers.add_parser("url2md", help="Fetch a URL and convert it to Markdown")
    url_parser.add_argument("url", help="http(s) URL to fetch")
    url_parser.add_argument(
        "--timeout", type=float, default=DEFAULT_FETCH_TIMEOUT, help="Request timeout in seconds (default: %(default)s)"
    )
    url_parser.add_argument("--require-https", action="store_true", help="Refuse plain http:// URLs")
    url_parser.set_defaults(handler=handle_url_command)

    render_parser = subparsers.add_parser("render", help="Render Markdown in color")
    render_parser.add_argument("input", nargs="?", default="-", help="Input file (default: '-' for stdin)")
    render_parser.set_defaults(handler=handle_render_command)

    color_parser = subparsers.add_parser("color", help="Print text in a #RRGGBB color")
    color_parser.add_argument("text", help="Text to print")
    color_parser.add_argument("color", help="Color in #RRGGBB form")
    color_parser.set_defaults(handler=handle_color_command)

    rgb_parser = subparsers.add_parser("rgb", help="Convert RGB components to #RRGGBB")
    for component in ("r", "g", "b"):
        rgb_parser.add_argument(component, type=int, help=f"{component.upper()} component (0-255)")
    rgb_parser.set_defaults(handler=handle_rgb_command)

    entries_parser = subparsers.add_parser("entries", help="List the plugin discovery record")
    entries_parser.add_argument("--rich", action="store_true", help="Render the list as a Rich table")
    entries_parser.set_defaults(handler=handle_entries_command)

    return parser


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return an exit code."""
    parser = create_parser()
    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_ERROR

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)
    return parsed_args.handler(parsed_args)


if __name__ == "__main__":
    sys.exit(main())

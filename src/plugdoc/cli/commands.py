#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/plugdoc/cli/commands.py
"""Subcommand handlers for the plugdoc CLI.

Each handler receives the parsed arguments and returns an exit code. Library
errors are translated into exit codes here; nothing below the CLI prints.
"""

import argparse
import logging
import sys
from pathlib import Path

from plugdoc.exceptions import ColorFormatError, ContentDecodingError, DependencyError, NetworkError
from plugdoc.options import FetchOptions
from plugdoc.parsers.html import html_to_markdown, url_to_markdown
from plugdoc.registry import get_plugin_entries
from plugdoc.renderers.console import parse_hex_color, print_color, rgb_to_hex
from plugdoc.renderers.html import markdown_to_html
from plugdoc.renderers.terminal import render_markdown
from plugdoc.utils.entities import decode_entities, encode_entities
from plugdoc.utils.text import collapse_newlines

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_NETWORK_ERROR = 5

TEXT_TRANSFORMS = {
    "html2md": html_to_markdown,
    "md2html": markdown_to_html,
    "collapse": collapse_newlines,
    "decode": decode_entities,
    "encode": encode_entities,
}


class InputReadError(Exception):
    """Raised when a command's input file cannot be read."""


def read_input(source: str) -> str:
    """Read text from a file path, or from stdin when ``source`` is ``-``."""
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise InputReadError(f"Input file not found: {source}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Cannot read {source}: {e}") from e


def handle_text_command(args: argparse.Namespace) -> int:
    """Run one of the string-to-string transforms and print the result."""
    try:
        text = read_input(args.input)
    except InputReadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    sys.stdout.write(TEXT_TRANSFORMS[args.command](text))
    return EXIT_SUCCESS


def handle_url_command(args: argparse.Namespace) -> int:
    """Fetch a URL and print it as Markdown."""
    try:
        options = FetchOptions(timeout=args.timeout, require_https=args.require_https)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        markdown = url_to_markdown(args.url, options=options)
    except DependencyError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_DEPENDENCY_ERROR
    except (NetworkError, ContentDecodingError) as e:
        logger.debug("Fetch failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_NETWORK_ERROR

    sys.stdout.write(markdown)
    return EXIT_SUCCESS


def handle_render_command(args: argparse.Namespace) -> int:
    """Render Markdown to the terminal in color."""
    try:
        text = read_input(args.input)
    except InputReadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    return EXIT_SUCCESS if render_markdown(text) else EXIT_ERROR


def handle_color_command(args: argparse.Namespace) -> int:
    """Print a single piece of text in a color."""
    try:
        parse_hex_color(args.color)
    except ColorFormatError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    print_color(args.text, args.color)
    sys.stdout.write("\n")
    return EXIT_SUCCESS


def handle_rgb_command(args: argparse.Namespace) -> int:
    """Print the ``#RRGGBB`` form of three components."""
    print(rgb_to_hex(args.r, args.g, args.b))
    return EXIT_SUCCESS


def handle_entries_command(args: argparse.Namespace) -> int:
    """List the plugin discovery record."""
    from plugdoc.cli.output import print_entries_plain, print_entries_rich, should_use_rich_output

    entries = get_plugin_entries()
    try:
        use_rich = should_use_rich_output(args, raise_on_missing=True)
    except DependencyError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_DEPENDENCY_ERROR

    if use_rich:
        print_entries_rich(entries)
    else:
        print_entries_plain(entries)
    return EXIT_SUCCESS

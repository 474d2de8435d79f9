#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plugdoc/renderers/__init__.py
"""Renderers that turn Markdown dialect text into HTML or terminal output."""

from plugdoc.renderers.console import colorize, parse_hex_color, print_color, rgb_to_hex
from plugdoc.renderers.html import MarkdownToHtmlTranscoder, markdown_to_html
from plugdoc.renderers.terminal import (
    LineKind,
    RenderLine,
    Segment,
    TerminalMarkdownRenderer,
    classify_line,
    render_markdown,
    scan_inline,
)

__all__ = [
    "LineKind",
    "MarkdownToHtmlTranscoder",
    "RenderLine",
    "Segment",
    "TerminalMarkdownRenderer",
    "classify_line",
    "colorize",
    "markdown_to_html",
    "parse_hex_color",
    "print_color",
    "render_markdown",
    "rgb_to_hex",
    "scan_inline",
]

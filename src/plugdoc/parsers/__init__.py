#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plugdoc/parsers/__init__.py
"""Parsers that turn source markup into the Markdown dialect."""

from plugdoc.parsers.html import HtmlToMarkdownTranscoder, html_to_markdown, url_to_markdown

__all__ = [
    "HtmlToMarkdownTranscoder",
    "html_to_markdown",
    "url_to_markdown",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plugdoc/renderers/html.py
"""Markdown dialect to HTML transcoder.

A partial inverse of :mod:`plugdoc.parsers.html`. Only ATX headers, bold,
italic and ``- `` list items are converted; everything else passes through
untouched. Nothing is nested, paragraphs are not wrapped and list items are
not grouped into ``<ul>``, so converting HTML to Markdown and back is not
expected to reproduce the input.

"""

from __future__ import annotations

import re
from typing import Sequence

from plugdoc.utils.rules import TagRule, apply_rules


def _header_rule(level: int) -> TagRule:
    return TagRule(
        name=f"h{level}",
        pattern=re.compile(rf"^{'#' * level} (.*)$", re.MULTILINE),
        replacement=rf"<h{level}>\1</h{level}>",
    )


# Headers run from level 6 down so "## x" is never taken by the level 1 rule
DEFAULT_MARKDOWN_RULES: tuple[TagRule, ...] = (
    *(_header_rule(level) for level in range(6, 0, -1)),
    TagRule("bold", re.compile(r"\*\*(.*?)\*\*"), r"<strong>\1</strong>"),
    TagRule("italic", re.compile(r"\*(.*?)\*"), r"<em>\1</em>"),
    TagRule("li", re.compile(r"^- (.*)$", re.MULTILINE), r"<li>\1</li>"),
)


class MarkdownToHtmlTranscoder:
    """Convert dialect text into basic HTML.

    Parameters
    ----------
    rules : sequence of TagRule, optional
        Substitution rules to apply, in order. Defaults to
        :data:`DEFAULT_MARKDOWN_RULES`.

    """

    def __init__(self, rules: Sequence[TagRule] | None = None):
        """Initialize the transcoder with its rule sequence."""
        self.rules: tuple[TagRule, ...] = tuple(rules) if rules is not None else DEFAULT_MARKDOWN_RULES

    def convert(self, markdown: str) -> str:
        """Convert ``markdown`` to HTML."""
        return apply_rules(markdown, self.rules)


_default_transcoder = MarkdownToHtmlTranscoder()


def markdown_to_html(markdown: str) -> str:
    """Convert ``markdown`` to HTML using the default rules.

    Examples
    --------
        >>> markdown_to_html("## Title\\n- **bold** and *em*")
        '<h2>Title</h2>\\n<li><strong>bold</strong> and <em>em</em></li>'

    """
    return _default_transcoder.convert(markdown)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plugdoc/parsers/html.py
"""HTML to Markdown dialect transcoder.

This is a tag-substitution transcoder, not an HTML parser. It recognizes a
small set of constructs (headings, paragraphs, bold, italic, list items and
line breaks), drops scripts and styles, and strips every other tag while
keeping its text. The result is normalized with
:func:`~plugdoc.utils.text.collapse_newlines` and
:func:`~plugdoc.utils.entities.decode_entities`.

Rule order matters: the structural rules must consume their tags before the
final catch-all removes whatever markup is left.

"""

from __future__ import annotations

import logging
import re
from typing import Any, Sequence

from plugdoc.exceptions import ContentDecodingError
from plugdoc.options import FetchOptions
from plugdoc.utils.decorators import debug_timer
from plugdoc.utils.entities import decode_entities
from plugdoc.utils.network import fetch_content
from plugdoc.utils.rules import TagRule, apply_rules
from plugdoc.utils.text import collapse_newlines

logger = logging.getLogger(__name__)


def _heading_rule(level: int) -> TagRule:
    return TagRule(
        name=f"h{level}",
        pattern=re.compile(rf"<h{level}>(.*?)</h{level}>", re.IGNORECASE),
        replacement="#" * level + r" \1\n\n",
    )


DEFAULT_HTML_RULES: tuple[TagRule, ...] = (
    TagRule("script", re.compile(r"<script.*?</script>", re.IGNORECASE | re.DOTALL), ""),
    TagRule("style", re.compile(r"<style.*?</style>", re.IGNORECASE | re.DOTALL), ""),
    TagRule("br", re.compile(r"<br\s*/?>", re.IGNORECASE), "\n"),
    *(_heading_rule(level) for level in range(1, 7)),
    TagRule("p", re.compile(r"<p>(.*?)</p>", re.IGNORECASE), r"\1\n\n"),
    TagRule("bold", re.compile(r"<(?:strong|b)>(.*?)</(?:strong|b)>", re.IGNORECASE), r"**\1**"),
    TagRule("italic", re.compile(r"<(?:em|i)>(.*?)</(?:em|i)>", re.IGNORECASE), r"*\1*"),
    TagRule("li", re.compile(r"<li>(.*?)</li>", re.IGNORECASE), r"- \1\n"),
    TagRule("list", re.compile(r"</?(?:ul|ol)>", re.IGNORECASE), ""),
    TagRule("tag", re.compile(r"<[^>]*>"), ""),
)


class HtmlToMarkdownTranscoder:
    """Convert HTML into the Markdown dialect with ordered substitution rules.

    Parameters
    ----------
    rules : sequence of TagRule, optional
        Substitution rules to apply, in order. Defaults to
        :data:`DEFAULT_HTML_RULES`.

    Examples
    --------
        >>> HtmlToMarkdownTranscoder().convert("<h2>Hi</h2><p>a &amp; b</p>")
        '## Hi\\n\\na & b\\n\\n'

    """

    def __init__(self, rules: Sequence[TagRule] | None = None):
        """Initialize the transcoder with its rule sequence."""
        self.rules: tuple[TagRule, ...] = tuple(rules) if rules is not None else DEFAULT_HTML_RULES

    def strip_tags(self, html: str) -> str:
        """Apply the substitution rules only, without newline or entity cleanup."""
        return apply_rules(html, self.rules)

    def convert(self, html: str) -> str:
        """Convert ``html`` to dialect text.

        Parameters
        ----------
        html : str
            HTML source

        Returns
        -------
        str
            Dialect text with blank-line runs collapsed and entities decoded

        """
        markdown = self.strip_tags(html)
        markdown = collapse_newlines(markdown)
        return decode_entities(markdown)


_default_transcoder = HtmlToMarkdownTranscoder()


def html_to_markdown(html: str) -> str:
    """Convert ``html`` to dialect text using the default rules."""
    return _default_transcoder.convert(html)


def decode_html_bytes(content: bytes, source: str | None = None) -> str:
    """Decode fetched bytes as UTF-8.

    Raises
    ------
    ContentDecodingError
        If ``content`` is not valid UTF-8

    """
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ContentDecodingError(
            f"Content from {source or 'input'} is not valid UTF-8: {e}", url=source, original_error=e
        ) from e


def url_to_markdown(url: str, options: FetchOptions | None = None, transport: Any = None) -> str:
    """Fetch ``url`` and convert the returned HTML to dialect text.

    Parameters
    ----------
    url : str
        http(s) URL to fetch
    options : FetchOptions, optional
        Fetch configuration
    transport : httpx.BaseTransport, optional
        Custom transport for the HTTP client

    Returns
    -------
    str
        Converted dialect text

    Raises
    ------
    FetchError
        If the transfer fails
    NetworkDisabledError
        If network access is disabled
    ContentDecodingError
        If the response body is not valid UTF-8

    """
    with debug_timer(logger, f"Fetching {url}"):
        content = fetch_content(url, options=options, transport=transport)
    html = decode_html_bytes(content, source=url)
    return html_to_markdown(html)

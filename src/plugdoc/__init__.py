"""plugdoc - host-callable HTML, Markdown and terminal text tools.

plugdoc converts between HTML and a small Markdown dialect, decodes and
encodes character entities, and renders Markdown as truecolor terminal
output. Every operation is also exposed through a fixed discovery record so a
host scripting interpreter can call it by name.

Key Features
------------
- Ordered tag-substitution HTML to Markdown transcoding
- Optional fetch-and-convert for remote pages (requires httpx)
- Partial Markdown to HTML transcoding
- Entity decoding and encoding over a fixed entity table
- Line-oriented Markdown rendering with 24-bit ANSI colors

Examples
--------
Converting HTML:

    >>> from plugdoc import html_to_markdown
    >>> html_to_markdown("<h1>Title</h1><p>Tom &amp; Jerry</p>")
    '# Title\\n\\nTom & Jerry\\n\\n'

Rendering Markdown to the terminal:

    >>> from plugdoc import render_markdown
    >>> render_markdown("# Title\\n- **bold** item")  # doctest: +SKIP
    True

Calling through the discovery record:

    >>> from plugdoc.registry import invoke
    >>> invoke("EncodeHTMLEntities", "<b>")
    '&lt;b&gt;'

"""

from plugdoc.exceptions import (
    ColorFormatError,
    ContentDecodingError,
    DependencyError,
    FetchError,
    NetworkError,
    PlugdocError,
    ValidationError,
)
from plugdoc.options import FetchOptions, RenderOptions
from plugdoc.parsers.html import HtmlToMarkdownTranscoder, html_to_markdown, url_to_markdown
from plugdoc.renderers.console import parse_hex_color, print_color, rgb_to_hex
from plugdoc.renderers.html import MarkdownToHtmlTranscoder, markdown_to_html
from plugdoc.renderers.terminal import TerminalMarkdownRenderer, render_markdown, scan_inline
from plugdoc.utils.entities import decode_entities, encode_entities
from plugdoc.utils.text import collapse_newlines

__version__ = "0.1.0"

__all__ = [
    "ColorFormatError",
    "ContentDecodingError",
    "DependencyError",
    "FetchError",
    "FetchOptions",
    "HtmlToMarkdownTranscoder",
    "MarkdownToHtmlTranscoder",
    "NetworkError",
    "PlugdocError",
    "RenderOptions",
    "TerminalMarkdownRenderer",
    "ValidationError",
    "collapse_newlines",
    "decode_entities",
    "encode_entities",
    "html_to_markdown",
    "markdown_to_html",
    "parse_hex_color",
    "print_color",
    "render_markdown",
    "rgb_to_hex",
    "scan_inline",
    "url_to_markdown",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Host-facing boundary functions.

Every function here accepts whatever a host interpreter passes in, including
``None``, and never raises. Failures degrade to the empty string, ``False`` or
one of the error sentinels in :mod:`plugdoc.constants`. The library functions
they wrap raise :mod:`plugdoc.exceptions` errors instead and are the better
choice for Python callers.
"""

from __future__ import annotations

import logging
from typing import Any

from plugdoc.constants import SENTINEL_DECODE_ERROR, SENTINEL_FETCH_ERROR, SENTINEL_INVALID_URL
from plugdoc.exceptions import ContentDecodingError, DependencyError, NetworkError
from plugdoc.parsers import html as html_parser
from plugdoc.renderers import console, terminal
from plugdoc.renderers import html as html_renderer
from plugdoc.utils import entities, text

logger = logging.getLogger(__name__)


def _as_text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def html_to_markdown(value: Any) -> str:
    """Convert HTML to dialect text; ``""`` for absent input."""
    source = _as_text(value)
    if source is None:
        return ""
    return html_parser.html_to_markdown(source)


def url_to_markdown(value: Any) -> str:
    """Fetch a URL and convert it to dialect text.

    Returns
    -------
    str
        The converted text, or one of ``"Invalid URL"``, ``"Error fetching URL"``
        and ``"Error decoding content"``.

    """
    url = _as_text(value)
    if not url:
        return SENTINEL_INVALID_URL
    try:
        return html_parser.url_to_markdown(url)
    except ContentDecodingError as e:
        logger.warning(e.message)
        return SENTINEL_DECODE_ERROR
    except (NetworkError, DependencyError) as e:
        logger.warning(e.message)
        return SENTINEL_FETCH_ERROR


def collapse_newlines(value: Any) -> str:
    """Collapse blank-line runs; ``""`` for absent input."""
    source = _as_text(value)
    return text.collapse_newlines(source) if source is not None else ""


def decode_html_entities(value: Any) -> str:
    """Decode character references; ``""`` for absent input."""
    source = _as_text(value)
    return entities.decode_entities(source) if source is not None else ""


def encode_html_entities(value: Any) -> str:
    """Encode ``& < > " '`` as references; ``""`` for absent input."""
    source = _as_text(value)
    return entities.encode_entities(source) if source is not None else ""


def markdown_to_html(value: Any) -> str:
    """Convert dialect text to HTML; ``""`` for absent input."""
    source = _as_text(value)
    return html_renderer.markdown_to_html(source) if source is not None else ""


def print_color(value: Any, color: Any) -> bool:
    """Print text in a ``#RRGGBB`` color; False for absent input or a bad color."""
    source = _as_text(value)
    if source is None or not isinstance(color, str):
        return False
    return console.print_color(source, color)


def rgb_to_hex(r: Any, g: Any, b: Any) -> str:
    """Format three integers as ``#RRGGBB``; ``""`` for non-numeric or infinite input."""
    try:
        return console.rgb_to_hex(int(r), int(g), int(b))
    except (TypeError, ValueError, OverflowError):
        return ""


def print_color_markdown(value: Any) -> bool:
    """Render Markdown to stdout in color; False for absent input."""
    source = _as_text(value)
    if source is None:
        return False
    return terminal.render_markdown(source)

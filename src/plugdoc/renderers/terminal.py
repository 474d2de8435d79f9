#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plugdoc/renderers/terminal.py
"""Render Markdown dialect text as colored terminal output.

The renderer works one line at a time. Each line is classified into a
:class:`LineKind`, which fixes its default color; plain lines and list items
are then scanned for ``**bold**`` spans. The only state carried between
lines is whether a fenced code block is open, and that flag is local to a
single :meth:`TerminalMarkdownRenderer.render` call.

An unterminated fence leaves every remaining line of that call inside the
code block.

"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import IO, Iterator, List, Optional, Tuple

from plugdoc.constants import BOLD_MARKER, CODE_FENCE_MARKER
from plugdoc.options import RenderOptions
from plugdoc.renderers.console import print_color

logger = logging.getLogger(__name__)


class LineKind(Enum):
    """Classification of a single Markdown line."""

    CODE_FENCE = "code_fence"
    CODE_CONTENT = "code_content"
    HORIZONTAL_RULE = "horizontal_rule"
    HEADER = "header"
    LIST_ITEM = "list_item"
    PLAIN = "plain"


@dataclass(frozen=True)
class Segment:
    """A run of text printed in one color."""

    text: str
    color: str


@dataclass(frozen=True)
class RenderLine:
    """A classified line, ready for output.

    Parameters
    ----------
    kind : LineKind
        Line classification
    text : str
        Text to print (the normalized header text for headers)
    color : str
        Default color for the line
    level : int, default 0
        Header level; 0 for every other kind

    """

    kind: LineKind
    text: str
    color: str
    level: int = 0

    @property
    def scans_inline(self) -> bool:
        """Whether bold spans are highlighted within this line."""
        return self.kind in (LineKind.LIST_ITEM, LineKind.PLAIN)


def split_lines(text: str) -> List[str]:
    r"""Split ``text`` on ``\n``, dropping a trailing ``\r`` and a final empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _is_list_item(trimmed: str) -> bool:
    if trimmed.startswith("- "):
        return True
    if trimmed.startswith("*") and not trimmed.startswith(BOLD_MARKER):
        return True
    return len(trimmed) > 1 and "0" <= trimmed[0] <= "9" and trimmed[1] == "."


def classify_line(line: str, in_code_block: bool, options: Optional[RenderOptions] = None) -> RenderLine:
    """Classify ``line`` given the current code block state.

    Parameters
    ----------
    line : str
        Raw line without its line terminator
    in_code_block : bool
        Whether a fenced code block is currently open
    options : RenderOptions, optional
        Color palette; defaults to :class:`RenderOptions`

    Returns
    -------
    RenderLine
        The classified line. Callers toggle their code block state when the
        kind is :attr:`LineKind.CODE_FENCE`.

    """
    options = options or RenderOptions()
    trimmed = line.lstrip()

    if trimmed.startswith(CODE_FENCE_MARKER):
        return RenderLine(LineKind.CODE_FENCE, trimmed, options.code_fence)

    if in_code_block:
        return RenderLine(LineKind.CODE_CONTENT, line, options.code_content)

    if trimmed and all(char == "-" for char in trimmed):
        return RenderLine(LineKind.HORIZONTAL_RULE, line, options.horizontal_rule)

    if trimmed.startswith("#"):
        level = len(trimmed) - len(trimmed.lstrip("#"))
        header_text = trimmed[level:].strip()
        return RenderLine(
            LineKind.HEADER,
            f"{'#' * level} {header_text}",
            options.header_color(level),
            level=level,
        )

    if _is_list_item(trimmed):
        return RenderLine(LineKind.LIST_ITEM, line, options.list_item)

    return RenderLine(LineKind.PLAIN, line, options.plain)


def scan_inline(line: str, default_color: str, bold_color: Optional[str] = None) -> List[Segment]:
    """Split ``line`` into colored segments around ``**bold**`` spans.

    Text outside markers uses ``default_color`` and text between a pair of
    markers uses ``bold_color``. An opening marker with no closing partner is
    kept as a literal ``**`` in the default color, followed by the rest of the
    line. Empty segments are omitted.

    Examples
    --------
        >>> [(s.text, s.color) for s in scan_inline("a **b** c", "#FFFFFF", "#00FF00")]
        [('a ', '#FFFFFF'), ('b', '#00FF00'), (' c', '#FFFFFF')]
        >>> [s.text for s in scan_inline("a **b", "#FFFFFF")]
        ['a ', '**', 'b']

    """
    bold_color = bold_color or RenderOptions().bold
    marker_len = len(BOLD_MARKER)
    segments: List[Segment] = []
    remaining = line

    while True:
        start = remaining.find(BOLD_MARKER)
        if start == -1:
            break

        before = remaining[:start]
        if before:
            segments.append(Segment(before, default_color))

        after_start = remaining[start + marker_len :]
        end = after_start.find(BOLD_MARKER)
        if end == -1:
            segments.append(Segment(BOLD_MARKER, default_color))
            remaining = after_start
            break

        bold_text = after_start[:end]
        if bold_text:
            segments.append(Segment(bold_text, bold_color))
        remaining = after_start[end + marker_len :]

    if remaining:
        segments.append(Segment(remaining, default_color))
    return segments


class TerminalMarkdownRenderer:
    """Write Markdown dialect text to a terminal stream with truecolor escapes.

    Parameters
    ----------
    options : RenderOptions, optional
        Color palette
    stream : IO[str], optional
        Output stream. When omitted, ``sys.stdout`` is looked up on each
        render so redirection after construction is honored.

    """

    def __init__(self, options: Optional[RenderOptions] = None, stream: Optional[IO[str]] = None):
        """Initialize the renderer."""
        self.options = options or RenderOptions()
        self.stream = stream

    def iter_lines(self, text: str) -> Iterator[Tuple[RenderLine, List[Segment]]]:
        """Yield each classified line of ``text`` with the segments to print."""
        in_code_block = False
        for line in split_lines(text):
            render_line = classify_line(line, in_code_block, self.options)
            if render_line.kind is LineKind.CODE_FENCE:
                in_code_block = not in_code_block

            if render_line.scans_inline:
                segments = scan_inline(render_line.text, render_line.color, self.options.bold)
            elif render_line.text:
                segments = [Segment(render_line.text, render_line.color)]
            else:
                segments = []
            yield render_line, segments

        if in_code_block:
            logger.debug("Code fence left open at end of input")

    def render(self, text: str) -> bool:
        """Render ``text`` to the output stream.

        Parameters
        ----------
        text : str
            Markdown dialect text

        Returns
        -------
        bool
            True once every line has been written; False if ``text`` is not
            a string. Malformed Markdown never causes a failure.

        """
        if not isinstance(text, str):
            logger.warning("Cannot render %s; expected str", type(text).__name__)
            return False

        stream = self.stream if self.stream is not None else sys.stdout
        for _render_line, segments in self.iter_lines(text):
            for segment in segments:
                print_color(segment.text, segment.color, stream)
            stream.write("\n")
        stream.flush()
        return True


def render_markdown(
    text: str, stream: Optional[IO[str]] = None, options: Optional[RenderOptions] = None
) -> bool:
    """Render ``text`` with a :class:`TerminalMarkdownRenderer`."""
    return TerminalMarkdownRenderer(options=options, stream=stream).render(text)

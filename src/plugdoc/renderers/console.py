#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plugdoc/renderers/console.py
"""Truecolor console output.

Text is written wrapped in a 24-bit foreground escape and a reset escape.
Colors are ``#RRGGBB`` strings; anything else is rejected before a single
byte is written.

"""

from __future__ import annotations

import logging
import re
import sys
from typing import IO, Optional, Tuple

from plugdoc.constants import ANSI_RESET, ANSI_TRUECOLOR_FOREGROUND
from plugdoc.exceptions import ColorFormatError

logger = logging.getLogger(__name__)

_HEX_COLOR_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")


def parse_hex_color(color: str) -> Tuple[int, int, int]:
    """Parse a ``#RRGGBB`` color into its red, green and blue components.

    Parameters
    ----------
    color : str
        Color string: ``#`` followed by exactly six hex digits

    Returns
    -------
    tuple of int
        ``(r, g, b)``, each in 0..255

    Raises
    ------
    ColorFormatError
        If ``color`` is not exactly seven characters of the form ``#RRGGBB``

    Examples
    --------
        >>> parse_hex_color("#FF8000")
        (255, 128, 0)

    """
    if not isinstance(color, str) or not _HEX_COLOR_PATTERN.fullmatch(color):
        raise ColorFormatError(color)
    return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format RGB components as an uppercase ``#RRGGBB`` string.

    Components are clamped to 0..255.
    """
    r, g, b = (max(0, min(255, int(component))) for component in (r, g, b))
    return f"#{r:02X}{g:02X}{b:02X}"


def colorize(text: str, color: str) -> str:
    """Return ``text`` wrapped in the truecolor escape for ``color`` and a reset."""
    r, g, b = parse_hex_color(color)
    return ANSI_TRUECOLOR_FOREGROUND.format(r=r, g=g, b=b) + text + ANSI_RESET


def print_color(text: str, color: str, stream: Optional[IO[str]] = None) -> bool:
    """Write ``text`` to ``stream`` in ``color``.

    Parameters
    ----------
    text : str
        Text to write verbatim
    color : str
        ``#RRGGBB`` foreground color
    stream : IO[str], optional
        Output stream. Defaults to ``sys.stdout`` at call time.

    Returns
    -------
    bool
        True if the text was written; False if ``color`` is invalid, in which
        case nothing is written.

    """
    try:
        payload = colorize(text, color)
    except ColorFormatError as e:
        logger.warning(e.message)
        return False

    target = stream if stream is not None else sys.stdout
    target.write(payload)
    target.flush()
    return True

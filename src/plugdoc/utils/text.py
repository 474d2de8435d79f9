#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plugdoc/utils/text.py
"""Text normalization helpers shared by the transcoders."""

from __future__ import annotations

import re

# A newline followed by any whitespace, repeated: blank and whitespace-only lines
_BLANK_RUN_PATTERN = re.compile(r"(?:\n\s*){2,}")


def collapse_newlines(text: str) -> str:
    r"""Collapse runs of blank lines to a single blank line.

    Any run of two or more newlines, each optionally followed by whitespace,
    is replaced with exactly ``"\n\n"``. Whitespace trailing the run is
    consumed along with it, so the next line loses its indentation.

    Parameters
    ----------
    text : str
        Text to normalize

    Returns
    -------
    str
        Normalized text. Applying the function again returns the same value.

    Examples
    --------
        >>> collapse_newlines("a\n\n\n\nb")
        'a\n\nb'
        >>> collapse_newlines("a\n  \n\t\nb")
        'a\n\nb'

    """
    return _BLANK_RUN_PATTERN.sub("\n\n", text)

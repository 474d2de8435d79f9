"""Test utilities for the plugdoc test suite."""

import re

ANSI_PATTERN = re.compile(r"\x1b\[38;2;(\d+);(\d+);(\d+)m(.*?)\x1b\[0m", re.DOTALL)


def parse_ansi(output: str) -> list[tuple[str, str]]:
    """Split captured terminal output into (hex color, text) pairs."""
    return [(f"#{int(r):02X}{int(g):02X}{int(b):02X}", text) for r, g, b, text in ANSI_PATTERN.findall(output)]


def strip_ansi(output: str) -> str:
    """Remove truecolor and reset escapes, keeping the text."""
    return re.sub(r"\x1b\[[0-9;]*m", "", output)

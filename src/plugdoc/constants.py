#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for plugdoc.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Entity Tables - Character reference tables used by the entity codec
3. Terminal Colors - Palette used by the terminal Markdown renderer
4. Network - Fetch defaults and dependency specifications
5. Logging - Log level defaults for the command-line interface
6. Plugin Boundary - Type tags and error sentinels for host callers
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping

# =============================================================================
# Type Definitions
# =============================================================================

TypeTag = Literal["string", "integer", "double", "boolean"]

# =============================================================================
# Entity Tables
# =============================================================================

NAMED_ENTITIES: Mapping[str, str] = MappingProxyType(
    {
        "bull": "•",
        "amp": "&",
        "lt": "<",
        "gt": ">",
        "quot": '"',
        "apos": "'",
        "copy": "©",
        "nbsp": " ",
        "ndash": "–",
        "mdash": "—",
        "lsquo": "‘",
        "rsquo": "’",
        "ldquo": "“",
        "rdquo": "”",
        "hellip": "…",
    }
)

# Numeric references folded to plain punctuation instead of the literal codepoint
NUMERIC_ENTITY_OVERRIDES: Mapping[int, str] = MappingProxyType(
    {
        8217: "'",
        8220: '"',
        8221: '"',
        8211: "-",
        8230: "…",
    }
)

ENCODE_ENTITIES: Mapping[str, str] = MappingProxyType(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)

# =============================================================================
# Terminal Colors
# =============================================================================

COLOR_CODE_FENCE = "#FF00FF"
COLOR_CODE_CONTENT = "#AAAAAA"
COLOR_HORIZONTAL_RULE = "#FFFF00"
COLOR_BOLD = "#32b80d"
COLOR_LIST_ITEM = "#00FFFF"
COLOR_PLAIN = "#e4e1f2"

HEADER_COLORS: Mapping[int, str] = MappingProxyType(
    {
        1: "#FF0000",
        2: "#e0690d",
        3: "#FFFF00",
        4: "#32b80d",
        5: "#adabba",
    }
)
COLOR_HEADER_FALLBACK = "#8B00FF"

ANSI_RESET = "\x1b[0m"
ANSI_TRUECOLOR_FOREGROUND = "\x1b[38;2;{r};{g};{b}m"

CODE_FENCE_MARKER = "```"
BOLD_MARKER = "**"

# =============================================================================
# Network
# =============================================================================

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; plugdoc-fetcher/1.0)"
DEFAULT_FETCH_TIMEOUT = 10.0
DEFAULT_MAX_FETCH_BYTES = 20 * 1024 * 1024
DEFAULT_MAX_REDIRECTS = 5

DEPS_NETWORK = [("httpx", "httpx", ">=0.28.1")]
DEPS_RICH = [("rich", "rich", ">=13.0.0")]

ENV_USER_AGENT = "PLUGDOC_USER_AGENT"
ENV_DISABLE_NETWORK = "PLUGDOC_DISABLE_NETWORK"

# =============================================================================
# Logging
# =============================================================================

ENV_LOG_LEVEL = "PLUGDOC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Third-party loggers that report every HTTP request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")

# =============================================================================
# Plugin Boundary
# =============================================================================

VALID_TYPE_TAGS: frozenset[str] = frozenset({"string", "integer", "double", "boolean"})
MAX_PLUGIN_PARAMS = 10

SENTINEL_INVALID_URL = "Invalid URL"
SENTINEL_FETCH_ERROR = "Error fetching URL"
SENTINEL_DECODE_ERROR = "Error decoding content"

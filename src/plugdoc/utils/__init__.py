#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plugdoc/utils/__init__.py
"""Utility modules for the plugdoc package.

This package contains the entity codec, newline normalization, ordered
substitution rules, dependency checks and HTTP fetching.
"""

from plugdoc.utils.entities import decode_entities, encode_entities
from plugdoc.utils.text import collapse_newlines

__all__ = [
    "collapse_newlines",
    "decode_entities",
    "encode_entities",
]

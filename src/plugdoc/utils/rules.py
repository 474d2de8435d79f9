#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plugdoc/utils/rules.py
"""Ordered regular-expression substitution rules.

Both transcoders are a fixed sequence of :class:`TagRule` objects. Each rule is
one left-to-right ``re.sub`` pass over the whole text, and rules run strictly
in sequence, so a later rule sees the output of every earlier one.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Union

Replacement = Union[str, Callable[["re.Match[str]"], str]]


@dataclass(frozen=True)
class TagRule:
    """One ordered (pattern, replacement) substitution.

    Parameters
    ----------
    name : str
        Short label used in debug logging and tests
    pattern : re.Pattern
        Compiled pattern to search for
    replacement : str or callable
        Replacement template or function, as accepted by ``re.sub``

    """

    name: str
    pattern: "re.Pattern[str]"
    replacement: Replacement

    def apply(self, text: str) -> str:
        """Apply this rule to every match in ``text``."""
        return self.pattern.sub(self.replacement, text)


def apply_rules(text: str, rules: Iterable[TagRule]) -> str:
    """Run ``rules`` over ``text`` in order and return the result."""
    for rule in rules:
        text = rule.apply(text)
    return text

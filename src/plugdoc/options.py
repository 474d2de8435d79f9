#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for fetching and terminal rendering.

Options are frozen dataclasses. Use :meth:`CloneFrozenMixin.create_updated`
to derive a modified copy instead of mutating an instance.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

from plugdoc.constants import (
    COLOR_BOLD,
    COLOR_CODE_CONTENT,
    COLOR_CODE_FENCE,
    COLOR_HEADER_FALLBACK,
    COLOR_HORIZONTAL_RULE,
    COLOR_LIST_ITEM,
    COLOR_PLAIN,
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_MAX_FETCH_BYTES,
    DEFAULT_MAX_REDIRECTS,
    HEADER_COLORS,
)

_T = TypeVar("_T", bound="CloneFrozenMixin")

_HEX_COLOR_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self: _T, **kwargs: Any) -> _T:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class FetchOptions(CloneFrozenMixin):
    """Options controlling how remote HTML is fetched.

    Parameters
    ----------
    timeout : float, default 10.0
        Request timeout in seconds.
    max_size_bytes : int, default 20MB
        Maximum accepted response size; larger bodies abort the transfer.
    require_https : bool, default False
        Reject plain ``http://`` URLs when True.
    max_redirects : int, default 5
        Maximum number of redirects to follow.
    user_agent : str, optional
        User-Agent header. Falls back to ``PLUGDOC_USER_AGENT`` and then to
        the built-in default.

    """

    timeout: float = field(
        default=DEFAULT_FETCH_TIMEOUT,
        metadata={"help": "Request timeout in seconds", "type": float},
    )
    max_size_bytes: int = field(
        default=DEFAULT_MAX_FETCH_BYTES,
        metadata={"help": "Maximum response size in bytes", "type": int},
    )
    require_https: bool = field(
        default=False,
        metadata={"help": "Only allow https:// URLs"},
    )
    max_redirects: int = field(
        default=DEFAULT_MAX_REDIRECTS,
        metadata={"help": "Maximum number of redirects to follow", "type": int},
    )
    user_agent: str | None = field(
        default=None,
        metadata={"help": "User-Agent header for requests"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.max_size_bytes <= 0:
            raise ValueError(f"max_size_bytes must be positive, got {self.max_size_bytes}")
        if self.max_redirects < 0:
            raise ValueError(f"max_redirects must be non-negative, got {self.max_redirects}")


def _default_header_colors() -> Mapping[int, str]:
    return HEADER_COLORS


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Color palette used by the terminal Markdown renderer.

    Every color must be a ``#RRGGBB`` string. Header levels missing from
    ``header_colors`` use ``header_fallback``.
    """

    code_fence: str = COLOR_CODE_FENCE
    code_content: str = COLOR_CODE_CONTENT
    horizontal_rule: str = COLOR_HORIZONTAL_RULE
    bold: str = COLOR_BOLD
    list_item: str = COLOR_LIST_ITEM
    plain: str = COLOR_PLAIN
    header_colors: Mapping[int, str] = field(default_factory=_default_header_colors)
    header_fallback: str = COLOR_HEADER_FALLBACK

    def __post_init__(self) -> None:
        """Validate palette colors and freeze the header mapping.

        Raises
        ------
        ValueError
            If any color is not in ``#RRGGBB`` form.

        """
        colors = {
            "code_fence": self.code_fence,
            "code_content": self.code_content,
            "horizontal_rule": self.horizontal_rule,
            "bold": self.bold,
            "list_item": self.list_item,
            "plain": self.plain,
            "header_fallback": self.header_fallback,
        }
        colors.update({f"header_colors[{level}]": color for level, color in self.header_colors.items()})
        for name, color in colors.items():
            if not isinstance(color, str) or not _HEX_COLOR_PATTERN.fullmatch(color):
                raise ValueError(f"{name} must be a #RRGGBB color, got {color!r}")

        object.__setattr__(self, "header_colors", MappingProxyType(dict(self.header_colors)))

    def header_color(self, level: int) -> str:
        """Return the color for a header of the given level."""
        return self.header_colors.get(level, self.header_fallback)

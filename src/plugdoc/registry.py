#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Plugin discovery record for host interpreters.

A host loads plugdoc once and reads :data:`PLUGIN_ENTRIES` to learn which
functions exist, how many arguments each takes, and the type tag of every
parameter and of the return value. The record is built at import time and is
read-only afterwards, so it can be shared freely between threads.

Recognized type tags are ``"string"``, ``"integer"``, ``"double"`` and
``"boolean"``; an entry declares at most ten parameters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

from plugdoc import api
from plugdoc.constants import MAX_PLUGIN_PARAMS, VALID_TYPE_TAGS
from plugdoc.exceptions import ArityError, PluginEntryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PluginEntry:
    """One callable exposed to a host interpreter.

    Parameters
    ----------
    name : str
        Name the host uses to call the function
    func : Callable
        The boundary function from :mod:`plugdoc.api`
    param_types : tuple[str, ...]
        Type tag of each parameter, in order
    return_type : str
        Type tag of the return value

    Raises
    ------
    PluginEntryError
        If a type tag is unknown or more than ten parameters are declared

    """

    name: str
    func: Callable[..., Any]
    param_types: Tuple[str, ...]
    return_type: str

    def __post_init__(self) -> None:
        """Validate parameter count and type tags."""
        if len(self.param_types) > MAX_PLUGIN_PARAMS:
            raise PluginEntryError(
                f"{self.name} declares {len(self.param_types)} parameters; at most {MAX_PLUGIN_PARAMS} allowed",
                parameter_name="param_types",
                parameter_value=self.param_types,
            )
        for tag in (*self.param_types, self.return_type):
            if tag not in VALID_TYPE_TAGS:
                raise PluginEntryError(
                    f"{self.name} uses unknown type tag {tag!r}", parameter_name="type_tag", parameter_value=tag
                )

    @property
    def arity(self) -> int:
        """Number of parameters the function accepts."""
        return len(self.param_types)

    def to_dict(self) -> Dict[str, Any]:
        """Describe the entry without the callable, e.g. for listing."""
        return {
            "name": self.name,
            "arity": self.arity,
            "param_types": list(self.param_types),
            "return_type": self.return_type,
        }


PLUGIN_ENTRIES: Tuple[PluginEntry, ...] = (
    PluginEntry("HTMLtoMarkdown", api.html_to_markdown, ("string",), "string"),
    PluginEntry("URLtoMarkdown", api.url_to_markdown, ("string",), "string"),
    PluginEntry("CollapseNewlines", api.collapse_newlines, ("string",), "string"),
    PluginEntry("DecodeHTMLEntities", api.decode_html_entities, ("string",), "string"),
    PluginEntry("EncodeHTMLEntities", api.encode_html_entities, ("string",), "string"),
    PluginEntry("MarkdowntoHTML", api.markdown_to_html, ("string",), "string"),
    PluginEntry("PrintColor", api.print_color, ("string", "string"), "boolean"),
    PluginEntry("RGBtoHex", api.rgb_to_hex, ("integer", "integer", "integer"), "string"),
    PluginEntry("PrintColorMarkdown", api.print_color_markdown, ("string",), "boolean"),
)

_ENTRIES_BY_NAME: Dict[str, PluginEntry] = {entry.name.lower(): entry for entry in PLUGIN_ENTRIES}


def get_plugin_entries() -> Tuple[PluginEntry, ...]:
    """Return every plugin entry, in registration order."""
    return PLUGIN_ENTRIES


def get_plugin_entry(name: str) -> PluginEntry:
    """Look up an entry by name, ignoring case.

    Raises
    ------
    PluginEntryError
        If no entry has that name

    """
    try:
        return _ENTRIES_BY_NAME[name.lower()]
    except KeyError:
        available = ", ".join(entry.name for entry in PLUGIN_ENTRIES)
        raise PluginEntryError(
            f"Unknown plugin entry {name!r}. Available entries: {available}", parameter_name="name", parameter_value=name
        ) from None


def invoke(name: str, *args: Any) -> Any:
    """Call the named entry after checking the argument count.

    Raises
    ------
    PluginEntryError
        If no entry has that name
    ArityError
        If ``args`` does not match the entry's arity

    """
    entry = get_plugin_entry(name)
    if len(args) != entry.arity:
        raise ArityError(entry.name, entry.arity, len(args))
    logger.debug(f"Invoking {entry.name} with {len(args)} argument(s)")
    return entry.func(*args)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plugdoc/utils/entities.py
"""Character entity decoding and encoding.

Only a fixed table of named references is understood, together with decimal
numeric references. Anything else is left exactly as written, so decoding is
total and never raises.

"""

from __future__ import annotations

import re

from plugdoc.constants import ENCODE_ENTITIES, NAMED_ENTITIES, NUMERIC_ENTITY_OVERRIDES

_ENTITY_PATTERN = re.compile(r"&#([0-9]+);|&([a-zA-Z]+);")

_MAX_CODEPOINT = 0x10FFFF
_SURROGATE_RANGE = range(0xD800, 0xE000)


def _decode_numeric(digits: str, original: str) -> str:
    try:
        code = int(digits)
    except ValueError:
        # Beyond the interpreter's integer string conversion limit
        return original

    if code in NUMERIC_ENTITY_OVERRIDES:
        return NUMERIC_ENTITY_OVERRIDES[code]
    if code > _MAX_CODEPOINT or code in _SURROGATE_RANGE:
        return original
    return chr(code)


def _replace_entity(match: re.Match[str]) -> str:
    digits, name = match.group(1), match.group(2)
    if digits is not None:
        return _decode_numeric(digits, match.group(0))
    return NAMED_ENTITIES.get(name, match.group(0))


def decode_entities(text: str) -> str:
    """Decode numeric and named character references in ``text``.

    Numeric references (``&#8217;``) become the referenced character, except
    for typographic quotes, en dash and ellipsis, which fold to their plain
    ASCII counterparts (ellipsis stays ``…``). Named references are looked up
    in :data:`~plugdoc.constants.NAMED_ENTITIES`.

    Parameters
    ----------
    text : str
        Text possibly containing entity references

    Returns
    -------
    str
        Text with every recognized reference replaced. Unknown names,
        out-of-range codepoints and references missing the terminating
        ``;`` are kept verbatim.

    Examples
    --------
        >>> decode_entities("Tom &amp; Jerry&#39;s &hellip;")
        "Tom & Jerry's …"
        >>> decode_entities("&unknown; &amp")
        '&unknown; &amp'

    """
    if "&" not in text:
        return text
    return _ENTITY_PATTERN.sub(_replace_entity, text)


def encode_entities(text: str) -> str:
    """Escape ``& < > " '`` as character references.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text; every other character passes through unchanged

    Examples
    --------
        >>> encode_entities('<a href="x">')
        '&lt;a href=&quot;x&quot;&gt;'

    """
    return "".join(ENCODE_ENTITIES.get(char, char) for char in text)

"""Escaping of values interpolated into SPARQL text."""

from __future__ import annotations

import re

_STRING_SPECIALS = re.compile(r'[\\"]')
# IRIREF admits no escapes, so these can only be rejected.
_IRI_FORBIDDEN = re.compile(r'[<>"{}|^`\\\x00-\x20]')


def escape_string(value: str) -> str:
    """Return ``value`` as a long-quoted SPARQL string literal."""

    return '"""' + _STRING_SPECIALS.sub(lambda match: "\\" + match.group(0), value) + '"""'


def escape_uri(value: str) -> str:
    """Return ``value`` as an IRI reference; raise ``ValueError`` if it cannot be one."""

    match = _IRI_FORBIDDEN.search(value)
    if match is not None:
        raise ValueError(f"Character {match.group(0)!r} is not allowed in an IRI: {value!r}")
    return "<" + value + ">"

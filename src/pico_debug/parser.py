"""Parsing of enable specifications into include and exclude patterns.

A specification is a comma- or whitespace-separated list of patterns.  A
pattern prefixed with ``-`` excludes; every other pattern includes::

    >>> parse_spec("app, worker:* -worker:noisy")
    ParsedSpec(includes=('app', 'worker:*'), excludes=('worker:noisy',))
"""

import re
from typing import Any, NamedTuple, Tuple

_WHITESPACE = re.compile(r"\s+")


class ParsedSpec(NamedTuple):
    includes: Tuple[str, ...] = ()
    excludes: Tuple[str, ...] = ()


def parse_spec(spec: Any) -> ParsedSpec:
    """Split *spec* into ordered include and exclude patterns.

    Never raises: ``None``, non-string values and empty strings all yield an
    empty ``ParsedSpec`` (nothing enabled).
    """
    text = spec if isinstance(spec, str) else ""
    segments = [s for s in _WHITESPACE.sub(",", text.strip()).split(",") if s]

    includes = []
    excludes = []
    for segment in segments:
        if segment[0] == "-":
            excludes.append(segment[1:])
        else:
            includes.append(segment)
    return ParsedSpec(tuple(includes), tuple(excludes))


def serialize_spec(parsed: ParsedSpec) -> str:
    """Inverse of ``parse_spec``: includes first, then ``-``-prefixed excludes."""
    return ",".join(list(parsed.includes) + ["-" + name for name in parsed.excludes])

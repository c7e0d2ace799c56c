"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/uri.py

Validated absolute URI value type.

- `parse_uri`: accepts only absolute URIs (scheme + something after it)
- equality is structural (scheme, authority, path, query, fragment); the
  original text is kept verbatim for `str()`; no other normalization

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable
from urllib.parse import urlsplit

from .errors import InvalidUri

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_NAMESPACE_TERMINATORS = ("/", "#", ":")


@dataclass(frozen=True)
class Uri:
    scheme: str
    netloc: str
    path: str
    query: str
    fragment: str
    text: str = field(compare=False, repr=False)

    def __str__(self) -> str:
        return self.text


def parse_uri(value: str | Uri) -> Uri:
    if isinstance(value, Uri):
        return value
    if not isinstance(value, str):
        raise InvalidUri(f"URI must be a string, got {type(value).__name__}")
    if value == "":
        raise InvalidUri("URI must be a non-empty string")
    if any(ch.isspace() or ord(ch) < 32 for ch in value):
        raise InvalidUri(f"URI contains whitespace or control characters: {value!r}")
    try:
        parts = urlsplit(value)
        # Accessing .port validates the authority's port component.
        parts.port
    except ValueError as e:
        raise InvalidUri(f"Unparseable URI {value!r}: {e}") from e
    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        raise InvalidUri(f"URI must be absolute (scheme required): {value!r}")
    if not parts.netloc and not parts.path:
        raise InvalidUri(f"URI has nothing after its scheme: {value!r}")
    return Uri(
        scheme=parts.scheme,
        netloc=parts.netloc,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
        text=value,
    )


def parse_uris(values: Iterable[str | Uri] | None, ctx: str) -> frozenset[Uri]:
    if values is None:
        return frozenset()
    if isinstance(values, (str, Uri)):
        raise InvalidUri(f"{ctx} must be a collection of URIs, not a single value")
    return frozenset(parse_uri(v) for v in values)


def join_uri(namespace: str | Uri, local: str) -> Uri:
    ns = str(parse_uri(namespace))
    sep = "" if ns.endswith(_NAMESPACE_TERMINATORS) else "/"
    return parse_uri(f"{ns}{sep}{local}")

"""Percent Encoding — reversible escaping of path segments inside item-ids.

Invariants:
    - Safe set is RFC 3986 unreserved: A-Z a-z 0-9 - . _ ~
    - Every other byte of a segment's UTF-8 form becomes %XX (uppercase hex)
    - '/' inside a segment is encoded; '/' between segments never is
    - Decoding rejects '%' not followed by two hex digits, lone surrogates and non UTF-8 results
    - decode_segment(encode_segment(s)) == s for every str s

Design Decisions:
    - urllib.parse.quote with safe="" for encoding: it already emits uppercase hex
      per UTF-8 byte and never escapes unreserved characters
    - Own malformed-sequence check before unquote_to_bytes: urllib leaves bad
      sequences untouched instead of failing (ADR: no silent downgrade)
"""

import re
from collections.abc import Iterable
from urllib.parse import quote, unquote_to_bytes

from bagstore.core.domain_types import ITEM_ID_SEPARATOR
from bagstore.core.errors import InvalidEncodingError
from bagstore.core.result import Err, Ok, Result

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode_segment(segment: str) -> str:
    return quote(segment, safe="", encoding="utf-8", errors="strict")


def encode_path(segments: Iterable[str]) -> str:
    return ITEM_ID_SEPARATOR.join(encode_segment(s) for s in segments)


def decode_segment(segment: str) -> Result[str, InvalidEncodingError]:
    """Decode one segment. Raw non-ASCII characters pass through unchanged."""
    bad = _MALFORMED_ESCAPE.search(segment)
    if bad:
        return Err(InvalidEncodingError(
            segment, f"malformed escape sequence at position {bad.start()}",
        ))
    try:
        return Ok(unquote_to_bytes(segment).decode("utf-8"))
    except UnicodeError as e:
        return Err(InvalidEncodingError(segment, f"not valid UTF-8 ({e.reason})"))


def decode_path(text: str) -> Result[tuple[str, ...], InvalidEncodingError]:
    """Split on literal separators, drop empty segments, decode the rest."""
    segments: list[str] = []
    for raw in text.split(ITEM_ID_SEPARATOR):
        if not raw:
            continue
        decoded = decode_segment(raw)
        if decoded.is_err():
            return decoded
        segments.append(decoded.value)
    return Ok(tuple(segments))

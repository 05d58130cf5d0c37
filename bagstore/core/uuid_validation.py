"""UUID Validation — strict textual check before any UUID parsing happens.

Invariants:
    - Input must be exactly UUID_LENGTH characters, else WRONG_LENGTH
    - Input must be 8-4-4-4-12 hex groups joined by '-', else BAD_FORMAT
    - Hex digits are case-insensitive (lower, upper and mixed case all pass)
    - PURE: returns a Result, never raises

Design Decisions:
    - Own check over uuid.UUID(): the stdlib parser strips braces, 'urn:uuid:' prefixes
      and hyphens, so it accepts text that is not a canonical item-id (ADR: strict wire format)
"""

import re

from bagstore.core.domain_types import UUID_LENGTH, UuidErrorReason
from bagstore.core.errors import InvalidUuidError
from bagstore.core.result import Err, Ok, Result

_UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def validate_uuid(text: str) -> Result[None, InvalidUuidError]:
    """Check that text is a 36-character, hyphen-grouped hex UUID."""
    if len(text) != UUID_LENGTH:
        return Err(InvalidUuidError(text, UuidErrorReason.WRONG_LENGTH))
    if not _UUID_PATTERN.fullmatch(text):
        return Err(InvalidUuidError(text, UuidErrorReason.BAD_FORMAT))
    return Ok(None)

"""Domain Types — constants and enums shared by the identifier model.

Invariants:
    - UUID_LENGTH (36) is the single source of truth for textual UUID length
    - ITEM_ID_SEPARATOR ("/") separates the bag UUID from the file path, and path segments
    - All variant tags encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (ADR: error envelopes are JSON)
"""

from enum import Enum


UUID_LENGTH: int = 36
ITEM_ID_SEPARATOR: str = "/"


class ItemIdKind(str, Enum):
    """Variant tag of an item identifier."""
    BAG = "bag"
    FILE = "file"


class UuidErrorReason(str, Enum):
    """Why a UUID string was rejected."""
    WRONG_LENGTH = "wrong_length"
    BAD_FORMAT = "bad_format"

"""Item-id Parser & Printer — the textual wire format of item identifiers.

Invariants:
    - "<uuid>"          -> BagId
    - "<uuid>/<path>"   -> FileId, path percent-decoded per segment
    - "<uuid>/"         -> FileId with an empty path (NOT a BagId)
    - UUID case is accepted in any mix on input, always lowercase on output
    - from_string(to_string(x)) == x for every constructed item-id
    - PURE: returns a Result, never raises for bad input

Design Decisions:
    - Split on the FIRST separator only: everything after it belongs to the path
    - uuid.UUID() runs only after validate_uuid passed, so its leniency never shows
"""

from uuid import UUID

from bagstore.core.domain_types import ITEM_ID_SEPARATOR
from bagstore.core.errors import EmptyInputError, ErrorContext, ItemIdError
from bagstore.core.item_id import BagId, FileId, ItemId
from bagstore.core.percent_encoding import decode_path
from bagstore.core.result import Err, Ok, Result
from bagstore.core.uuid_validation import validate_uuid


def from_string(text: str) -> Result[ItemId, ItemIdError]:
    """Parse untrusted text into a BagId or FileId."""
    if not text:
        return Err(EmptyInputError(ErrorContext(item_text=text)))

    head, separator, rest = text.partition(ITEM_ID_SEPARATOR)
    validated = validate_uuid(head)
    if validated.is_err():
        return validated

    bag_id = BagId(UUID(head))
    if not separator:
        return Ok(bag_id)
    return decode_path(rest).map(lambda segments: FileId(bag_id, segments))


def to_string(item_id: ItemId) -> str:
    """Render the canonical textual form."""
    return str(item_id)

"""Item URIs — item-ids published as locations under the bag store's base URI.

Invariants:
    - to_uri(x, base) == normalized(base) + str(x)
    - from_uri(to_uri(x, base), base) == Ok(x)
    - A base URI always ends in '/' once normalized

Design Decisions:
    - Plain prefix match over urllib.parse.urljoin: urljoin would resolve '..'
      segments and drop the bag UUID on some inputs
"""

from bagstore.core.domain_types import ITEM_ID_SEPARATOR
from bagstore.core.errors import ErrorContext, ItemIdError, NotUnderBaseUriError
from bagstore.core.item_id import ItemId
from bagstore.core.item_id_parser import from_string
from bagstore.core.result import Err, Result


def normalize_base_uri(base_uri: str) -> str:
    return base_uri if base_uri.endswith(ITEM_ID_SEPARATOR) else base_uri + ITEM_ID_SEPARATOR


def to_uri(item_id: ItemId, base_uri: str) -> str:
    return f"{normalize_base_uri(base_uri)}{item_id}"


def from_uri(uri: str, base_uri: str) -> Result[ItemId, ItemIdError]:
    """Strip the base URI and parse what remains as an item-id."""
    base = normalize_base_uri(base_uri)
    if not uri.startswith(base):
        return Err(NotUnderBaseUriError(uri, base, ErrorContext(item_text=uri)))
    return from_string(uri[len(base):])

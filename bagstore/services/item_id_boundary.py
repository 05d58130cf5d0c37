"""Item-id Boundary — where untrusted text becomes a typed item-id, or a raised error.

Invariants:
    - Every rejection is logged at WARNING with item_id and error_code extras
    - Errors propagate unchanged as BagStoreError subclasses (never swallowed)
    - Core functions are called once; this layer adds no parsing rules of its own

Design Decisions:
    - Shell unwraps core Results and raises: collaborators (storage, HTTP) get
      ordinary exceptions, the core stays pure (ADR: impureim sandwich)
    - Settings injected optionally: tests pass their own, callers use get_settings()
"""

import logging

from bagstore.config import Settings, get_settings
from bagstore.core.errors import ItemIdError
from bagstore.core.item_id import BagId, FileId, ItemId
from bagstore.core.item_id_parser import from_string
from bagstore.core.item_uri import from_uri, to_uri
from bagstore.core.result import Result

logger = logging.getLogger(__name__)


def _unwrap(result: Result, text: str):
    if result.is_err():
        error: ItemIdError = result.error
        logger.warning(
            f"Rejected item-id: {error.message}",
            extra={"item_id": text, "error_code": error.code},
        )
    return result.unwrap()


def parse_item_id(text: str) -> ItemId:
    """Parse text into a BagId or FileId; raises ItemIdError on bad input."""
    item_id = _unwrap(from_string(text), text)
    logger.debug(
        f"Parsed item-id {item_id}",
        extra={"item_id": str(item_id), "kind": item_id.kind.value},
    )
    return item_id


def require_bag_id(text: str) -> BagId:
    """Parse text that must denote a whole bag."""
    return _unwrap(parse_item_id(text).to_bag_id(), text)


def require_file_id(text: str) -> FileId:
    """Parse text that must denote a path inside a bag."""
    return _unwrap(parse_item_id(text).to_file_id(), text)


def item_uri(item_id: ItemId, settings: Settings | None = None) -> str:
    settings = settings or get_settings()
    return to_uri(item_id, settings.base_uri)


def parse_item_uri(uri: str, settings: Settings | None = None) -> ItemId:
    """Resolve a published URI back to the item-id it names."""
    settings = settings or get_settings()
    return _unwrap(from_uri(uri, settings.base_uri), uri)

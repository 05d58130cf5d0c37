"""Error Hierarchy — typed, categorized errors for all bag store identifier failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Identifier errors are recoverable (400-level); none is fatal to the process
    - Core returns these as values inside Err; only the shell raises them
    - to_response() produces a JSON envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with BagStoreError base: callers catch one type (ADR: uniform error shape)
    - Still Exception subclasses: Result.unwrap() can raise them unchanged
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING

from bagstore.core.domain_types import UUID_LENGTH, UuidErrorReason

if TYPE_CHECKING:
    from bagstore.core.item_id import ItemId


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    ENCODING = "encoding"
    WRONG_VARIANT = "wrong_variant"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    item_text: str | None = None


class BagStoreError(Exception):
    """Base exception for all bag store errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "item_text": self.context.item_text,
                },
            }
        }


class ItemIdError(BagStoreError):
    """Any failure to parse, decode or narrow an item identifier."""


# ─── Parse Errors ───────────────────────────────────────────────

class EmptyInputError(ItemIdError):
    """Identifier text was empty."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An item-id cannot be empty",
            "EMPTY_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class InvalidUuidError(ItemIdError):
    """UUID part has the wrong length or is not grouped hex."""
    def __init__(
        self, text: str, reason: UuidErrorReason, context: ErrorContext | None = None,
    ):
        if reason is UuidErrorReason.WRONG_LENGTH:
            message = (
                f"A UUID should contain {UUID_LENGTH} characters, "
                f"but '{text}' contains {len(text)}"
            )
        else:
            message = f"UUID '{text}' is not formatted correctly"
        ctx = context or ErrorContext()
        ctx.item_text = ctx.item_text or text
        super().__init__(
            message, "INVALID_UUID", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.text = text
        self.reason = reason


class InvalidEncodingError(ItemIdError):
    """Path segment holds a malformed percent sequence or non UTF-8 bytes."""
    def __init__(self, segment: str, detail: str, context: ErrorContext | None = None):
        super().__init__(
            f"Path segment '{segment}' is not correctly percent-encoded: {detail}",
            "INVALID_ENCODING", ErrorCategory.ENCODING,
            ErrorSeverity.ERROR, context, 400,
        )
        self.segment = segment


class NotUnderBaseUriError(ItemIdError):
    """URI does not start with the bag store base URI."""
    def __init__(self, uri: str, base_uri: str, context: ErrorContext | None = None):
        super().__init__(
            f"URI '{uri}' is not located under base URI '{base_uri}'",
            "NOT_UNDER_BASE_URI", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.uri = uri
        self.base_uri = base_uri


# ─── Narrowing Errors ───────────────────────────────────────────

class NotABagIdError(ItemIdError):
    """A bag-id was required but a file-id was given."""
    def __init__(self, item_id: ItemId, context: ErrorContext | None = None):
        super().__init__(
            f"Item {item_id} is not a bag-id",
            "NOT_A_BAG_ID", ErrorCategory.WRONG_VARIANT,
            ErrorSeverity.ERROR, context, 400,
        )
        self.item_id = item_id


class NotAFileIdError(ItemIdError):
    """A file-id was required but a bag-id was given."""
    def __init__(self, item_id: ItemId, context: ErrorContext | None = None):
        super().__init__(
            f"Item {item_id} is not a file-id",
            "NOT_A_FILE_ID", ErrorCategory.WRONG_VARIANT,
            ErrorSeverity.ERROR, context, 400,
        )
        self.item_id = item_id

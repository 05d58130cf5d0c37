"""Item-id Schemas — Pydantic models carrying item-ids across API boundaries.

Invariants:
    - ItemIdRequest.item_id is canonical after validation (lowercase UUID, re-encoded path)
    - expected_kind, when given, is enforced by narrowing the parsed item-id
    - ItemIdResponse exposes the DECODED path; item_id holds the encoded form

Design Decisions:
    - field_validator delegating to core.from_string: one grammar, no regex in schemas
    - model_validator for the kind check: needs both fields (ADR: cross-field validation)
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from bagstore.core.domain_types import ItemIdKind
from bagstore.core.item_id import ItemId
from bagstore.core.item_id_parser import from_string


class ItemIdRequest(BaseModel):
    """Incoming item-id reference, optionally restricted to one variant."""
    item_id: str = Field(min_length=1)
    expected_kind: ItemIdKind | None = None

    @field_validator("item_id")
    @classmethod
    def canonicalize_item_id(cls, v: str) -> str:
        result = from_string(v)
        if result.is_err():
            raise ValueError(result.error.message)
        return str(result.value)

    @model_validator(mode="after")
    def check_expected_kind(self) -> "ItemIdRequest":
        if self.expected_kind is None:
            return self
        item_id = self.to_item_id()
        narrowed = (
            item_id.to_bag_id() if self.expected_kind is ItemIdKind.BAG
            else item_id.to_file_id()
        )
        if narrowed.is_err():
            raise ValueError(narrowed.error.message)
        return self

    def to_item_id(self) -> ItemId:
        return from_string(self.item_id).unwrap()


class ItemIdResponse(BaseModel):
    """Public description of an item-id."""
    item_id: str
    kind: ItemIdKind
    uuid: UUID
    path: str | None = None
    is_directory: bool = False

    @classmethod
    def from_item_id(cls, item_id: ItemId) -> "ItemIdResponse":
        file_id = item_id.to_file_id()
        if file_id.is_err():
            return cls(item_id=str(item_id), kind=item_id.kind, uuid=item_id.uuid)
        return cls(
            item_id=str(item_id),
            kind=item_id.kind,
            uuid=item_id.uuid,
            path=file_id.value.path,
            is_directory=file_id.value.is_directory,
        )

"""Item Identifiers — the closed set of ways to point at something in a bag store.

Invariants:
    - ItemId is exactly one of BagId (a whole bag) or FileId (a path inside a bag)
    - Immutable value objects; equality is structural on (uuid) or (uuid, segments)
    - FileId.segments are DECODED; percent-encoding happens only in __str__
    - A FileId with no segments is the bag root, never the same thing as a BagId
    - FileId.is_directory is a storage hint: not rendered, not part of equality
    - Narrowing returns a Result carrying the original item on failure

Design Decisions:
    - kind tag + per-variant narrowing methods over isinstance() chains (ADR: tagged variant)
    - segments as tuple[str, ...] over PurePosixPath: a decoded '%2F' must survive
      as part of one segment
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import ClassVar, Union
from uuid import UUID

from bagstore.core.domain_types import ITEM_ID_SEPARATOR, ItemIdKind
from bagstore.core.errors import NotABagIdError, NotAFileIdError
from bagstore.core.percent_encoding import encode_path
from bagstore.core.result import Err, Ok, Result

_REDUNDANT_SEGMENTS = ("", ".")


@dataclass(frozen=True)
class BagId:
    """Identifies a bag as a whole."""

    kind: ClassVar[ItemIdKind] = ItemIdKind.BAG

    uuid: UUID

    def __post_init__(self):
        if not isinstance(self.uuid, UUID):
            raise TypeError(f"BagId requires a UUID, got {type(self.uuid).__name__}")

    @property
    def bag_id(self) -> BagId:
        return self

    def file(self, path: str | PurePosixPath | Sequence[str] = "", is_directory: bool = False) -> FileId:
        return FileId.of(self, path, is_directory)

    def to_bag_id(self) -> Result[BagId, NotABagIdError]:
        return Ok(self)

    def to_file_id(self) -> Result[FileId, NotAFileIdError]:
        return Err(NotAFileIdError(self))

    def __str__(self) -> str:
        return str(self.uuid)


@dataclass(frozen=True)
class FileId:
    """Identifies a file (or directory) by a relative path inside a bag."""

    kind: ClassVar[ItemIdKind] = ItemIdKind.FILE

    bag_id: BagId
    segments: tuple[str, ...] = ()
    is_directory: bool = field(default=False, compare=False)

    def __post_init__(self):
        segments = tuple(self.segments)
        for segment in segments:
            if not isinstance(segment, str) or not segment:
                raise ValueError(f"Path segments must be non-empty strings, got {segment!r}")
            try:
                segment.encode("utf-8")
            except UnicodeEncodeError as e:
                raise ValueError(f"Path segment {segment!r} is not valid Unicode text") from e
        object.__setattr__(self, "segments", segments)

    @classmethod
    def of(
        cls,
        bag: UUID | BagId,
        path: str | PurePosixPath | Sequence[str] = "",
        is_directory: bool = False,
    ) -> FileId:
        """Build from a UUID or BagId plus a relative path.

        A str path is split on '/', a PurePosixPath contributes its parts, and any
        other sequence is taken as already-split segments. Empty and '.' segments
        are dropped, as PurePosixPath does.
        """
        bag_id = bag if isinstance(bag, BagId) else BagId(bag)
        if isinstance(path, str):
            if path.startswith(ITEM_ID_SEPARATOR):
                raise ValueError(f"Path must be relative, got '{path}'")
            parts = path.split(ITEM_ID_SEPARATOR)
        elif isinstance(path, PurePosixPath):
            if path.is_absolute():
                raise ValueError(f"Path must be relative, got '{path}'")
            parts = path.parts
        else:
            parts = path
        segments = tuple(s for s in parts if s not in _REDUNDANT_SEGMENTS)
        return cls(bag_id, segments, is_directory)

    @property
    def uuid(self) -> UUID:
        return self.bag_id.uuid

    @property
    def path(self) -> str:
        """Decoded path, segments joined by '/'."""
        return ITEM_ID_SEPARATOR.join(self.segments)

    @property
    def is_bag_root(self) -> bool:
        return not self.segments

    def to_bag_id(self) -> Result[BagId, NotABagIdError]:
        return Err(NotABagIdError(self))

    def to_file_id(self) -> Result[FileId, NotAFileIdError]:
        return Ok(self)

    def __str__(self) -> str:
        return f"{self.bag_id}{ITEM_ID_SEPARATOR}{encode_path(self.segments)}"


ItemId = Union[BagId, FileId]


def to_bag_id(item_id: ItemId) -> Result[BagId, NotABagIdError]:
    return item_id.to_bag_id()


def to_file_id(item_id: ItemId) -> Result[FileId, NotAFileIdError]:
    return item_id.to_file_id()

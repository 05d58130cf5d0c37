"""Item Identifiers — tests for the BagId / FileId value objects and narrowing.

Tests cover:
    - to_file_id fails on a BagId (carrying it) and is identity on a FileId
    - to_bag_id fails on a FileId (carrying it) and is identity on a BagId
    - Variant tags, uuid/bag_id accessors
    - FileId.of accepts str, PurePosixPath and segment sequences alike; rejects absolute paths
    - Segments that cannot be encoded as UTF-8 are rejected at construction
    - Structural equality; is_directory excluded from equality
"""

from pathlib import PurePosixPath
from uuid import uuid4

import pytest

from bagstore.core.domain_types import ItemIdKind
from bagstore.core.errors import NotABagIdError, NotAFileIdError
from bagstore.core.item_id import BagId, FileId, to_bag_id, to_file_id
from bagstore.core.result import Err, Ok

BAG_UUID = uuid4()


# ─── Narrowing ───────────────────────────────────────────────────

def test_to_file_id_fails_when_passed_a_bag_id():
    bag_id = BagId(BAG_UUID)
    match bag_id.to_file_id():
        case Err(NotAFileIdError() as error):
            assert error.item_id == bag_id
            assert error.code == "NOT_A_FILE_ID"
        case other:
            raise AssertionError(f"unexpected {other}")


def test_to_file_id_succeeds_when_passed_a_file_id():
    file_id = FileId.of(BAG_UUID, "some/path")
    assert file_id.to_file_id() == Ok(file_id)


def test_to_bag_id_fails_when_passed_a_file_id():
    file_id = FileId.of(BAG_UUID, "some/path")
    result = file_id.to_bag_id()
    assert result.is_err()
    assert isinstance(result.error, NotABagIdError)
    assert result.error.item_id == file_id
    assert str(file_id) in result.error.message


def test_to_bag_id_succeeds_when_passed_a_bag_id():
    bag_id = BagId(BAG_UUID)
    assert bag_id.to_bag_id() == Ok(bag_id)


def test_module_level_narrowing_delegates_to_variant():
    bag_id = BagId(BAG_UUID)
    file_id = bag_id.file("x")
    assert to_bag_id(bag_id) == Ok(bag_id)
    assert to_file_id(file_id) == Ok(file_id)
    assert to_bag_id(file_id).is_err()
    assert to_file_id(bag_id).is_err()


def test_unwrap_raises_narrowing_error():
    with pytest.raises(NotAFileIdError):
        BagId(BAG_UUID).to_file_id().unwrap()


# ─── Model ───────────────────────────────────────────────────────

def test_variants_are_tagged():
    assert BagId(BAG_UUID).kind is ItemIdKind.BAG
    assert FileId.of(BAG_UUID).kind is ItemIdKind.FILE


def test_uuid_and_bag_id_accessors():
    bag_id = BagId(BAG_UUID)
    file_id = FileId.of(bag_id, "a/b")
    assert bag_id.bag_id is bag_id
    assert file_id.bag_id == bag_id
    assert file_id.uuid == BAG_UUID


def test_bag_id_rejects_non_uuid():
    with pytest.raises(TypeError):
        BagId(str(BAG_UUID))


def test_file_id_of_accepts_path_forms():
    expected = FileId(BagId(BAG_UUID), ("path", "to", "file"))
    assert FileId.of(BAG_UUID, "path/to/file") == expected
    assert FileId.of(BAG_UUID, PurePosixPath("path/to/file")) == expected
    assert FileId.of(BAG_UUID, ["path", "to", "file"]) == expected


def test_file_id_of_empty_path_is_bag_root():
    for path in ("", PurePosixPath(""), []):
        file_id = FileId.of(BAG_UUID, path)
        assert file_id.segments == ()
        assert file_id.is_bag_root


def test_file_id_of_rejects_absolute_path():
    with pytest.raises(ValueError):
        FileId.of(BAG_UUID, "/etc/passwd")
    with pytest.raises(ValueError):
        FileId.of(BAG_UUID, PurePosixPath("/etc/passwd"))


def test_file_id_rejects_empty_segment():
    with pytest.raises(ValueError):
        FileId(BagId(BAG_UUID), ("a", "", "b"))


def test_segments_are_stored_decoded():
    file_id = FileId.of(BAG_UUID, "some dir/file%20name")
    assert file_id.segments == ("some dir", "file%20name")
    assert file_id.path == "some dir/file%20name"


def test_equality_is_structural():
    assert BagId(BAG_UUID) == BagId(BAG_UUID)
    assert FileId.of(BAG_UUID, "a") == FileId.of(BAG_UUID, "a")
    assert FileId.of(BAG_UUID, "a") != FileId.of(BAG_UUID, "b")
    assert FileId.of(BAG_UUID, "a") != FileId.of(uuid4(), "a")
    assert len({BagId(BAG_UUID), BagId(BAG_UUID)}) == 1


def test_is_directory_is_not_part_of_identity():
    as_dir = FileId.of(BAG_UUID, "data", is_directory=True)
    as_file = FileId.of(BAG_UUID, "data")
    assert as_dir == as_file
    assert hash(as_dir) == hash(as_file)
    assert str(as_dir) == str(as_file)


def test_item_ids_are_immutable():
    file_id = FileId.of(BAG_UUID, "a")
    with pytest.raises(AttributeError):
        file_id.segments = ("b",)


def test_file_id_rejects_segment_that_is_not_unicode_text():
    with pytest.raises(ValueError):
        FileId.of(BAG_UUID, "bad\udcff")
    with pytest.raises(ValueError):
        FileId(BagId(BAG_UUID), ("ok", "bad\udcff"))


def test_file_id_of_drops_current_directory_segments_in_every_form():
    expected = FileId(BagId(BAG_UUID), ("a", "b"))
    assert FileId.of(BAG_UUID, "a/./b") == expected
    assert FileId.of(BAG_UUID, PurePosixPath("a/./b")) == expected
    assert FileId.of(BAG_UUID, ["a", ".", "b"]) == expected
    assert FileId.of(BAG_UUID, "./") == FileId.of(BAG_UUID)

"""Tests for the File handle."""

import pytest

from assetio.database.memory import InMemoryAssetDatabase
from assetio.errors import (
    AssetExistsError,
    AssetNotFoundError,
    DirectoryNotFoundError,
    InvalidOperationError,
    InvalidPathError,
)
from assetio.handles import Directory, File
from assetio.types import AssetRecord, BinaryAsset, TextAsset


@pytest.fixture
def db() -> InMemoryAssetDatabase:
    database = InMemoryAssetDatabase()
    database.create_folder("Assets", "Art")
    database.add_asset(
        "Assets/Art/Bear.png",
        BinaryAsset(path="Assets/Art/Bear.png", name="Bear", data=b"\x89PNG"),
    )
    database.add_asset(
        "Assets/Art/Wolf.png",
        BinaryAsset(path="Assets/Art/Wolf.png", name="Wolf", data=b"\x89PNG"),
    )
    return database


@pytest.fixture
def bear(db: InMemoryAssetDatabase) -> File:
    return File("Assets/Art/Bear.png", db)


class TestFileProperties:
    """Tests for path-derived properties."""

    def test_names(self, bear):
        assert bear.path == "Assets/Art/Bear.png"
        assert bear.file_name == "Bear.png"
        assert bear.name == "Bear"
        assert bear.extension == ".png"

    def test_directory_is_parent(self, db, bear):
        assert bear.directory == Directory("Assets/Art", db)

    def test_exists(self, db, bear):
        assert bear.exists() is True
        assert File("Assets/Art/Fox.png", db).exists() is False

    def test_info(self, bear):
        assert bear.info() == AssetRecord(
            path="Assets/Art/Bear.png",
            name="Bear",
            extension=".png",
            asset_type="BinaryAsset",
        )

    def test_info_missing_raises(self, db):
        with pytest.raises(AssetNotFoundError):
            File("Assets/Art/Fox.png", db).info()

    def test_constructor_validates_path(self, db):
        with pytest.raises(InvalidPathError):
            File("", db)

    def test_repr(self, bear):
        assert repr(bear) == "File('Assets/Art/Bear.png')"


class TestFileOperations:
    """Tests for delete, rename, duplicate and move."""

    def test_delete(self, db, bear):
        bear.delete()
        assert not db.asset_exists("Assets/Art/Bear.png")
        assert db.asset_exists("Assets/Art/Wolf.png")

    def test_rename_keeps_extension(self, db, bear):
        renamed = bear.rename("Grizzly")

        assert renamed.path == "Assets/Art/Grizzly.png"
        assert renamed.exists()
        assert not bear.exists()

    def test_rename_onto_existing_file_raises(self, bear):
        with pytest.raises(AssetExistsError):
            bear.rename("Wolf")

    def test_rename_invalid_name_raises(self, bear):
        with pytest.raises(InvalidPathError):
            bear.rename("Bad|Name")

    def test_duplicate_generates_unique_name(self, db, bear):
        first = bear.duplicate()
        second = bear.duplicate()

        assert first.path == "Assets/Art/Bear 1.png"
        assert second.path == "Assets/Art/Bear 2.png"
        assert bear.exists()

    def test_duplicate_copies_contents(self, bear):
        copy = bear.duplicate()
        original = bear.load_asset()
        duplicated = copy.load_asset()

        assert duplicated == original
        assert duplicated is not original

    def test_duplicate_with_name(self, bear):
        assert bear.duplicate("Cub").path == "Assets/Art/Cub.png"

    def test_duplicate_invalid_name(self, bear):
        with pytest.raises(InvalidPathError):
            bear.duplicate("a/b")

    def test_move(self, db, bear):
        moved = bear.move("Assets/Bear.png")
        assert moved.path == "Assets/Bear.png"
        assert db.asset_exists("Assets/Bear.png")
        assert not bear.exists()

    def test_move_to_missing_folder_raises(self, bear):
        with pytest.raises(DirectoryNotFoundError):
            bear.move("Assets/Nowhere/Bear.png")

    def test_move_outside_assets_raises(self, bear):
        with pytest.raises(InvalidOperationError):
            bear.move("Elsewhere/Bear.png")


class TestLoadAsset:
    """Tests for load_asset."""

    def test_load_asset(self, bear):
        asset = bear.load_asset()
        assert isinstance(asset, BinaryAsset)
        assert asset.data == b"\x89PNG"

    def test_load_asset_with_matching_type(self, bear):
        assert isinstance(bear.load_asset(BinaryAsset), BinaryAsset)

    def test_load_asset_with_other_type_returns_none(self, bear):
        assert bear.load_asset(TextAsset) is None

    def test_load_missing_asset_returns_none(self, db):
        assert File("Assets/Art/Fox.png", db).load_asset() is None

    def test_require_asset(self, bear):
        assert bear.require_asset(BinaryAsset).name == "Bear"
        with pytest.raises(AssetNotFoundError, match="as TextAsset"):
            bear.require_asset(TextAsset)

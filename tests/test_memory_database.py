"""Tests for InMemoryAssetDatabase and the shared query parser."""

import pytest

from assetio.database import AssetQuery, InMemoryAssetDatabase
from assetio.errors import (
    AssetExistsError,
    AssetNotFoundError,
    DirectoryNotFoundError,
    InvalidOperationError,
    InvalidPathError,
)
from assetio.types import TextAsset


@pytest.fixture
def db() -> InMemoryAssetDatabase:
    database = InMemoryAssetDatabase()
    database.create_folder("Assets", "Art")
    database.create_folder("Assets", "Artwork")
    database.create_folder("Assets/Art", "Sub")
    database.add_asset("Assets/Art/Bear.png", b"png")
    database.add_asset("Assets/Art/Notes.txt", TextAsset(path="Assets/Art/Notes.txt", name="Notes", text="hi"))
    database.add_asset("Assets/Art/Sub/Bear Notes.txt", TextAsset(path="x", name="Bear Notes", text=""))
    database.add_asset("Assets/Artwork/Cover.png", b"png")
    return database


class TestAssetQuery:
    """Tests for AssetQuery parsing and matching."""

    def test_parse(self):
        query = AssetQuery.parse("t:TextAsset Bear")
        assert query.type_names == ("textasset",)
        assert query.name_terms == ("bear",)

    def test_parse_empty(self):
        assert AssetQuery.parse("") == AssetQuery()
        assert AssetQuery.parse(None) == AssetQuery()

    def test_bare_type_prefix_is_ignored(self):
        assert AssetQuery.parse("t:") == AssetQuery()

    def test_matches(self):
        query = AssetQuery.parse("t:TextAsset notes")
        assert query.matches("Assets/Notes.txt", ["TextAsset", "Asset"])
        assert not query.matches("Assets/Notes.txt", ["BinaryAsset"])
        assert not query.matches("Assets/Readme.txt", ["TextAsset"])


class TestQueries:
    """Tests for read-only database operations."""

    def test_root_always_exists(self):
        assert InMemoryAssetDatabase().folder_exists("Assets")

    def test_default_data_path(self):
        assert InMemoryAssetDatabase().data_path == "/project/Assets"
        assert InMemoryAssetDatabase("/games/demo/Assets").data_path == "/games/demo/Assets"

    def test_find_all_assets(self, db):
        assert db.find_assets("") == [
            "Assets/Art/Bear.png",
            "Assets/Art/Notes.txt",
            "Assets/Art/Sub/Bear Notes.txt",
            "Assets/Artwork/Cover.png",
        ]

    def test_find_by_name_is_case_insensitive(self, db):
        assert db.find_assets("BEAR") == ["Assets/Art/Bear.png", "Assets/Art/Sub/Bear Notes.txt"]

    def test_find_by_type(self, db):
        assert db.find_assets("t:TextAsset") == [
            "Assets/Art/Notes.txt",
            "Assets/Art/Sub/Bear Notes.txt",
        ]
        assert db.find_assets("t:bytes") == ["Assets/Art/Bear.png", "Assets/Artwork/Cover.png"]

    def test_find_by_type_and_name(self, db):
        assert db.find_assets("t:TextAsset bear") == ["Assets/Art/Sub/Bear Notes.txt"]

    def test_search_paths_restrict_results(self, db):
        """A folder does not match siblings that share its name as a prefix."""
        assert db.find_assets("", ["Assets/Art/Sub"]) == ["Assets/Art/Sub/Bear Notes.txt"]
        assert "Assets/Artwork/Cover.png" not in db.find_assets("", ["Assets/Art"])

    def test_find_never_returns_folders(self, db):
        assert "Assets/Art/Sub" not in db.find_assets("sub")

    def test_get_sub_folders_is_direct_only(self, db):
        assert db.get_sub_folders("Assets") == ["Assets/Art", "Assets/Artwork"]
        assert db.get_sub_folders("Assets/Art") == ["Assets/Art/Sub"]
        assert db.get_sub_folders("Assets/Art/Sub") == []

    def test_asset_type_name(self, db):
        assert db.asset_type_name("Assets/Art/Notes.txt") == "TextAsset"
        assert db.asset_type_name("Assets/Art/Bear.png") == "bytes"
        assert db.asset_type_name("Assets/Art") is None

    def test_load_asset(self, db):
        assert db.load_asset("Assets/Art/Bear.png") == b"png"
        assert db.load_asset("Assets/Art/Bear.png", bytes) == b"png"
        assert db.load_asset("Assets/Art/Bear.png", TextAsset) is None
        assert db.load_asset("Assets/Missing.png") is None


class TestMutations:
    """Tests for folder creation, deletion, copy and move."""

    def test_create_folder_returns_path(self):
        db = InMemoryAssetDatabase()
        assert db.create_folder("Assets", "Audio") == "Assets/Audio"
        assert db.folder_exists("Assets/Audio")

    def test_create_existing_folder_uses_unique_name(self, db):
        assert db.create_folder("Assets", "Art") == "Assets/Art 1"

    def test_create_folder_missing_parent(self, db):
        with pytest.raises(DirectoryNotFoundError):
            db.create_folder("Assets/Nope", "Child")

    def test_create_folder_invalid_name(self, db):
        with pytest.raises(InvalidPathError):
            db.create_folder("Assets", "a<b")

    @pytest.mark.parametrize("name", [".cache", "Art~"])
    def test_create_hidden_folder_raises(self, db, name):
        with pytest.raises(InvalidPathError):
            db.create_folder("Assets", name)
        assert not db.folder_exists(f"Assets/{name}")

    def test_add_asset_requires_parent(self, db):
        with pytest.raises(DirectoryNotFoundError):
            db.add_asset("Assets/Nope/Bear.png", b"")

    def test_add_asset_outside_root(self, db):
        with pytest.raises(InvalidOperationError):
            db.add_asset("Bear.png", b"")

    def test_delete_folder_keeps_prefix_siblings(self, db):
        db.delete_file_or_directory("Assets/Art")

        assert not db.folder_exists("Assets/Art")
        assert not db.folder_exists("Assets/Art/Sub")
        assert db.folder_exists("Assets/Artwork")
        assert db.find_assets("") == ["Assets/Artwork/Cover.png"]

    def test_delete_asset(self, db):
        db.delete_file_or_directory("Assets/Art/Bear.png")
        assert not db.asset_exists("Assets/Art/Bear.png")

    def test_delete_missing_is_noop(self, db):
        db.delete_file_or_directory("Assets/Missing")
        assert len(db.find_assets("")) == 4

    def test_copy_folder(self, db):
        db.copy_asset("Assets/Art", "Assets/Artwork/Art")
        assert db.folder_exists("Assets/Artwork/Art/Sub")
        assert db.asset_exists("Assets/Artwork/Art/Sub/Bear Notes.txt")
        assert db.asset_exists("Assets/Art/Bear.png")

    def test_move_folder(self, db):
        db.move_asset("Assets/Art", "Assets/Artwork/Art")
        assert db.folder_exists("Assets/Artwork/Art/Sub")
        assert db.asset_exists("Assets/Artwork/Art/Notes.txt")
        assert not db.folder_exists("Assets/Art")
        assert not db.asset_exists("Assets/Art/Notes.txt")

    def test_copy_missing_source(self, db):
        with pytest.raises(AssetNotFoundError):
            db.copy_asset("Assets/Missing", "Assets/Copy")

    def test_copy_onto_existing(self, db):
        with pytest.raises(AssetExistsError):
            db.copy_asset("Assets/Art", "Assets/Artwork")

    def test_generate_unique_asset_path(self, db):
        assert db.generate_unique_asset_path("Assets/Art/Wolf.png") == "Assets/Art/Wolf.png"
        assert db.generate_unique_asset_path("Assets/Art/Bear.png") == "Assets/Art/Bear 1.png"
        db.add_asset("Assets/Art/Bear 1.png", b"")
        assert db.generate_unique_asset_path("Assets/Art/Bear.png") == "Assets/Art/Bear 2.png"

    def test_rename_asset(self, db):
        assert db.rename_asset("Assets/Art/Bear.png", "Grizzly") == "Assets/Art/Grizzly.png"
        assert db.rename_asset("Assets/Art/Sub", "Deep") == "Assets/Art/Deep"

    def test_rename_missing_raises(self, db):
        with pytest.raises(AssetNotFoundError):
            db.rename_asset("Assets/Missing", "Found")

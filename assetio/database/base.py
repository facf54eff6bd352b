"""
Abstract Asset Database Interface

Defines the contract handles delegate to. The database owns every real
operation (scanning, folder creation, deletion, loading); handles only add
path validation and chaining on top.

All paths passed in and returned are asset paths ("Assets/...").

Query language used by find_assets:
    ""                   every asset under the search paths
    "bear"               assets whose file name contains "bear"
    "t:TextAsset"        assets loaded as TextAsset (or a subclass)
    "t:TextAsset notes"  both conditions

Terms are whitespace separated and case-insensitive. Folders are never
returned.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from assetio.errors import AssetNotFoundError, InvalidOperationError, InvalidPathError
from assetio.paths import (
    ROOT_FOLDER_NAME,
    is_ignored_name,
    is_valid_file_name,
    join,
    split,
    split_extension,
)
from assetio.types import AssetRecord

TYPE_PREFIX = "t:"


@dataclass(frozen=True)
class AssetQuery:
    """Parsed find_assets query."""

    type_names: tuple[str, ...] = ()
    name_terms: tuple[str, ...] = ()

    @classmethod
    def parse(cls, query: str | None) -> "AssetQuery":
        type_names: list[str] = []
        name_terms: list[str] = []
        for term in (query or "").split():
            term = term.lower()
            if term.startswith(TYPE_PREFIX):
                if type_name := term[len(TYPE_PREFIX):]:
                    type_names.append(type_name)
            else:
                name_terms.append(term)
        return cls(tuple(type_names), tuple(name_terms))

    def matches(self, path: str, type_names: Iterable[str]) -> bool:
        """
        Check one asset against the query.

        Args:
            path: Asset path of the candidate
            type_names: Names of the asset's type and its base classes
        """
        file_name = split(path)[1].lower()
        if any(term not in file_name for term in self.name_terms):
            return False
        if self.type_names:
            known = {name.lower() for name in type_names}
            if not any(name in known for name in self.type_names):
                return False
        return True


def type_names_of(cls: type) -> list[str]:
    """Names of a class and its bases, used for "t:" matching."""
    return [base.__name__ for base in cls.__mro__ if base is not object]


def is_under(path: str, folder: str) -> bool:
    """True if path lies strictly beneath folder."""
    return path.startswith(folder + "/")


class AssetDatabase(ABC):
    """
    Abstract interface for asset databases.

    Implementations:
        InMemoryAssetDatabase: dict-backed fake for tests and scripting
        LocalAssetDatabase: folders and files under <project>/Assets

    Contract notes:
        - Nothing is cached by callers; every handle operation queries again.
        - delete_file_or_directory on a missing path is a no-op.
        - copy_asset/move_asset work on both files and folders.
    """

    @property
    @abstractmethod
    def data_path(self) -> str:
        """System path of the Assets folder (ends with "/Assets")."""
        ...

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @abstractmethod
    def folder_exists(self, path: str) -> bool:
        """Return True if a folder exists at the asset path."""
        ...

    @abstractmethod
    def asset_exists(self, path: str) -> bool:
        """Return True if an asset (not a folder) exists at the asset path."""
        ...

    @abstractmethod
    def find_assets(self, query: str, search_paths: Sequence[str] | None = None) -> list[str]:
        """Search recursively under search_paths (default: the root) and return sorted asset paths."""
        ...

    @abstractmethod
    def get_sub_folders(self, path: str) -> list[str]:
        """Return the direct child folders of path, sorted."""
        ...

    @abstractmethod
    def asset_type_name(self, path: str) -> str | None:
        """Return the name of the type path loads as, or None if it is not an asset."""
        ...

    @abstractmethod
    def load_asset(self, path: str, asset_type: type | None = None) -> Any | None:
        """
        Load the asset at path.

        Returns None if nothing is stored there, or if asset_type is given and
        the loaded object is not an instance of it.
        """
        ...

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    @abstractmethod
    def create_folder(self, parent_path: str, name: str) -> str:
        """
        Create a folder named name inside parent_path.

        If the name is taken a unique variant ("name 1") is used instead.
        Returns the asset path of the new folder.
        """
        ...

    @abstractmethod
    def delete_file_or_directory(self, path: str) -> None:
        """Delete a file, or a folder and everything beneath it."""
        ...

    @abstractmethod
    def copy_asset(self, source: str, destination: str) -> None:
        """Copy a file or folder. The destination must not exist."""
        ...

    @abstractmethod
    def move_asset(self, source: str, destination: str) -> None:
        """Move a file or folder. The destination must not exist."""
        ...

    # -------------------------------------------------------------------------
    # Helpers built on the primitives above
    # -------------------------------------------------------------------------

    def _check_folder_name(self, name: str) -> None:
        """Reject names create_folder must not use, including hidden ones no query would see."""
        if not is_valid_file_name(name) or is_ignored_name(name):
            raise InvalidPathError(f"'{name}' is not a valid folder name")

    def is_valid_folder(self, path: str) -> bool:
        """Alias of folder_exists."""
        return self.folder_exists(path)

    def exists(self, path: str) -> bool:
        """True if a folder or an asset exists at path."""
        return self.folder_exists(path) or self.asset_exists(path)

    def generate_unique_asset_path(self, path: str) -> str:
        """
        Return path if it is free, otherwise the first free "name N" sibling.

        Example:
            "Assets/Bear.png" -> "Assets/Bear 1.png" -> "Assets/Bear 2.png"
        """
        if not self.exists(path):
            return path

        parent, file_name = split(path)
        stem, extension = split_extension(file_name)
        if self.folder_exists(path):
            stem, extension = file_name, ""

        counter = 1
        while True:
            candidate = join(parent, f"{stem} {counter}{extension}")
            if not self.exists(candidate):
                return candidate
            counter += 1

    def rename_asset(self, path: str, new_name: str) -> str:
        """
        Rename a file or folder in place.

        Files keep their extension: new_name is the name without it.

        Returns:
            The new asset path.

        Raises:
            InvalidPathError: If new_name contains characters the database rejects
            InvalidOperationError: If path is the asset root
            AssetNotFoundError: If nothing exists at path
        """
        if not is_valid_file_name(new_name):
            raise InvalidPathError(f"'{new_name}' is not a valid file name")
        if path == ROOT_FOLDER_NAME:
            raise InvalidOperationError(f"The root folder '{ROOT_FOLDER_NAME}' can not be renamed")

        parent, file_name = split(path)
        if self.asset_exists(path):
            destination = join(parent, new_name + split_extension(file_name)[1])
        elif self.folder_exists(path):
            destination = join(parent, new_name)
        else:
            raise AssetNotFoundError(f"Nothing to rename at {path}")

        if destination != path:
            self.move_asset(path, destination)
        return destination

    def get_asset_record(self, path: str) -> AssetRecord:
        """Describe the asset at path."""
        type_name = self.asset_type_name(path)
        if type_name is None:
            raise AssetNotFoundError(f"No asset found at {path}")
        stem, extension = split_extension(split(path)[1])
        return AssetRecord(path=path, name=stem, extension=extension, asset_type=type_name)

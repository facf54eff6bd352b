"""
Directory Handle

A Directory is a value: an asset path plus the database it lives in.
Containment is never materialised; every query goes back to the database.

Example:
    >>> textures = io.root.create_directory("Art/Textures")
    >>> io.root["Art"]["Textures"] == textures
    True
    >>> io.root.if_directory_exists("Old").if_empty().delete()   # safe if "Old" is missing
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from fnmatch import fnmatchcase
from typing import TYPE_CHECKING

from assetio.errors import (
    AssetExistsError,
    AssetNotFoundError,
    DirectoryNotFoundError,
    InvalidOperationError,
    InvalidPathError,
)
from assetio.handles.base import IDirectory
from assetio.handles.file import File
from assetio.handles.null import NULL_FILE, NullFile
from assetio.paths import (
    PATH_SPLITTER,
    is_asset_path,
    is_ignored_name,
    is_valid_file_name,
    join,
    split,
    validate_path,
)

if TYPE_CHECKING:
    from assetio.database.base import AssetDatabase

logger = logging.getLogger(__name__)


class Directory(IDirectory):
    """
    Handle to one folder.

    Args:
        path: Asset path of the folder (e.g. "Assets/Textures")
        database: Database the folder is stored in
    """

    def __init__(self, path: str, database: "AssetDatabase") -> None:
        validate_path(path)
        self._path = path
        self._database = database

    def __repr__(self) -> str:
        return f"Directory({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Directory):
            return NotImplemented
        return self._path == other._path and self._database is other._database

    def __hash__(self) -> int:
        return hash((self._path, id(self._database)))

    @property
    def path(self) -> str:
        return self._path

    @property
    def database(self) -> "AssetDatabase":
        return self._database

    @property
    def name(self) -> str:
        return split(self._path)[1]

    @property
    def parent(self) -> Directory | NullFile:
        """The containing folder, or NULL_FILE for the asset root."""
        parent_path = split(self._path)[0]
        if not parent_path:
            return NULL_FILE
        return Directory(parent_path, self._database)

    def _child(self, directory_path: str) -> str:
        return join(self._path, directory_path)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def __getitem__(self, directory_path: str) -> Directory:
        """
        Return the sub directory at directory_path.

        Raises:
            InvalidPathError: If directory_path is empty or ends with "/"
            DirectoryNotFoundError: If the folder does not exist
        """
        if self.directory_exists(directory_path):
            return Directory(self._child(directory_path), self._database)
        raise DirectoryNotFoundError(f"A directory was not found at {self._child(directory_path)}")

    def __iter__(self) -> Iterator[Directory]:
        return iter(self.get_directories())

    def get_directories(self) -> list[Directory]:
        """Direct sub directories, sorted by path."""
        return [Directory(path, self._database) for path in self._database.get_sub_folders(self._path)]

    def get_files(
        self,
        filter: str | None = None,
        recursive: bool = False,
        asset_type: type | str | None = None,
    ) -> list[File]:
        """
        List the files in this directory.

        Args:
            filter: Shell-style pattern matched against the file name ("*.png")
            recursive: Include files in sub directories
            asset_type: Class or class name the asset must load as

        Returns:
            File handles sorted by path.
        """
        query = ""
        if asset_type is not None:
            type_name = asset_type if isinstance(asset_type, str) else asset_type.__name__
            query = f"t:{type_name}"

        files = []
        for path in self._database.find_assets(query, [self._path]):
            parent, file_name = split(path)
            if not recursive and parent != self._path:
                continue
            if filter is not None and not fnmatchcase(file_name, filter):
                continue
            files.append(File(path, self._database))
        return files

    def get_file(self, file_name: str) -> File:
        """
        Return the file at file_name (may include sub folders).

        Raises:
            AssetNotFoundError: If no asset exists there
        """
        if self.file_exists(file_name):
            return File(self._child(file_name), self._database)
        raise AssetNotFoundError(f"A file was not found at {self._child(file_name)}")

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def exists(self) -> bool:
        return self._database.folder_exists(self._path)

    def directory_exists(self, directory_path: str) -> bool:
        """Return True if the sub directory exists."""
        validate_path(directory_path)
        return self._database.folder_exists(self._child(directory_path))

    def file_exists(self, file_name: str) -> bool:
        validate_path(file_name)
        return self._database.asset_exists(self._child(file_name))

    def is_empty(self, assets_only: bool = False) -> bool:
        """
        Check whether anything is stored in this directory or below it.

        Args:
            assets_only: If True, sub folders do not count; a tree holding only
                empty folders is empty. If False, any sub folder makes it
                non-empty.
        """
        count = len(self._database.find_assets("", [self._path]))
        if not assets_only:
            count += len(self._database.get_sub_folders(self._path))
        return count == 0

    # -------------------------------------------------------------------------
    # Chaining
    # -------------------------------------------------------------------------

    def if_directory_exists(self, directory_path: str) -> Directory | NullFile:
        """
        Return the sub directory if it exists, otherwise NULL_FILE, on which
        every following call has no effect.
        """
        if self.directory_exists(directory_path):
            return self[directory_path]
        logger.debug(f"{self._child(directory_path)} does not exist, continuing with NULL_FILE")
        return NULL_FILE

    def if_file_exists(self, file_name: str) -> File | NullFile:
        if self.file_exists(file_name):
            return File(self._child(file_name), self._database)
        return NULL_FILE

    def if_empty(self, assets_only: bool = False) -> Directory | NullFile:
        """Return this directory if it is empty, otherwise NULL_FILE."""
        if self.is_empty(assets_only):
            return self
        return NULL_FILE

    def if_not_empty(self, assets_only: bool = False) -> Directory | NullFile:
        """Return this directory if it is not empty, otherwise NULL_FILE."""
        if not self.is_empty(assets_only):
            return self
        return NULL_FILE

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create_directory(self, directory_path: str) -> Directory:
        """
        Create the sub directory if it does not already exist. Nested paths
        ("Art/Textures/Bears") are created segment by segment.

        Returns:
            The directory at directory_path, whether it was created or not.

        Raises:
            InvalidPathError: If a segment is empty, hidden or has invalid characters
            AssetExistsError: If an asset already occupies a segment's name
        """
        if self.directory_exists(directory_path):
            logger.debug(f"{self._child(directory_path)} already exists")
            return Directory(self._child(directory_path), self._database)

        segments = directory_path.split(PATH_SPLITTER)
        for segment in segments:
            validate_path(segment)
            if not is_valid_file_name(segment) or is_ignored_name(segment):
                raise InvalidPathError(f"'{segment}' is not a valid folder name")

        working_path = self._path
        for segment in segments:
            candidate = join(working_path, segment)
            if self._database.folder_exists(candidate):
                working_path = candidate
                continue
            if self._database.asset_exists(candidate):
                raise AssetExistsError(f"An asset already exists at {candidate}")
            working_path = self._database.create_folder(working_path, segment)

        return Directory(working_path, self._database)

    def delete(self) -> None:
        """Delete this directory and everything beneath it."""
        self._database.delete_file_or_directory(self._path)

    def delete_sub_directory(self, directory_name: str) -> None:
        """
        Delete a sub directory.

        Raises:
            DirectoryNotFoundError: If it does not exist
        """
        self[directory_name].delete()

    def duplicate(self, new_name: str | None = None) -> Directory:
        """
        Copy this directory next to itself.

        Args:
            new_name: Name of the copy. If omitted a unique name is generated
                ("Textures 1").
        """
        parent_path = split(self._path)[0]
        if not parent_path:
            raise InvalidOperationError("The asset root can not be duplicated")

        if new_name is None:
            destination = self._database.generate_unique_asset_path(self._path)
        else:
            if not is_valid_file_name(new_name):
                raise InvalidPathError(f"'{new_name}' is not a valid folder name")
            destination = join(parent_path, new_name)

        self._database.copy_asset(self._path, destination)
        return Directory(destination, self._database)

    def move(self, new_path: str) -> Directory:
        """Move this directory to another asset path. Returns the moved directory."""
        validate_path(new_path)
        if not is_asset_path(new_path):
            raise InvalidOperationError(f"Can't move to '{new_path}', it is not an asset path")
        self._database.move_asset(self._path, new_path)
        return Directory(new_path, self._database)

    def rename(self, new_name: str) -> Directory:
        """Rename in place. Returns the renamed directory."""
        return Directory(self._database.rename_asset(self._path, new_name), self._database)

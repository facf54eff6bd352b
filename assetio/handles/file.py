"""
File Handle

A File is a value: an asset path plus the database it lives in. Nothing is
cached, so a handle can outlive the asset it names; exists() tells you.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from assetio.errors import AssetNotFoundError, InvalidOperationError, InvalidPathError
from assetio.handles.base import IFile
from assetio.paths import (
    is_asset_path,
    is_valid_file_name,
    join,
    split,
    split_extension,
    validate_path,
)
from assetio.types import AssetRecord

if TYPE_CHECKING:
    from assetio.database.base import AssetDatabase
    from assetio.handles.directory import Directory

logger = logging.getLogger(__name__)


class File(IFile):
    """
    Handle to one asset.

    Args:
        path: Asset path of the file (e.g. "Assets/Images/Bear.png")
        database: Database the file is stored in
    """

    def __init__(self, path: str, database: "AssetDatabase") -> None:
        validate_path(path)
        self._path = path
        self._database = database

    def __repr__(self) -> str:
        return f"File({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, File):
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
    def file_name(self) -> str:
        """Name including the extension ("Bear.png")."""
        return split(self._path)[1]

    @property
    def name(self) -> str:
        """Name without the extension ("Bear")."""
        return split_extension(self.file_name)[0]

    @property
    def extension(self) -> str:
        """Extension including the dot (".png"), or ""."""
        return split_extension(self.file_name)[1]

    @property
    def directory(self) -> "Directory":
        from assetio.handles.directory import Directory

        return Directory(split(self._path)[0], self._database)

    def exists(self) -> bool:
        return self._database.asset_exists(self._path)

    def info(self) -> AssetRecord:
        """Describe the asset. Raises AssetNotFoundError if it is gone."""
        return self._database.get_asset_record(self._path)

    def delete(self) -> None:
        self._database.delete_file_or_directory(self._path)

    def rename(self, new_name: str) -> File:
        """Rename in place. new_name excludes the extension, which is kept."""
        return File(self._database.rename_asset(self._path, new_name), self._database)

    def duplicate(self, new_name: str | None = None) -> File:
        """
        Copy the file into the same folder.

        Args:
            new_name: Name of the copy without extension. If omitted a unique
                name is generated ("Bear 1.png").
        """
        if new_name is None:
            destination = self._database.generate_unique_asset_path(self._path)
        else:
            if not is_valid_file_name(new_name):
                raise InvalidPathError(f"'{new_name}' is not a valid file name")
            destination = join(split(self._path)[0], new_name + self.extension)

        self._database.copy_asset(self._path, destination)
        logger.debug(f"Duplicated {self._path} as {destination}")
        return File(destination, self._database)

    def move(self, new_path: str) -> File:
        """Move the file to another asset path (including its file name)."""
        validate_path(new_path)
        if not is_asset_path(new_path):
            raise InvalidOperationError(f"Can't move to '{new_path}', it is not an asset path")
        self._database.move_asset(self._path, new_path)
        return File(new_path, self._database)

    def load_asset(self, asset_type: type | None = None) -> Any | None:
        """
        Load the file's contents through the database.

        Args:
            asset_type: Optional class the result must be an instance of.

        Returns:
            The loaded object, or None if the file is missing or not an asset_type.
        """
        return self._database.load_asset(self._path, asset_type)

    def require_asset(self, asset_type: type | None = None) -> Any:
        """Like load_asset, but raise AssetNotFoundError instead of returning None."""
        asset = self.load_asset(asset_type)
        if asset is None:
            wanted = f" as {asset_type.__name__}" if asset_type else ""
            raise AssetNotFoundError(f"Could not load {self._path}{wanted}")
        return asset

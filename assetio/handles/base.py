"""
Handle Interfaces

IDirectory and IFile describe what callers can do with a folder or an asset.
Directory, File and the NULL_FILE sentinel implement them; the sentinel
implements both so a chain can continue whichever kind of handle it expected.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from assetio.types import AssetRecord


class IFile(ABC):
    """Operations on a single asset."""

    @property
    @abstractmethod
    def path(self) -> str:
        """Asset path of the file."""
        ...

    @property
    @abstractmethod
    def directory(self) -> IDirectory:
        """The folder containing the file."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """File name without the extension."""
        ...

    @property
    @abstractmethod
    def file_name(self) -> str:
        """File name including the extension."""
        ...

    @property
    @abstractmethod
    def extension(self) -> str:
        """Extension including the dot, or "" if there is none."""
        ...

    @abstractmethod
    def exists(self) -> bool:
        """Return True if the asset is still stored."""
        ...

    @abstractmethod
    def info(self) -> AssetRecord | None:
        """Describe the stored asset."""
        ...

    @abstractmethod
    def delete(self) -> None:
        """Delete the asset."""
        ...

    @abstractmethod
    def rename(self, new_name: str) -> IFile:
        """Rename in place, keeping the extension. Returns the renamed file."""
        ...

    @abstractmethod
    def duplicate(self, new_name: str | None = None) -> IFile:
        """Copy next to the original. Returns the copy."""
        ...

    @abstractmethod
    def move(self, new_path: str) -> IFile:
        """Move to another asset path. Returns the moved file."""
        ...

    @abstractmethod
    def load_asset(self, asset_type: type | None = None) -> Any | None:
        """Load the contents, or None if missing or not an asset_type."""
        ...

    @abstractmethod
    def require_asset(self, asset_type: type | None = None) -> Any:
        """Load the contents, raising instead of returning None."""
        ...


class IDirectory(ABC):
    """Operations on a folder."""

    @property
    @abstractmethod
    def path(self) -> str:
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def __getitem__(self, directory_path: str) -> IDirectory:
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[IDirectory]:
        ...

    def index(self, directory_path: str) -> IDirectory:
        """Return the existing sub directory at directory_path, or raise."""
        return self[directory_path]

    def get_directory(self, directory_path: str) -> IDirectory:
        return self[directory_path]

    @abstractmethod
    def exists(self) -> bool:
        ...

    @abstractmethod
    def create_directory(self, directory_path: str) -> IDirectory:
        ...

    @abstractmethod
    def delete(self) -> None:
        ...

    @abstractmethod
    def delete_sub_directory(self, directory_name: str) -> None:
        ...

    @abstractmethod
    def directory_exists(self, directory_path: str) -> bool:
        ...

    @abstractmethod
    def file_exists(self, file_name: str) -> bool:
        ...

    @abstractmethod
    def is_empty(self, assets_only: bool = False) -> bool:
        ...

    @abstractmethod
    def get_directories(self) -> list[IDirectory]:
        ...

    @abstractmethod
    def get_files(
        self,
        filter: str | None = None,
        recursive: bool = False,
        asset_type: type | str | None = None,
    ) -> list[IFile]:
        ...

    @abstractmethod
    def get_file(self, file_name: str) -> IFile:
        ...

    @abstractmethod
    def if_directory_exists(self, directory_path: str) -> IDirectory:
        ...

    def if_exists(self, directory_path: str) -> IDirectory:
        """Alias of if_directory_exists."""
        return self.if_directory_exists(directory_path)

    @abstractmethod
    def if_file_exists(self, file_name: str) -> IFile:
        ...

    @abstractmethod
    def if_empty(self, assets_only: bool = False) -> IDirectory:
        ...

    @abstractmethod
    def if_not_empty(self, assets_only: bool = False) -> IDirectory:
        ...

    @abstractmethod
    def duplicate(self, new_name: str | None = None) -> IDirectory:
        ...

    @abstractmethod
    def move(self, new_path: str) -> IDirectory:
        ...

    @abstractmethod
    def rename(self, new_name: str) -> IDirectory:
        ...

"""
NullFile Sentinel

Returned instead of None whenever a requested folder or file does not exist,
so calls can be chained without checks:

    >>> root.if_directory_exists("Old").if_empty().delete()   # no-op if "Old" is missing

Every method is inert: nothing is touched, handle-returning methods return
NULL_FILE, queries return neutral values. The sentinel is falsy, so
``if handle:`` distinguishes it from a real handle.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from assetio.handles.base import IDirectory, IFile


class NullFile(IDirectory, IFile):
    """Stateless no-op handle. NullFile() always returns the shared instance."""

    _instance: NullFile | None = None

    def __new__(cls) -> NullFile:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NULL_FILE"

    @property
    def path(self) -> str:
        return ""

    @property
    def name(self) -> str:
        return ""

    @property
    def file_name(self) -> str:
        return ""

    @property
    def extension(self) -> str:
        return ""

    @property
    def database(self) -> None:
        return None

    @property
    def directory(self) -> NullFile:
        return self

    @property
    def parent(self) -> NullFile:
        return self

    def __getitem__(self, directory_path: str) -> NullFile:
        return self

    def __iter__(self) -> Iterator[IDirectory]:
        return iter(())

    def exists(self) -> bool:
        return False

    def info(self) -> None:
        return None

    def create_directory(self, directory_path: str) -> NullFile:
        return self

    def delete(self) -> None:
        pass

    def delete_sub_directory(self, directory_name: str) -> None:
        pass

    def directory_exists(self, directory_path: str) -> bool:
        return False

    def file_exists(self, file_name: str) -> bool:
        return False

    def is_empty(self, assets_only: bool = False) -> bool:
        return True

    def get_directories(self) -> list[IDirectory]:
        return []

    def get_files(
        self,
        filter: str | None = None,
        recursive: bool = False,
        asset_type: type | str | None = None,
    ) -> list[IFile]:
        return []

    def get_file(self, file_name: str) -> NullFile:
        return self

    def if_directory_exists(self, directory_path: str) -> NullFile:
        return self

    def if_file_exists(self, file_name: str) -> NullFile:
        return self

    def if_empty(self, assets_only: bool = False) -> NullFile:
        return self

    def if_not_empty(self, assets_only: bool = False) -> NullFile:
        return self

    def duplicate(self, new_name: str | None = None) -> NullFile:
        return self

    def move(self, new_path: str) -> NullFile:
        return self

    def rename(self, new_name: str) -> NullFile:
        return self

    def load_asset(self, asset_type: type | None = None) -> Any | None:
        return None

    def require_asset(self, asset_type: type | None = None) -> None:
        return None


NULL_FILE = NullFile()
"""The shared sentinel instance."""

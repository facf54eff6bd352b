"""
In-Memory Asset Database

Dict-backed database used by the test-suite and for scripting against a
throwaway project. Assets are arbitrary Python objects; their type is whatever
class was stored.
"""

import copy
import logging
from collections.abc import Sequence
from typing import Any

from assetio.database.base import AssetDatabase, AssetQuery, is_under, type_names_of
from assetio.errors import (
    AssetExistsError,
    AssetNotFoundError,
    DirectoryNotFoundError,
    InvalidOperationError,
)
from assetio.paths import ROOT_FOLDER_NAME, is_asset_path, join, split

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = "/project/Assets"


class InMemoryAssetDatabase(AssetDatabase):
    """
    Asset database that keeps its whole tree in memory.

    Example:
        >>> db = InMemoryAssetDatabase()
        >>> db.create_folder("Assets", "Textures")
        'Assets/Textures'
        >>> db.add_asset("Assets/Textures/Bear.png", b"...")
        >>> db.find_assets("bear")
        ['Assets/Textures/Bear.png']
    """

    def __init__(self, data_path: str = DEFAULT_DATA_PATH) -> None:
        self._data_path = data_path
        self._folders: set[str] = {ROOT_FOLDER_NAME}
        self._assets: dict[str, Any] = {}

    @property
    def data_path(self) -> str:
        return self._data_path

    def _check_asset_path(self, path: str) -> None:
        if not is_asset_path(path):
            raise InvalidOperationError(f"'{path}' is not inside '{ROOT_FOLDER_NAME}'")

    # -------------------------------------------------------------------------
    # Seeding
    # -------------------------------------------------------------------------

    def add_asset(self, path: str, asset: Any) -> None:
        """
        Store an object as an asset.

        Raises:
            DirectoryNotFoundError: If the parent folder does not exist
            AssetExistsError: If a folder already occupies path
        """
        self._check_asset_path(path)
        parent, _ = split(path)
        if parent not in self._folders:
            raise DirectoryNotFoundError(f"A directory was not found at {parent}")
        if path in self._folders:
            raise AssetExistsError(f"A folder already exists at {path}")
        self._assets[path] = asset

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def folder_exists(self, path: str) -> bool:
        return path in self._folders

    def asset_exists(self, path: str) -> bool:
        return path in self._assets

    def find_assets(self, query: str, search_paths: Sequence[str] | None = None) -> list[str]:
        parsed = AssetQuery.parse(query)
        roots = list(search_paths) if search_paths else [ROOT_FOLDER_NAME]

        return sorted(
            path
            for path, asset in self._assets.items()
            if any(is_under(path, root) for root in roots)
            and parsed.matches(path, type_names_of(type(asset)))
        )

    def get_sub_folders(self, path: str) -> list[str]:
        return sorted(folder for folder in self._folders if split(folder)[0] == path)

    def asset_type_name(self, path: str) -> str | None:
        if path not in self._assets:
            return None
        return type(self._assets[path]).__name__

    def load_asset(self, path: str, asset_type: type | None = None) -> Any | None:
        asset = self._assets.get(path)
        if asset is None:
            return None
        if asset_type is not None and not isinstance(asset, asset_type):
            return None
        return asset

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create_folder(self, parent_path: str, name: str) -> str:
        self._check_folder_name(name)
        if parent_path not in self._folders:
            raise DirectoryNotFoundError(f"A directory was not found at {parent_path}")

        path = self.generate_unique_asset_path(join(parent_path, name))
        self._folders.add(path)
        logger.info(f"Created folder {path}")
        return path

    def delete_file_or_directory(self, path: str) -> None:
        if path in self._assets:
            del self._assets[path]
        elif path in self._folders:
            self._folders = {
                folder
                for folder in self._folders
                if folder != path and not is_under(folder, path)
            }
            self._assets = {
                asset_path: asset
                for asset_path, asset in self._assets.items()
                if not is_under(asset_path, path)
            }
        else:
            logger.debug(f"Nothing to delete at {path}")
            return
        logger.info(f"Deleted {path}")

    def _check_transfer(self, source: str, destination: str) -> None:
        self._check_asset_path(destination)
        if not self.exists(source):
            raise AssetNotFoundError(f"No asset or folder found at {source}")
        if self.exists(destination):
            raise AssetExistsError(f"Destination already exists: {destination}")
        if destination == source or is_under(destination, source):
            raise InvalidOperationError(f"Can not place {source} inside itself")
        parent, _ = split(destination)
        if parent not in self._folders:
            raise DirectoryNotFoundError(f"A directory was not found at {parent}")

    def _rebase(self, path: str, source: str, destination: str) -> str:
        return destination + path[len(source):]

    def copy_asset(self, source: str, destination: str) -> None:
        self._check_transfer(source, destination)

        if source in self._assets:
            self._assets[destination] = copy.deepcopy(self._assets[source])
        else:
            for folder in [f for f in self._folders if f == source or is_under(f, source)]:
                self._folders.add(self._rebase(folder, source, destination))
            for path in [p for p in self._assets if is_under(p, source)]:
                self._assets[self._rebase(path, source, destination)] = copy.deepcopy(
                    self._assets[path]
                )
        logger.info(f"Copied {source} to {destination}")

    def move_asset(self, source: str, destination: str) -> None:
        self._check_transfer(source, destination)

        if source in self._assets:
            self._assets[destination] = self._assets.pop(source)
        else:
            self._folders = {
                self._rebase(f, source, destination) if f == source or is_under(f, source) else f
                for f in self._folders
            }
            self._assets = {
                self._rebase(p, source, destination) if is_under(p, source) else p: asset
                for p, asset in self._assets.items()
            }
        logger.info(f"Moved {source} to {destination}")

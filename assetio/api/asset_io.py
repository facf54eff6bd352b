"""
AssetIO - Primary Entry Point

Binds an asset database to the root directory handle and the path
converters.

Example:
    >>> io = AssetIO(project_path="./MyGame")
    >>> textures = io.root.create_directory("Art/Textures")
    >>> io.system_to_asset_path(io.data_path + "/Art/Textures")
    'Assets/Art/Textures'

    # Injecting a database (e.g. in tests)
    >>> io = AssetIO(database=InMemoryAssetDatabase())
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from assetio.errors import AssetNotFoundError, DirectoryNotFoundError, InvalidOperationError
from assetio.handles import NULL_FILE, Directory, File, NullFile
from assetio.paths import (
    ROOT_FOLDER_NAME,
    asset_path_to_system_path,
    is_asset_path,
    is_valid_file_name,
    system_to_asset_path,
    validate_path,
)

if TYPE_CHECKING:
    from assetio.config.settings import AssetIOConfig
    from assetio.database.base import AssetDatabase

logger = logging.getLogger(__name__)


class AssetIO:
    """
    Access point for one project's assets.

    Args:
        project_path: Project directory for the local backend. Overrides config.
        database: Database to use. If omitted one is built from config.
        config: Optional configuration. Uses defaults if not provided.
        create: If True, create the Assets folder when missing. Default True.
    """

    validate_path = staticmethod(validate_path)
    is_valid_file_name = staticmethod(is_valid_file_name)

    def __init__(
        self,
        project_path: str | Path | None = None,
        database: "AssetDatabase | None" = None,
        config: "AssetIOConfig | None" = None,
        create: bool = True,
    ) -> None:
        # Lazy import to avoid circular imports
        if config is None:
            from assetio.config import AssetIOConfig
            config = AssetIOConfig()
        if project_path is not None:
            config = config.with_overrides(project_path=str(project_path))
        self._config = config
        self._create = create

        # Lazy-initialized
        self._database = database

    def _create_database(self) -> "AssetDatabase":
        """Create the database based on config."""
        backend = self._config.backend.lower()

        if backend == "local":
            from assetio.database.local.backend import LocalAssetDatabase
            return LocalAssetDatabase(
                self._config.project_path,
                lock_timeout=self._config.lock_timeout,
                create=self._create,
            )
        elif backend == "memory":
            from assetio.database.memory.backend import InMemoryAssetDatabase
            if self._config.data_path:
                return InMemoryAssetDatabase(data_path=self._config.data_path)
            return InMemoryAssetDatabase()
        else:
            raise ValueError(f"Unknown backend: {backend}")

    @property
    def config(self) -> "AssetIOConfig":
        return self._config

    @property
    def database(self) -> "AssetDatabase":
        """The database every handle delegates to, built on first use."""
        if self._database is None:
            self._database = self._create_database()
            logger.debug(f"Using {type(self._database).__name__} for {self._config.project_path}")
        return self._database

    @property
    def data_path(self) -> str:
        """System path of the Assets folder."""
        return self.database.data_path

    @property
    def root(self) -> Directory:
        """The project's Assets folder."""
        return Directory(ROOT_FOLDER_NAME, self.database)

    # -------------------------------------------------------------------------
    # Lookup by full asset path
    # -------------------------------------------------------------------------

    def _check_asset_path(self, asset_path: str) -> None:
        validate_path(asset_path)
        if not is_asset_path(asset_path):
            raise InvalidOperationError(
                f"'{asset_path}' is not an asset path, it must start with '{ROOT_FOLDER_NAME}'"
            )

    def get_directory(self, asset_path: str) -> Directory:
        """
        Return the directory at a full asset path ("Assets/Art").

        Raises:
            DirectoryNotFoundError: If it does not exist
        """
        self._check_asset_path(asset_path)
        if not self.database.folder_exists(asset_path):
            raise DirectoryNotFoundError(f"A directory was not found at {asset_path}")
        return Directory(asset_path, self.database)

    def if_directory_exists(self, asset_path: str) -> Directory | NullFile:
        self._check_asset_path(asset_path)
        if self.database.folder_exists(asset_path):
            return Directory(asset_path, self.database)
        return NULL_FILE

    def get_file(self, asset_path: str) -> File:
        """
        Return the file at a full asset path ("Assets/Art/Bear.png").

        Raises:
            AssetNotFoundError: If it does not exist
        """
        self._check_asset_path(asset_path)
        if not self.database.asset_exists(asset_path):
            raise AssetNotFoundError(f"A file was not found at {asset_path}")
        return File(asset_path, self.database)

    def if_file_exists(self, asset_path: str) -> File | NullFile:
        self._check_asset_path(asset_path)
        if self.database.asset_exists(asset_path):
            return File(asset_path, self.database)
        return NULL_FILE

    # -------------------------------------------------------------------------
    # Path conversion
    # -------------------------------------------------------------------------

    def system_to_asset_path(self, system_path: str) -> str:
        """Convert an absolute path inside data_path to an asset path."""
        return system_to_asset_path(system_path, self.data_path)

    def asset_path_to_system_path(self, asset_path: str) -> str:
        """Convert an "Assets/..." path to an absolute path."""
        return asset_path_to_system_path(asset_path, self.data_path)

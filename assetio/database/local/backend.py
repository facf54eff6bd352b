"""
Local Asset Database

Serves a project directory from disk. The project's "Assets" folder is the
asset root, so "Assets/Images/Bear.png" lives at <project>/Assets/Images/Bear.png.

Directory structure:
    project/
    ├── .assetio.lock       # Mutation lock
    └── Assets/             # Asset root (data_path)
        ├── Images/
        │   └── Bear.png
        └── Notes.md

Hidden entries (leading ".") and editor backup files (trailing "~") are
invisible to every query.

Thread safety:
    - Mutations hold a file lock (.assetio.lock) in the project directory
    - Nothing guards a check made before a mutation; callers accept that race
"""

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from filelock import FileLock

from assetio.database.base import AssetDatabase, AssetQuery, type_names_of
from assetio.errors import (
    AssetExistsError,
    AssetNotFoundError,
    DirectoryNotFoundError,
    InvalidOperationError,
    InvalidPathError,
)
from assetio.paths import (
    PATH_SPLITTER,
    ROOT_FOLDER_NAME,
    is_asset_path,
    is_ignored_name,
    join,
    split,
    split_extension,
)
from assetio.types import Asset, BinaryAsset, TextAsset

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = frozenset({
    ".txt", ".md", ".json", ".xml", ".yaml", ".yml", ".csv", ".html", ".cs", ".py", ".shader",
})
"""Extensions loaded as TextAsset. Everything else loads as BinaryAsset."""

LOCK_FILE_NAME = ".assetio.lock"


def asset_class_for(file_name: str) -> type[Asset]:
    """Return the asset type a file name loads as."""
    extension = split_extension(file_name)[1].lower()
    return TextAsset if extension in TEXT_EXTENSIONS else BinaryAsset


class LocalAssetDatabase(AssetDatabase):
    """
    Asset database backed by the local filesystem.

    Args:
        project_path: Project directory containing the Assets folder.
        lock_timeout: Seconds to wait for the mutation lock.
        create: If True, create the Assets folder when missing. Default True.
    """

    def __init__(
        self,
        project_path: Path | str,
        lock_timeout: float = 30.0,
        create: bool = True,
    ) -> None:
        self._project_path = Path(project_path).resolve()
        self._assets_root = self._project_path / ROOT_FOLDER_NAME

        if create:
            self._assets_root.mkdir(parents=True, exist_ok=True)
        elif not self._assets_root.is_dir():
            raise DirectoryNotFoundError(f"Asset folder not found: {self._assets_root}")

        self._lock = FileLock(self._project_path / LOCK_FILE_NAME, timeout=lock_timeout)

    @property
    def project_path(self) -> Path:
        """Return the project directory."""
        return self._project_path

    @property
    def data_path(self) -> str:
        return self._assets_root.as_posix()

    def _resolve(self, path: str) -> Path:
        """Map an asset path onto the filesystem."""
        if not is_asset_path(path):
            raise InvalidOperationError(f"'{path}' is not inside '{ROOT_FOLDER_NAME}'")

        segments = path.split(PATH_SPLITTER)
        if any(segment in ("", ".", "..") for segment in segments):
            raise InvalidPathError(f"Invalid asset path: {path}")
        return self._project_path.joinpath(*segments)

    def _to_asset_path(self, file_path: Path) -> str:
        return join(ROOT_FOLDER_NAME, file_path.relative_to(self._assets_root).as_posix())

    def _visible(self, file_path: Path) -> bool:
        relative = file_path.relative_to(self._assets_root)
        return not any(is_ignored_name(part) for part in relative.parts)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def folder_exists(self, path: str) -> bool:
        try:
            resolved = self._resolve(path)
        except (InvalidOperationError, InvalidPathError):
            return False
        return resolved.is_dir() and self._visible(resolved)

    def asset_exists(self, path: str) -> bool:
        try:
            resolved = self._resolve(path)
        except (InvalidOperationError, InvalidPathError):
            return False
        return resolved.is_file() and self._visible(resolved)

    def find_assets(self, query: str, search_paths: Sequence[str] | None = None) -> list[str]:
        parsed = AssetQuery.parse(query)
        results: set[str] = set()

        for search_path in search_paths or [ROOT_FOLDER_NAME]:
            root = self._resolve(search_path)
            if not root.is_dir():
                continue
            for file_path in root.rglob("*"):
                if not file_path.is_file() or not self._visible(file_path):
                    continue
                asset_path = self._to_asset_path(file_path)
                if parsed.matches(asset_path, type_names_of(asset_class_for(file_path.name))):
                    results.add(asset_path)

        return sorted(results)

    def get_sub_folders(self, path: str) -> list[str]:
        folder = self._resolve(path)
        if not folder.is_dir():
            return []
        return sorted(
            join(path, child.name)
            for child in folder.iterdir()
            if child.is_dir() and not is_ignored_name(child.name)
        )

    def asset_type_name(self, path: str) -> str | None:
        if not self.asset_exists(path):
            return None
        return asset_class_for(split(path)[1]).__name__

    def load_asset(self, path: str, asset_type: type | None = None) -> Any | None:
        if not self.asset_exists(path):
            return None

        file_path = self._resolve(path)
        asset_class = asset_class_for(file_path.name)
        if asset_type is not None and not issubclass(asset_class, asset_type):
            return None

        stem = split_extension(file_path.name)[0]
        if asset_class is TextAsset:
            try:
                text = file_path.read_text(encoding="utf-8")
            except UnicodeDecodeError as e:
                logger.warning(f"Could not decode {path} as UTF-8: {e}")
                return None
            return TextAsset(path=path, name=stem, text=text)
        return BinaryAsset(path=path, name=stem, data=file_path.read_bytes())

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create_folder(self, parent_path: str, name: str) -> str:
        self._check_folder_name(name)
        if not self.folder_exists(parent_path):
            raise DirectoryNotFoundError(f"A directory was not found at {parent_path}")

        with self._lock:
            path = self.generate_unique_asset_path(join(parent_path, name))
            self._resolve(path).mkdir()
        logger.info(f"Created folder {path}")
        return path

    def delete_file_or_directory(self, path: str) -> None:
        target = self._resolve(path)
        with self._lock:
            if target.is_dir():
                shutil.rmtree(target)
            elif target.exists():
                target.unlink()
            else:
                logger.debug(f"Nothing to delete at {path}")
                return
        logger.info(f"Deleted {path}")

    def _check_transfer(self, source: str, destination: str) -> tuple[Path, Path]:
        source_path = self._resolve(source)
        destination_path = self._resolve(destination)
        if not self.exists(source):
            raise AssetNotFoundError(f"No asset or folder found at {source}")
        if destination_path.exists():
            raise AssetExistsError(f"Destination already exists: {destination}")
        if destination == source or destination.startswith(source + PATH_SPLITTER):
            raise InvalidOperationError(f"Can not place {source} inside itself")
        parent, _ = split(destination)
        if not self.folder_exists(parent):
            raise DirectoryNotFoundError(f"A directory was not found at {parent}")
        return source_path, destination_path

    def copy_asset(self, source: str, destination: str) -> None:
        source_path, destination_path = self._check_transfer(source, destination)
        with self._lock:
            if source_path.is_dir():
                shutil.copytree(source_path, destination_path)
            else:
                shutil.copy2(source_path, destination_path)
        logger.info(f"Copied {source} to {destination}")

    def move_asset(self, source: str, destination: str) -> None:
        source_path, destination_path = self._check_transfer(source, destination)
        with self._lock:
            shutil.move(str(source_path), str(destination_path))
        logger.info(f"Moved {source} to {destination}")

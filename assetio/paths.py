"""
Path Helpers

Validation and conversion for asset paths.

Asset paths are project-relative, use "/" as the only separator and are rooted
at the "Assets" folder (e.g. "Assets/Images/Bear.png"). System paths are
absolute filesystem paths. The "data path" is the system path of the Assets
folder itself, so it always ends with "/Assets".

Example:
    >>> validate_path("Images/Bear.png")
    >>> system_to_asset_path("/proj/Assets/Images/Bear.png", "/proj/Assets")
    'Assets/Images/Bear.png'
    >>> asset_path_to_system_path("Assets/Images/Bear.png", "/proj/Assets")
    '/proj/Assets/Images/Bear.png'
"""

from __future__ import annotations

from assetio.errors import InvalidArgumentError, InvalidOperationError, InvalidPathError

PATH_SPLITTER = "/"
"""The only separator used in asset paths."""

ROOT_FOLDER_NAME = "Assets"
"""First segment of every asset path."""

INVALID_FILE_NAME_CHARS: tuple[str, ...] = ("/", "\\", "<", ">", ":", "|", '"')
"""Characters the asset database does not accept in file or folder names."""


def validate_path(path: str | None) -> None:
    """
    Reject path fragments the asset database would misread.

    Args:
        path: Path fragment supplied by the caller.

    Raises:
        InvalidPathError: If the path is None, empty, or ends with "/".
    """
    if not path:
        raise InvalidPathError("A path can not be None or empty when searching the project")

    if path.endswith(PATH_SPLITTER):
        raise InvalidPathError(
            f"Directory paths must not end with a trailing '{PATH_SPLITTER}': {path!r}"
        )


def is_valid_file_name(name: str) -> bool:
    """Return False if the name contains a character the database rejects."""
    return bool(name) and not any(char in name for char in INVALID_FILE_NAME_CHARS)


def is_ignored_name(name: str) -> bool:
    """True for hidden entries (".cache") and editor backups ("Notes.md~")."""
    return name.startswith(".") or name.endswith("~")


def join(*parts: str) -> str:
    """Join path fragments with the asset path separator."""
    return PATH_SPLITTER.join(part for part in parts if part)


def split(path: str) -> tuple[str, str]:
    """Split an asset path into (parent, name). The parent of a single segment is ""."""
    parent, _, name = path.rpartition(PATH_SPLITTER)
    return parent, name


def split_extension(file_name: str) -> tuple[str, str]:
    """Split "Bear.png" into ("Bear", ".png"). Dot files have no extension."""
    stem, dot, extension = file_name.rpartition(".")
    if not dot or not stem:
        return file_name, ""
    return stem, dot + extension


def is_asset_path(path: str) -> bool:
    """True if the path is the asset root or lies beneath it."""
    return path == ROOT_FOLDER_NAME or path.startswith(ROOT_FOLDER_NAME + PATH_SPLITTER)


def system_to_asset_path(system_path: str, data_path: str) -> str:
    """
    Convert an absolute system path to an asset path.

    Example:
        Input  (system): C:/Users/Projects/MyProject/Assets/Images/Bear.png
        Output (asset) : Assets/Images/Bear.png

    Args:
        system_path: Absolute path inside the project's Assets folder.
        data_path: System path of the Assets folder.

    Returns:
        The project-relative asset path.

    Raises:
        InvalidArgumentError: If system_path is empty.
        InvalidOperationError: If system_path is not inside data_path.
    """
    if not system_path:
        raise InvalidArgumentError("The system path that was sent in was empty. Can not convert")

    if not system_path.startswith(data_path):
        raise InvalidOperationError(
            f"The path {system_path} does not start with {data_path} "
            "which is our current directory. This can't be converted"
        )

    # Keep the root folder name, drop everything before it
    prefix_length = len(data_path) - len(ROOT_FOLDER_NAME)
    return system_path[prefix_length:]


def asset_path_to_system_path(asset_path: str, data_path: str) -> str:
    """
    Convert an asset path to an absolute system path.

    Example:
        Input  (asset) : Assets/Images/Bear.png
        Output (system): C:/Users/Projects/MyProject/Assets/Images/Bear.png

    Args:
        asset_path: Path starting with "Assets/".
        data_path: System path of the Assets folder.

    Returns:
        The absolute system path.

    Raises:
        InvalidArgumentError: If asset_path is empty.
        InvalidOperationError: If asset_path does not start with "Assets/".
    """
    if not asset_path:
        raise InvalidArgumentError("The asset path that was sent in was empty. Can not convert")

    required_prefix = ROOT_FOLDER_NAME + PATH_SPLITTER
    if not asset_path.startswith(required_prefix):
        raise InvalidOperationError(
            f"Can't convert '{asset_path}' to a system path since it does not start "
            f"with '{required_prefix}'"
        )

    return data_path + asset_path[len(ROOT_FOLDER_NAME):]

"""
AssetIO - Asset Folder Handles

Directory and file handles over an editor asset database, with path
validation and chain-friendly "exists or no-op" helpers.

Example:
    >>> from assetio import AssetIO
    >>> io = AssetIO(project_path="./MyGame")
    >>> art = io.root.create_directory("Art/Textures")
    >>> io.root.if_directory_exists("Old").if_empty().delete()

Main Classes:
    AssetIO: Entry point; owns the database and hands out the root directory
    Directory, File: Handles delegating to the database
    NULL_FILE: Sentinel returned when something does not exist
    AssetIOConfig: Configuration management
"""

__version__ = "0.2.0"

_HANDLES = ("Directory", "File", "NullFile", "NULL_FILE", "IDirectory", "IFile")
_DATABASES = ("AssetDatabase", "InMemoryAssetDatabase", "LocalAssetDatabase")
_ERRORS = (
    "AssetIOError",
    "InvalidPathError",
    "DirectoryNotFoundError",
    "AssetNotFoundError",
    "AssetExistsError",
    "InvalidArgumentError",
    "InvalidOperationError",
)


# Public API - lazy imports keep "import assetio" cheap for the CLI
def __getattr__(name: str):
    """Lazy import public API components."""

    if name == "AssetIO":
        from assetio.api.asset_io import AssetIO
        return AssetIO

    if name == "AssetIOConfig":
        from assetio.config.settings import AssetIOConfig
        return AssetIOConfig

    if name in _HANDLES:
        from assetio import handles
        return getattr(handles, name)

    if name in _DATABASES:
        from assetio import database
        return getattr(database, name)

    if name in _ERRORS:
        from assetio import errors
        return getattr(errors, name)

    if name in ("Asset", "AssetRecord", "BinaryAsset", "TextAsset"):
        from assetio import types
        return getattr(types, name)

    raise AttributeError(f"module 'assetio' has no attribute {name!r}")


__all__ = [
    # Main classes
    "AssetIO",
    "AssetIOConfig",

    # Handles
    *_HANDLES,

    # Databases
    *_DATABASES,

    # Errors
    *_ERRORS,

    # Types
    "Asset",
    "AssetRecord",
    "BinaryAsset",
    "TextAsset",

    # Version
    "__version__",
]

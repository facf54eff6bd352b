"""
Error Types

Every error raised by assetio derives from AssetIOError and from the builtin
exception a caller would already expect (ValueError, FileNotFoundError, ...),
so existing ``except`` clauses keep working.
"""


class AssetIOError(Exception):
    """Base class for all assetio errors."""


class InvalidPathError(AssetIOError, ValueError):
    """A path fragment is empty or ends with the path separator."""


class DirectoryNotFoundError(AssetIOError, FileNotFoundError):
    """A directory looked up through a strict accessor does not exist."""


class AssetNotFoundError(AssetIOError, FileNotFoundError):
    """An asset looked up through a strict accessor does not exist."""


class AssetExistsError(AssetIOError, FileExistsError):
    """The target of a copy, move or rename is already taken."""


class InvalidArgumentError(AssetIOError, ValueError):
    """A converter received an empty path."""


class InvalidOperationError(AssetIOError, RuntimeError):
    """A path is not rooted where the operation requires it to be."""

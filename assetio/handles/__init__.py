"""
Handles

Directory and File wrap an asset path and delegate every operation to an
AssetDatabase. NULL_FILE stands in for anything that does not exist.
"""

from assetio.handles.base import IDirectory, IFile
from assetio.handles.directory import Directory
from assetio.handles.file import File
from assetio.handles.null import NULL_FILE, NullFile

__all__ = [
    "Directory",
    "File",
    "IDirectory",
    "IFile",
    "NULL_FILE",
    "NullFile",
]

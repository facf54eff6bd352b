"""
Asset Databases

Handles never touch the filesystem themselves; every operation goes through
an AssetDatabase.

Modules:
    base: Abstract database interface and the find_assets query parser
    memory/: Dict-backed database for tests and scripting
    local/: Database serving <project>/Assets from disk

Design Principles:
    - Injected, never global (pass one to AssetIO or to a handle)
    - No caching (every call reflects the current state)
"""

from assetio.database.base import AssetDatabase, AssetQuery
from assetio.database.local.backend import LocalAssetDatabase
from assetio.database.memory.backend import InMemoryAssetDatabase

__all__ = [
    "AssetDatabase",
    "AssetQuery",
    "InMemoryAssetDatabase",
    "LocalAssetDatabase",
]

"""
Public API

AssetIO is the entry point: it owns the database and hands out the root
directory handle.
"""

from assetio.api.asset_io import AssetIO

__all__ = ["AssetIO"]

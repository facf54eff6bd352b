"""
Type Definitions

Pydantic models for asset metadata and loaded asset contents.
"""

from assetio.types.assets import Asset, AssetRecord, BinaryAsset, TextAsset

__all__ = [
    "Asset",
    "AssetRecord",
    "BinaryAsset",
    "TextAsset",
]

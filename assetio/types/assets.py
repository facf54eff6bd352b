"""
Asset Types

Pydantic models describing what the asset database stores and loads.

Models:
    - AssetRecord: Metadata for a stored asset, without its contents
    - Asset: Base class for loaded asset objects
    - TextAsset: Asset whose contents decode as UTF-8 text
    - BinaryAsset: Asset kept as raw bytes
"""

from pydantic import BaseModel, ConfigDict


class AssetRecord(BaseModel):
    """
    Metadata for one stored asset.

    Attributes:
        path: Asset path (e.g. "Assets/Images/Bear.png")
        name: File name without extension ("Bear")
        extension: Extension including the dot (".png"), or "" if none
        asset_type: Name of the type the database loads it as
    """

    model_config = ConfigDict(frozen=True)

    path: str
    name: str
    extension: str = ""
    asset_type: str


class Asset(BaseModel):
    """A loaded asset. Subclasses carry the contents."""

    path: str
    name: str


class TextAsset(Asset):
    """Text file contents (scripts, json, markdown, ...)."""

    text: str


class BinaryAsset(Asset):
    """Any asset without a dedicated loader."""

    data: bytes = b""

    @property
    def size(self) -> int:
        return len(self.data)

"""In-memory asset database."""

from assetio.database.memory.backend import InMemoryAssetDatabase

__all__ = ["InMemoryAssetDatabase"]

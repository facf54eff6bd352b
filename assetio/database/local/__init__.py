"""Filesystem-backed asset database."""

from assetio.database.local.backend import LocalAssetDatabase

__all__ = ["LocalAssetDatabase"]

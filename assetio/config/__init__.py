"""
Configuration System

Configuration Priority (highest to lowest):
    1. Programmatic (passed to AssetIOConfig() or read by from_file)
    2. Environment variables (ASSETIO_* prefix, optionally from a .env file)
    3. Built-in defaults
"""

from assetio.config.settings import AssetIOConfig

__all__ = ["AssetIOConfig"]

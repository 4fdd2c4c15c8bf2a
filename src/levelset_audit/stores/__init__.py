"""Asset stores for the overlay resolver.

This package contains the AssetStore interface and its directory and
in-memory implementations.
"""

from .base import AssetStore
from .filesystem import DirectoryStore, validate_path_safety
from .memory import MemoryStore

__all__ = ["AssetStore", "DirectoryStore", "MemoryStore", "validate_path_safety"]

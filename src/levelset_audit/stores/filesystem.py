"""Directory-backed asset store.

This module provides an AssetStore implementation over a local data
directory, such as the game's stock data root or an addon directory.
"""

import os
from pathlib import Path

from .base import AssetStore


def validate_path_safety(path: Path, base_dir: Path) -> None:
    """Validate that a path stays within the base directory.

    This prevents logical paths like "../../etc/passwd" from reaching
    outside the data root. The check is lexical, so a symlink inside the
    data root is allowed wherever its target lives.

    Args:
        path: Path to validate
        base_dir: Base directory that path must be within

    Raises:
        ValueError: If path escapes the base directory
    """
    normalized_path = Path(os.path.normpath(os.path.abspath(path)))
    normalized_base = Path(os.path.normpath(os.path.abspath(base_dir)))

    if not normalized_path.is_relative_to(normalized_base):
        raise ValueError(f"Path {path} escapes base directory {base_dir}")


class DirectoryStore(AssetStore):
    """Asset store for a data directory on disk.

    Example:
        >>> store = DirectoryStore(Path('/usr/share/neverball/data'))
        >>> store.exists('shot-easy/easy.jpg')
        True
    """

    def __init__(self, root: Path):
        """Initialize directory store.

        Args:
            root: Data directory that logical paths are relative to

        Raises:
            ValueError: If root doesn't exist or isn't a directory
        """
        self.root = Path(root)

        if not self.root.exists():
            raise ValueError(f"Path does not exist: {self.root}")

        if not self.root.is_dir():
            raise ValueError(f"Path is not a directory: {self.root}")

    def _locate(self, path: str) -> Path:
        file_path = self.root / path
        validate_path_safety(file_path, self.root)
        return file_path

    def exists(self, path: str) -> bool:
        """Check for a regular file at the logical path.

        Paths that escape the data root count as absent.
        """
        if not path:
            return False
        try:
            return self._locate(path).is_file()
        except ValueError:
            return False

    def read_bytes(self, path: str) -> bytes:
        """Read a file from the data directory.

        Raises:
            ValueError: If the path escapes the data root
            OSError: If the file cannot be read
        """
        return self._locate(path).read_bytes()

    def physical_path(self, path: str) -> str:
        # Keep the root as given so reported paths match the command line
        return str(self.root / path)

    def describe(self) -> str:
        return str(self.root)

    def __repr__(self) -> str:
        return f"DirectoryStore({str(self.root)!r})"

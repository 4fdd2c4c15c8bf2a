"""In-memory asset store.

Handy for embedding the auditor in other tools (e.g. auditing files pulled
from an archive) and for tests.
"""

from collections.abc import Mapping

from .base import AssetStore


class MemoryStore(AssetStore):
    """Asset store backed by a mapping of logical path to content.

    Example:
        >>> store = MemoryStore({'shot.jpg': b'...'}, name='base')
        >>> store.physical_path('shot.jpg')
        'base/shot.jpg'
    """

    def __init__(self, files: Mapping[str, bytes | str] | None = None, name: str = "memory"):
        self.name = name
        self.files: dict[str, bytes] = {}
        for path, content in (files or {}).items():
            self.add(path, content)

    def add(self, path: str, content: bytes | str = b"") -> None:
        """Store content at a logical path, encoding text as UTF-8."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.files[path] = content

    def exists(self, path: str) -> bool:
        return path in self.files

    def read_bytes(self, path: str) -> bytes:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(f"{self.name}: {path}") from None

    def physical_path(self, path: str) -> str:
        return f"{self.name}/{path}"

    def describe(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"MemoryStore(name={self.name!r}, files={len(self.files)})"

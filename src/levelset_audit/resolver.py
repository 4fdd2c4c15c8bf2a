"""Two-layer overlay path resolution.

Logical asset paths resolve against an addon store first and a base store
second. Every resolution is memoized and recorded, so the packaging step
can later ask which addon files were used and which of them merely shadow
a base copy.
"""

from dataclasses import dataclass
from enum import Enum

from .stores.base import AssetStore


class Layer(str, Enum):
    """Overlay layer a logical path resolved in."""

    ADDON = "addon"
    BASE = "base"


@dataclass(frozen=True)
class ResolutionRecord:
    """Where a logical path resolved.

    Attributes:
        path: Logical path that was resolved
        physical: Physical location in the owning store
        layer: Which store owns the resolved file
        shadowed: True when the path exists in both stores (addon wins)
    """

    path: str
    physical: str
    layer: Layer
    shadowed: bool = False


class OverlayResolver:
    """Resolve logical paths against an addon store layered over a base store.

    One resolver is created per audit; its bookkeeping is the record of
    which files the audit touched.

    Example:
        >>> resolver = OverlayResolver(DirectoryStore(addon_dir), DirectoryStore(base_dir))
        >>> resolver.resolve('map-easy/easy.sol')
        '/usr/share/neverball/data/map-easy/easy.sol'
    """

    def __init__(self, addon: AssetStore, base: AssetStore):
        self.addon = addon
        self.base = base
        self._records: dict[str, ResolutionRecord | None] = {}

    def lookup(self, path: str) -> ResolutionRecord | None:
        """Resolve a logical path and return its record.

        The first call queries the stores; later calls for the same path
        return the memoized answer.
        """
        if path in self._records:
            return self._records[path]

        record: ResolutionRecord | None = None

        if self.addon.exists(path):
            record = ResolutionRecord(
                path=path,
                physical=self.addon.physical_path(path),
                layer=Layer.ADDON,
                shadowed=self.base.exists(path),
            )
        elif self.base.exists(path):
            record = ResolutionRecord(
                path=path,
                physical=self.base.physical_path(path),
                layer=Layer.BASE,
            )

        self._records[path] = record
        return record

    def resolve(self, path: str) -> str | None:
        """Get the physical location of a logical path.

        Args:
            path: Logical asset path

        Returns:
            Physical path in the addon store if present there, else in the
            base store, else None
        """
        record = self.lookup(path)
        return record.physical if record is not None else None

    def exists(self, path: str) -> bool:
        """Check existence, recording the resolution like resolve() does."""
        return self.lookup(path) is not None

    def read_bytes(self, path: str) -> bytes:
        """Read a logical path from whichever store it resolves in.

        Raises:
            FileNotFoundError: If the path exists in neither store
            OSError: If the owning store fails to read it
        """
        record = self.lookup(path)
        if record is None:
            raise FileNotFoundError(f"{path} not found")

        store = self.addon if record.layer is Layer.ADDON else self.base
        return store.read_bytes(path)

    def read_text(self, path: str) -> str:
        """Read a logical path as text (UTF-8, undecodable bytes replaced)."""
        return self.read_bytes(path).decode("utf-8", errors="replace")

    @property
    def records(self) -> list[ResolutionRecord]:
        """All successful resolutions, in the order they were first made."""
        return [record for record in self._records.values() if record is not None]

    def records_in(self, layer: Layer) -> list[ResolutionRecord]:
        """Successful resolutions that landed in one layer."""
        return [record for record in self.records if record.layer is layer]

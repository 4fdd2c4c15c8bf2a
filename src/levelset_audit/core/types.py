"""Type definitions for level-set asset audits.

This module defines the asset reference and bundle structures shared by
the extractors, the walker and the auditor, plus TypedDict classes that
mirror the JSON schema in schemas/audit_report.schema.json.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TypedDict


class AssetKind(str, Enum):
    """Kinds of asset a level set can depend on.

    SET is the level-set manifest itself; it only ever appears as a parent.
    """

    SET = "set"
    IMAGE = "image"
    AUDIO = "audio"
    LEVEL = "level"
    MATERIAL = "material"
    MATERIAL_IMAGE = "material-image"
    COMPANION_GEOMETRY = "companion-geometry"
    MODEL = "model"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AssetRef:
    """A logical asset path tagged with its kind.

    Two references are equal when kind and path match. The parent is
    diagnostic only and never takes part in comparison or hashing.

    Attributes:
        kind: What sort of asset this is
        path: Slash-separated logical path, relative to both data roots
        parent: The reference that produced this one, if any
    """

    kind: AssetKind
    path: str
    parent: Optional["AssetRef"] = field(default=None, compare=False, repr=False)

    @property
    def parent_path(self) -> str | None:
        """Logical path of the parent reference, if there is one."""
        return self.parent.path if self.parent is not None else None


# Bundle collections, in the order they are audited
BUNDLE_KINDS = (AssetKind.IMAGE, AssetKind.AUDIO, AssetKind.LEVEL, AssetKind.MATERIAL)


@dataclass
class AssetBundle:
    """Deduplicated assets grouped by kind.

    Each collection maps a logical path to the first reference inserted for
    it, so insertion order is preserved and later duplicates (with possibly
    different parents) are ignored.
    """

    images: dict[str, AssetRef] = field(default_factory=dict)
    audio: dict[str, AssetRef] = field(default_factory=dict)
    levels: dict[str, AssetRef] = field(default_factory=dict)
    materials: dict[str, AssetRef] = field(default_factory=dict)

    def _collection(self, kind: AssetKind) -> dict[str, AssetRef]:
        if kind is AssetKind.IMAGE:
            return self.images
        if kind is AssetKind.AUDIO:
            return self.audio
        if kind is AssetKind.LEVEL:
            return self.levels
        if kind is AssetKind.MATERIAL:
            return self.materials
        raise ValueError(f"Asset kind {kind} is not part of a bundle")

    def add(self, ref: AssetRef) -> bool:
        """Add a reference unless its (kind, path) is already present.

        Returns:
            True if the reference was new
        """
        collection = self._collection(ref.kind)
        if ref.path in collection:
            return False
        collection[ref.path] = ref
        return True

    def merge(self, other: "AssetBundle") -> "AssetBundle":
        """Union another bundle into this one in place and return self."""
        for ref in other:
            self.add(ref)
        return self

    def refs(self, kind: AssetKind) -> list[AssetRef]:
        """References of one kind, in insertion order."""
        return list(self._collection(kind).values())

    def paths(self, kind: AssetKind) -> list[str]:
        """Logical paths of one kind, in insertion order."""
        return list(self._collection(kind).keys())

    def __contains__(self, ref: object) -> bool:
        if not isinstance(ref, AssetRef) or ref.kind not in BUNDLE_KINDS:
            return False
        return ref.path in self._collection(ref.kind)

    def __iter__(self) -> Iterator[AssetRef]:
        for kind in BUNDLE_KINDS:
            yield from self._collection(kind).values()

    def __len__(self) -> int:
        return sum(len(self._collection(kind)) for kind in BUNDLE_KINDS)


class ReportEntry(TypedDict):
    """One classified asset in an audit report."""

    kind: str  # AssetKind value
    path: str  # Logical path (level path for a missing companion)
    parent: str | None  # Logical path of the referencing asset


class ArchiveReportEntry(TypedDict):
    """One file selected for the distributable archive."""

    source: str  # Physical path of the addon file
    name: str  # Archive-relative name (the logical path)


class AuditReport(TypedDict):
    """Complete audit report for one level set."""

    set_file: str  # Logical path of the set file
    base_dir: str  # Base data directory
    addon_dir: str  # Addon directory (the set file's directory)
    ok: bool  # True when nothing is missing
    found: list[ReportEntry]
    missing: list[ReportEntry]
    archive: list[ArchiveReportEntry]

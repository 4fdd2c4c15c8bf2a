"""Audit pipeline for level sets.

This module provides the main interface for auditing a level set: it
wires the set-file extractor, the dependency walker, the existence
auditor and the packaging selector around one overlay resolver.
"""

import sys
from dataclasses import dataclass, field
from pathlib import Path

from .auditor import AuditOutcome, Auditor
from .core.types import AssetBundle, AuditReport
from .extractors import Decoder
from .formats.setfile import extract_set_assets
from .formats.sol import decode_sol
from .packaging import ArchiveEntry, select_archive_files
from .report import build_report
from .resolver import OverlayResolver
from .stores.filesystem import DirectoryStore
from .walker import close_bundle


@dataclass
class AuditResult:
    """Everything one audit produced.

    Attributes:
        set_path: Logical path of the set file
        base_dir: Description of the base store
        addon_dir: Description of the addon store
        bundle: Closed bundle of every reachable asset
        outcome: Found and missing assets
        archive_entries: Addon files that are new relative to the base store
    """

    set_path: str
    base_dir: str
    addon_dir: str
    bundle: AssetBundle
    outcome: AuditOutcome
    archive_entries: list[ArchiveEntry] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.outcome.ok

    def to_report(self) -> AuditReport:
        return build_report(self)


class AuditPipeline:
    """Main interface for level-set audits.

    The pipeline works with any pair of asset stores behind an
    OverlayResolver; from_paths() builds the usual directory-backed one.

    Example:
        >>> pipeline = AuditPipeline.from_paths(
        ...     base_dir=Path('/usr/share/neverball/data'),
        ...     set_file=Path('addon/set-mine.txt'),
        ... )
        >>> result = pipeline.run()
        >>> result.ok
        True
    """

    def __init__(
        self,
        resolver: OverlayResolver,
        set_path: str,
        decoder: Decoder = decode_sol,
        quiet: bool = False,
    ):
        """Initialize the pipeline.

        Args:
            resolver: Fresh resolver for this audit
            set_path: Logical path of the set file (relative to the addon store)
            decoder: Level file decoder
            quiet: Suppress progress messages on stderr
        """
        self.resolver = resolver
        self.set_path = set_path
        self.decoder = decoder
        self.quiet = quiet

    @classmethod
    def from_paths(cls, base_dir: Path, set_file: Path, **kwargs) -> "AuditPipeline":
        """Create a pipeline for a set file on disk.

        The addon directory is the directory containing the set file.

        Args:
            base_dir: Game data directory
            set_file: Path to the set file
            **kwargs: Passed to the constructor (decoder, quiet)

        Returns:
            AuditPipeline over DirectoryStore(addon) and DirectoryStore(base)

        Raises:
            ValueError: If the base directory or the set file doesn't exist
        """
        base_dir = Path(base_dir)
        set_file = Path(set_file)

        if not base_dir.is_dir():
            raise ValueError(f"Base directory does not exist: {base_dir}")

        if not set_file.is_file():
            raise ValueError(f"Set file does not exist: {set_file}")

        resolver = OverlayResolver(
            addon=DirectoryStore(set_file.parent),
            base=DirectoryStore(base_dir),
        )
        return cls(resolver, set_file.name, **kwargs)

    def _progress(self, message: str) -> None:
        if not self.quiet:
            print(message, file=sys.stderr)

    def run(self) -> AuditResult:
        """Audit the level set.

        Returns:
            AuditResult; missing assets are reported in it, never raised

        Raises:
            ValueError: If the set file can't be found through the resolver
        """
        # The set file is resolved first so that it heads the archive
        if not self.resolver.exists(self.set_path):
            raise ValueError(f"Set file does not exist: {self.set_path}")

        self._progress(f"Scanning set file: {self.set_path}")
        direct = extract_set_assets(self.resolver.read_text(self.set_path), self.set_path)

        bundle = close_bundle(direct, self.resolver, self.decoder)
        self._progress(f"Found {len(bundle)} referenced assets")

        outcome = Auditor(self.resolver, self.decoder).audit(bundle)
        self._progress(f"Checked {len(outcome.found) + len(outcome.missing)} assets, {len(outcome.missing)} missing")

        entries = select_archive_files(self.resolver, always_include=[self.set_path])

        return AuditResult(
            set_path=self.set_path,
            base_dir=self.resolver.base.describe(),
            addon_dir=self.resolver.addon.describe(),
            bundle=bundle,
            outcome=outcome,
            archive_entries=entries,
        )

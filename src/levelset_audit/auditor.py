"""Existence audit of a closed asset bundle.

Every asset in the bundle is classified as found or missing. Levels also
pull in their companion map file, and the models named inside each map
file are checked last.
"""

import sys
from dataclasses import dataclass, field

from .core.types import AssetBundle, AssetKind, AssetRef
from .extractors import Decoder, read_level
from .formats.mapfile import derive_map_path, extract_models
from .formats.sol import decode_sol
from .materials import find_material_image_path, find_material_path
from .resolver import OverlayResolver


@dataclass
class AuditOutcome:
    """Found and missing assets, in audit order."""

    found: list[AssetRef] = field(default_factory=list)
    missing: list[AssetRef] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when nothing is missing."""
        return not self.missing

    def classify(self, ref: AssetRef, present: bool) -> None:
        if present:
            self.found.append(ref)
        else:
            self.missing.append(ref)

    def missing_of(self, kind: AssetKind) -> list[AssetRef]:
        return [ref for ref in self.missing if ref.kind is kind]

    def found_of(self, kind: AssetKind) -> list[AssetRef]:
        return [ref for ref in self.found if ref.kind is kind]


class Auditor:
    """Classify every asset of a closed bundle as found or missing.

    Example:
        >>> auditor = Auditor(resolver)
        >>> outcome = auditor.audit(close_bundle(bundle, resolver))
        >>> [ref.path for ref in outcome.missing]
        ['music/tune.ogg']
    """

    def __init__(self, resolver: OverlayResolver, decoder: Decoder = decode_sol):
        self.resolver = resolver
        self.decoder = decoder

    def audit(self, bundle: AssetBundle) -> AuditOutcome:
        """Check a bundle (usually the output of close_bundle()).

        Args:
            bundle: Assets to check

        Returns:
            AuditOutcome with images, audio, levels and companions,
            materials and material images, then models
        """
        outcome = AuditOutcome()

        # Models are only known after reading map files; keyed by path to dedupe
        models: dict[str, AssetRef] = {}

        for ref in bundle.refs(AssetKind.IMAGE):
            outcome.classify(ref, self.resolver.exists(ref.path))

        for ref in bundle.refs(AssetKind.AUDIO):
            outcome.classify(ref, self.resolver.exists(ref.path))

        for ref in bundle.refs(AssetKind.LEVEL):
            self._audit_level(ref, outcome, models)

        for ref in bundle.refs(AssetKind.MATERIAL):
            self._audit_material(ref, outcome)

        for ref in models.values():
            outcome.classify(ref, self.resolver.exists(ref.path))

        return outcome

    def _audit_level(self, ref: AssetRef, outcome: AuditOutcome, models: dict[str, AssetRef]) -> None:
        outcome.classify(ref, read_level(ref, self.resolver, self.decoder).ok)

        map_path = derive_map_path(ref.path)

        # A path without the .sol suffix derives to itself and has no companion
        if map_path == ref.path or not self.resolver.exists(map_path):
            # Reported under the level's path; the map path is derived
            outcome.missing.append(AssetRef(AssetKind.COMPANION_GEOMETRY, ref.path, ref.parent))
            return

        map_ref = AssetRef(AssetKind.COMPANION_GEOMETRY, map_path, ref)
        outcome.found.append(map_ref)

        try:
            content = self.resolver.read_text(map_path)
        except OSError as e:
            print(f"Warning: Failed to read {map_path}: {e}", file=sys.stderr)
            return

        for model in extract_models(content):
            models.setdefault(model, AssetRef(AssetKind.MODEL, model, map_ref))

    def _audit_material(self, ref: AssetRef, outcome: AuditOutcome) -> None:
        outcome.classify(ref, find_material_path(ref.path, self.resolver) is not None)

        image_path = find_material_image_path(ref.path, self.resolver)

        if image_path is None:
            # No single candidate is authoritative, so report the material name
            outcome.missing.append(AssetRef(AssetKind.MATERIAL_IMAGE, ref.path, ref.parent))
        else:
            outcome.found.append(AssetRef(AssetKind.MATERIAL_IMAGE, image_path, ref))


def audit(bundle: AssetBundle, resolver: OverlayResolver, decoder: Decoder = decode_sol) -> AuditOutcome:
    """Convenience wrapper around Auditor(resolver, decoder).audit(bundle)."""
    return Auditor(resolver, decoder).audit(bundle)

"""Direct asset extraction from level files.

Reading a level is kept separate from extracting its assets: read_level()
returns an explicit success/failure result, and level_assets() turns a
result into the bundle of references the level makes (empty for a
failure).
"""

from dataclasses import dataclass
from typing import Callable

from .core.types import AssetBundle, AssetKind, AssetRef
from .formats.sol import NO_MATERIAL, SolFile, decode_sol
from .resolver import OverlayResolver

Decoder = Callable[[bytes], SolFile]

# Level dictionary keys and the kind of asset each one names
LEVEL_DICT_ASSETS = (
    ("shot", AssetKind.IMAGE),
    ("song", AssetKind.AUDIO),
    ("grad", AssetKind.IMAGE),
    ("back", AssetKind.LEVEL),
)


@dataclass
class LevelReadResult:
    """Outcome of reading and decoding one level file.

    Attributes:
        ref: The level that was read
        sol: Decoded level on success
        error: Why the level could not be read or decoded on failure
    """

    ref: AssetRef
    sol: SolFile | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.sol is not None


def read_level(ref: AssetRef, resolver: OverlayResolver, decoder: Decoder = decode_sol) -> LevelReadResult:
    """Read a level through the resolver and decode it.

    Args:
        ref: Level reference to read
        resolver: Overlay resolver for the audit
        decoder: Level file decoder

    Returns:
        LevelReadResult; absent files, I/O errors and malformed data all
        produce a failed result rather than an exception
    """
    try:
        data = resolver.read_bytes(ref.path)
    except (OSError, ValueError) as e:
        return LevelReadResult(ref, error=str(e))

    try:
        return LevelReadResult(ref, sol=decoder(data))
    except ValueError as e:
        return LevelReadResult(ref, error=f"{ref.path}: {e}")


def level_assets(result: LevelReadResult) -> AssetBundle:
    """Get the assets a decoded level references directly.

    Args:
        result: Result of read_level()

    Returns:
        Bundle of image, audio, background level and material references,
        each parented to the level; empty if the level failed to read
    """
    bundle = AssetBundle()

    if result.sol is None:
        return bundle

    for key, kind in LEVEL_DICT_ASSETS:
        value = result.sol.get(key)
        if value:
            bundle.add(AssetRef(kind, value, result.ref))

    # An empty name carries no texture, like the sentinels
    for material in result.sol.materials:
        if material.name and material.name not in NO_MATERIAL:
            bundle.add(AssetRef(AssetKind.MATERIAL, material.name, result.ref))

    return bundle


def extract_level_assets(
    ref: AssetRef,
    resolver: OverlayResolver,
    decoder: Decoder = decode_sol,
) -> AssetBundle:
    """Read a level and return its direct assets (empty on any failure)."""
    return level_assets(read_level(ref, resolver, decoder))

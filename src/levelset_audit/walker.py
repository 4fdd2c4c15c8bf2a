"""Transitive closure over background-level references.

A level may name another level as its background ("back"), which in turn
has its own assets and possibly its own background. Nothing stops two
levels from naming each other, so expansion is driven by a work stack and
a visited set instead of plain recursion.
"""

import sys

from .core.types import AssetBundle, AssetKind, AssetRef
from .extractors import Decoder, level_assets, read_level
from .formats.sol import decode_sol
from .resolver import OverlayResolver


def close_bundle(
    bundle: AssetBundle,
    resolver: OverlayResolver,
    decoder: Decoder = decode_sol,
    warn: bool = True,
) -> AssetBundle:
    """Compute every asset reachable from a bundle.

    Levels are expanded in order: each top-level level, then its
    background chain depth-first. Each distinct level path is expanded at
    most once.

    Args:
        bundle: Starting bundle (typically the set file's direct assets)
        resolver: Overlay resolver for the audit
        decoder: Level file decoder
        warn: Print a warning to stderr for levels that fail to decode

    Returns:
        New bundle holding the input plus everything reachable from it
    """
    closed = AssetBundle().merge(bundle)
    visited: set[str] = set()

    # Reversed so that popping yields file order
    pending: list[AssetRef] = list(reversed(closed.refs(AssetKind.LEVEL)))

    while pending:
        ref = pending.pop()
        if ref.path in visited:
            continue
        visited.add(ref.path)

        result = read_level(ref, resolver, decoder)
        if not result.ok and warn:
            print(f"Warning: Failed to read level {ref.path}: {result.error}", file=sys.stderr)

        children = level_assets(result)
        closed.merge(children)

        pending.extend(
            reversed([child for child in children.refs(AssetKind.LEVEL) if child.path not in visited])
        )

    return closed

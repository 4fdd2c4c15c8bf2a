"""Shared fixtures for level-set audit tests."""

import struct
from pathlib import Path

import pytest

from levelset_audit.formats.sol import COUNT_FIELDS, M_ALPHA_TEST, PATHMAX, SOL_MAGIC, SOL_VERSION_CURRENT
from levelset_audit.resolver import OverlayResolver
from levelset_audit.stores.memory import MemoryStore


def build_sol(
    dicts: dict[str, str] | None = None,
    materials: list[str | tuple[str, int]] | None = None,
    version: int = SOL_VERSION_CURRENT,
) -> bytes:
    """Build the header, dict and material sections of a SOL file.

    Materials are names or (name, flags) pairs.
    """
    arena = bytearray()

    def intern(text: str) -> int:
        offset = len(arena)
        arena.extend(text.encode("utf-8") + b"\0")
        return offset

    entries = [(intern(key), intern(value)) for key, value in (dicts or {}).items()]
    mtrls = [(m, 0) if isinstance(m, str) else m for m in (materials or [])]

    counts = [0] * COUNT_FIELDS
    counts[0] = len(arena)
    counts[1] = len(entries)
    counts[2] = len(mtrls)

    data = struct.pack("<ii", SOL_MAGIC, version)
    data += struct.pack(f"<{COUNT_FIELDS}i", *counts)
    data += bytes(arena)

    for key_offset, value_offset in entries:
        data += struct.pack("<ii", key_offset, value_offset)

    for name, flags in mtrls:
        data += struct.pack("<17f", *([1.0] * 17))
        data += struct.pack("<i", flags)
        data += name.encode("utf-8").ljust(PATHMAX, b"\0")
        if flags & M_ALPHA_TEST:
            data += struct.pack("<if", 3, 0.5)

    return data


@pytest.fixture
def sol_bytes():
    """Factory for SOL file content."""
    return build_sol


@pytest.fixture
def base_store() -> MemoryStore:
    return MemoryStore(name="base")


@pytest.fixture
def addon_store() -> MemoryStore:
    return MemoryStore(name="addon")


@pytest.fixture
def resolver(addon_store: MemoryStore, base_store: MemoryStore) -> OverlayResolver:
    return OverlayResolver(addon=addon_store, base=base_store)


@pytest.fixture
def data_dirs(tmp_path: Path) -> tuple[Path, Path]:
    """Empty (base, addon) data directories on disk."""
    base = tmp_path / "data"
    addon = tmp_path / "addon"
    base.mkdir()
    addon.mkdir()
    return base, addon


def write_file(root: Path, path: str, content: bytes | str = b"") -> Path:
    """Create a file under root, including parent directories."""
    file_path = root / path
    file_path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, str):
        content = content.encode("utf-8")
    file_path.write_bytes(content)
    return file_path


@pytest.fixture
def put_file():
    """Helper to create files in a data directory."""
    return write_file

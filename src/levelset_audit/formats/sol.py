"""SOL level file decoder.

Level files are little-endian binary blobs. The audit only needs the
header, the string dictionary (shot, song, grad, back, ...) and the
material table, so decoding stops after the materials.

Layout of the part that is read:

    int32     magic, version
    int32[21] element counts (ac, dc, mc, vc, ...)
    byte[ac]  text arena, NUL-terminated strings
    dc x      dict entry: int32 key offset, int32 value offset (into arena)
    mc x      material: float[17] colors, int32 flags, byte[64] name,
              int32 alpha func + float alpha ref if M_ALPHA_TEST is set
"""

import struct
from dataclasses import dataclass, field

SOL_MAGIC = 0xAF | (ord("S") << 8) | (ord("O") << 16) | (ord("L") << 24)
SOL_VERSION_MIN = 6
SOL_VERSION_CURRENT = 7

# ac, dc, mc, vc, ec, sc, tc, oc, gc, lc, nc, pc, bc, hc, zc, jc, xc, rc, uc, wc, ic
COUNT_FIELDS = 21

PATHMAX = 64
M_ALPHA_TEST = 1 << 9

# Material name placeholders meaning "no material"
NO_MATERIAL = frozenset({"NULL", "default"})


class SolError(ValueError):
    """Raised when a level file cannot be decoded."""


@dataclass
class Material:
    """A material record; only the name matters to the audit."""

    name: str
    flags: int = 0


@dataclass
class SolFile:
    """Decoded header data of a level file.

    Attributes:
        version: Format version
        dicts: Key/value string pairs (shot, song, grad, back, message, ...)
        materials: Material table in file order
    """

    version: int
    dicts: dict[str, str] = field(default_factory=dict)
    materials: list[Material] = field(default_factory=list)

    def get(self, key: str) -> str:
        """Dictionary value for key, or an empty string."""
        return self.dicts.get(key, "")


class SolReader:
    """Sequential little-endian reader over a level file's bytes."""

    def __init__(self, data: bytes):
        self.data = data
        self.offset = 0

    def read_bytes(self, count: int) -> bytes:
        """Read count bytes and advance offset"""
        if count < 0 or self.offset + count > len(self.data):
            raise SolError(f"Unexpected end of data at offset {self.offset} (wanted {count} bytes)")
        result = self.data[self.offset:self.offset + count]
        self.offset += count
        return result

    def read_int32(self) -> int:
        return struct.unpack("<i", self.read_bytes(4))[0]

    def read_float(self) -> float:
        return struct.unpack("<f", self.read_bytes(4))[0]

    def read_floats(self, count: int) -> tuple[float, ...]:
        return struct.unpack(f"<{count}f", self.read_bytes(4 * count))

    def read_fixed_string(self, size: int) -> str:
        """Read a NUL-padded string field of fixed size"""
        raw = self.read_bytes(size)
        return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _arena_string(arena: bytes, offset: int) -> str:
    if offset < 0 or offset >= len(arena):
        raise SolError(f"String offset {offset} outside text arena of {len(arena)} bytes")
    end = arena.find(b"\0", offset)
    if end < 0:
        end = len(arena)
    return arena[offset:end].decode("utf-8", errors="replace")


def _read_material(reader: SolReader) -> Material:
    reader.read_floats(4 * 4 + 1)  # diffuse, ambient, specular, emission, shininess
    flags = reader.read_int32()
    name = reader.read_fixed_string(PATHMAX)

    if flags & M_ALPHA_TEST:
        reader.read_int32()
        reader.read_float()

    return Material(name=name, flags=flags)


def decode_sol(data: bytes) -> SolFile:
    """Decode the dictionary and material table of a level file.

    Args:
        data: Raw level file content

    Returns:
        SolFile with dicts and materials

    Raises:
        SolError: If the magic, version or structure is invalid
    """
    reader = SolReader(data)

    magic = reader.read_int32() & 0xFFFFFFFF
    if magic != SOL_MAGIC:
        raise SolError(f"Invalid SOL magic: 0x{magic:08x}")

    version = reader.read_int32()
    if not SOL_VERSION_MIN <= version <= SOL_VERSION_CURRENT:
        raise SolError(f"Unsupported SOL version: {version}")

    counts = [reader.read_int32() for _ in range(COUNT_FIELDS)]
    if any(count < 0 for count in counts):
        raise SolError(f"Negative element count in header: {counts}")

    text_size, dict_count, mtrl_count = counts[0], counts[1], counts[2]
    arena = reader.read_bytes(text_size)

    sol = SolFile(version=version)

    for _ in range(dict_count):
        key_offset = reader.read_int32()
        value_offset = reader.read_int32()
        sol.dicts[_arena_string(arena, key_offset)] = _arena_string(arena, value_offset)

    for _ in range(mtrl_count):
        sol.materials.append(_read_material(reader))

    return sol

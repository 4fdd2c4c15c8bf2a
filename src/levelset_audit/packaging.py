"""Selection and writing of the distributable archive.

Only files that the audit resolved in the addon directory and that have
no copy in the base directory are worth shipping.
"""

import zipfile
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .resolver import Layer, OverlayResolver


@dataclass(frozen=True)
class ArchiveEntry:
    """A file to put in the archive.

    Attributes:
        source: Physical path of the file
        name: Name inside the archive (the logical path)
    """

    source: str
    name: str


def archive_name_for(path: str) -> str:
    """Normalize a logical path into an archive member name."""
    name = path.replace("\\", "/")
    while name.startswith("./"):
        name = name[2:]
    return name


def select_archive_files(resolver: OverlayResolver, always_include: Iterable[str] = ()) -> list[ArchiveEntry]:
    """Select the addon files that are new relative to the base store.

    Args:
        resolver: Resolver whose bookkeeping records what the audit used
        always_include: Logical paths to keep even if they shadow a base
            copy (the set file itself)

    Returns:
        Archive entries in the order the files were first resolved
    """
    keep = set(always_include)
    entries: list[ArchiveEntry] = []

    for record in resolver.records_in(Layer.ADDON):
        if record.shadowed and record.path not in keep:
            continue
        entries.append(ArchiveEntry(source=record.physical, name=archive_name_for(record.path)))

    return entries


def default_archive_path(set_path: str, output_dir: Path | None = None) -> Path:
    """Archive path for a set file: "set-easy.txt" -> "set-easy.zip"."""
    stem = Path(set_path).stem
    return (output_dir or Path(".")) / f"{stem}.zip"


def write_archive(entries: Iterable[ArchiveEntry], destination: Path) -> Path:
    """Write archive entries to a zip file.

    Args:
        entries: Files to add, read from their physical source path
        destination: Zip file to create (parent directories are created)

    Returns:
        The destination path

    Raises:
        OSError: If a source file can't be read or the zip can't be written
    """
    destination.parent.mkdir(parents=True, exist_ok=True)

    with zipfile.ZipFile(destination, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9) as archive:
        for entry in entries:
            archive.write(entry.source, entry.name)

    return destination

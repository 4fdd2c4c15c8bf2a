"""Level-set asset auditor.

This package checks that every asset a level set depends on (screenshots,
music, background levels, materials, textures, map files and models) can
be found in an addon directory layered over the game's data directory,
and selects the addon files worth packaging for distribution.
"""

# Core library interface
from .auditor import AuditOutcome, Auditor, audit
from .pipeline import AuditPipeline, AuditResult
from .resolver import Layer, OverlayResolver, ResolutionRecord
from .walker import close_bundle

# Core utilities
from .core import AssetBundle, AssetKind, AssetRef, AuditReport
from .core import report_errors, validate_report

# Extraction and packaging
from .extractors import LevelReadResult, extract_level_assets, read_level
from .formats import derive_map_path, extract_models, extract_set_assets
from .materials import find_material_image_path, find_material_path
from .packaging import ArchiveEntry, select_archive_files, write_archive

# Stores
from .stores import AssetStore, DirectoryStore, MemoryStore

# CLI
from .cli import audit_level_set, main

__version__ = "0.1.0"

__all__ = [
    # Primary library interface
    "AuditPipeline",
    "AuditResult",
    "Auditor",
    "AuditOutcome",
    "audit",
    "OverlayResolver",
    "ResolutionRecord",
    "Layer",
    "close_bundle",
    # Core utilities
    "AssetBundle",
    "AssetKind",
    "AssetRef",
    "AuditReport",
    "validate_report",
    "report_errors",
    # Extraction and packaging
    "LevelReadResult",
    "read_level",
    "extract_level_assets",
    "extract_set_assets",
    "derive_map_path",
    "extract_models",
    "find_material_path",
    "find_material_image_path",
    "ArchiveEntry",
    "select_archive_files",
    "write_archive",
    # Stores
    "AssetStore",
    "DirectoryStore",
    "MemoryStore",
    # CLI
    "audit_level_set",
    "main",
]

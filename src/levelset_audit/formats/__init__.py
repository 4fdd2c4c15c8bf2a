"""File formats read by the auditor.

Set files (level-set manifests), binary SOL level files and their text
companion map files.
"""

from .mapfile import derive_map_path, extract_models
from .setfile import extract_set_assets
from .sol import NO_MATERIAL, Material, SolError, SolFile, decode_sol

__all__ = [
    "NO_MATERIAL",
    "Material",
    "SolError",
    "SolFile",
    "decode_sol",
    "derive_map_path",
    "extract_models",
    "extract_set_assets",
]

"""Companion map file helpers.

Models placed in a level are anonymous in the compiled SOL file, but the
source .map file next to it still names them:

    "classname" "misc_model"
    "model" "geom/mushroom/mushroom.obj"
"""

import re

SOL_SUFFIX = ".sol"
MAP_SUFFIX = ".map"

MODEL_PATTERN = re.compile(r'"model"[ \t]+"([^"]+)"')


def derive_map_path(level_path: str) -> str:
    """Get the companion map path of a level path.

    "levels/foo.sol" -> "levels/foo.map". Paths without the .sol suffix
    are returned unchanged.
    """
    if level_path.endswith(SOL_SUFFIX):
        return level_path[: -len(SOL_SUFFIX)] + MAP_SUFFIX
    return level_path


def extract_models(content: str) -> list[str]:
    """Get every model path named in map file text, in order of appearance."""
    return MODEL_PATTERN.findall(content)

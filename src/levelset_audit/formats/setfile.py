"""Level-set manifest (set file) parsing.

A set file is line oriented:

    line 0-2  name, description, identifier (ignored here)
    line 3    screenshot image path, may be empty
    line 4    ignored
    line 5+   one level file path per line, blank lines ignored
"""

import re

from ..core.types import AssetBundle, AssetKind, AssetRef

SHOT_LINE = 3
FIRST_LEVEL_LINE = 5

LINE_SPLIT = re.compile(r"\r?\n")


def extract_set_assets(content: str, set_path: str) -> AssetBundle:
    """Get the direct image and level references of a set file.

    Args:
        content: Text of the set file
        set_path: Logical path of the set file, used as the parent

    Returns:
        Bundle holding the screenshot (if any) and the levels in file order
    """
    parent = AssetRef(AssetKind.SET, set_path)
    bundle = AssetBundle()

    lines = LINE_SPLIT.split(content)
    shot = lines[SHOT_LINE] if len(lines) > SHOT_LINE else ""

    if shot:
        bundle.add(AssetRef(AssetKind.IMAGE, shot, parent))

    for line in lines[FIRST_LEVEL_LINE:]:
        if line:
            bundle.add(AssetRef(AssetKind.LEVEL, line, parent))

    return bundle

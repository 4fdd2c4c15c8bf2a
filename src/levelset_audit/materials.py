"""Material file and texture lookup.

Material names in level files are bare, e.g. "mtrl/turf-green". The
material definition usually lives under textures/, and so does the image
that textures it.
"""

from .resolver import OverlayResolver

IMAGE_EXTENSIONS = (".png", ".jpg")


def material_path_candidates(name: str) -> list[str]:
    return ["textures/" + name, name]


def material_image_candidates(name: str) -> list[str]:
    candidates = ["textures/" + name + ext for ext in IMAGE_EXTENSIONS]
    candidates += [name + ext for ext in IMAGE_EXTENSIONS]
    return candidates


def _first_existing(candidates: list[str], resolver: OverlayResolver) -> str | None:
    for candidate in candidates:
        if resolver.exists(candidate):
            return candidate
    return None


def find_material_path(name: str, resolver: OverlayResolver) -> str | None:
    """Find the logical path of a material's definition file.

    Args:
        name: Material name from a level file
        resolver: Overlay resolver for the audit

    Returns:
        First existing of textures/<name>, <name>; None if neither exists
    """
    return _first_existing(material_path_candidates(name), resolver)


def find_material_image_path(name: str, resolver: OverlayResolver) -> str | None:
    """Find the logical path of a material's texture image.

    Args:
        name: Material name from a level file
        resolver: Overlay resolver for the audit

    Returns:
        First existing of textures/<name>.png, textures/<name>.jpg,
        <name>.png, <name>.jpg; None if none exists
    """
    return _first_existing(material_image_candidates(name), resolver)

"""
Transparent border trimming for Sprite Atlas Prep.
"""

from dataclasses import dataclass

from PIL import Image


@dataclass
class TrimResult:
    """Trimmed image plus where it sat in the original."""
    image: Image.Image
    width: int
    height: int
    original_width: int
    original_height: int
    offset_x: int
    offset_y: int


def trim_transparent(image: Image.Image) -> TrimResult:
    """
    Crop an image to the bounding box of its non-transparent pixels.

    Args:
        image: Source image

    Returns:
        TrimResult. A fully transparent image becomes a 1x1 transparent image;
        an image without an alpha channel is returned as is.
    """
    original_width, original_height = image.size

    if 'A' not in image.getbands():
        return TrimResult(image, original_width, original_height,
                          original_width, original_height, 0, 0)

    bbox = image.getchannel('A').getbbox()
    if bbox is None:
        empty = Image.new('RGBA', (1, 1), (0, 0, 0, 0))
        return TrimResult(empty, 1, 1, original_width, original_height, 0, 0)

    left, top, right, bottom = bbox
    cropped = image.crop(bbox)
    return TrimResult(cropped, right - left, bottom - top,
                      original_width, original_height, left, top)

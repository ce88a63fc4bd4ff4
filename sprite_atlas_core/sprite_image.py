"""
Sprite image data structure and loaders for Sprite Atlas Prep.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from PIL import Image, UnidentifiedImageError

IMAGE_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.gif', '.bmp', '.webp', '.tif', '.tiff'}

logger = logging.getLogger(__name__)


@dataclass
class SpriteImage:
    """Represents a single sprite and the pixels drawn into the atlas."""

    name: str
    fullname: str
    image: Image.Image
    width: Optional[int] = None
    height: Optional[int] = None
    file_path: Optional[Path] = None

    def __post_init__(self):
        """Default the size to the image size and ensure file_path is a Path object."""
        if self.width is None:
            self.width = self.image.width
        if self.height is None:
            self.height = self.image.height
        if isinstance(self.file_path, str):
            self.file_path = Path(self.file_path)


def load_sprite_image(path: Union[str, Path]) -> SpriteImage:
    """
    Load one sprite from disk as RGBA.

    Args:
        path: Image file path

    Returns:
        SpriteImage named after the file stem
    """
    path = Path(path)
    with Image.open(path) as img:
        image = img.convert('RGBA')
        image.load()

    return SpriteImage(name=path.stem or path.name, fullname=path.name, image=image, file_path=path)


def collect_image_paths(inputs: Iterable[Union[str, Path]]) -> List[Path]:
    """
    Expand files and folders into a list of image paths.

    Folders are scanned non-recursively and their contents sorted by name.
    """
    paths = []
    for entry in inputs:
        entry = Path(entry)
        if entry.is_dir():
            paths.extend(sorted(p for p in entry.iterdir()
                                if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS))
        elif entry.suffix.lower() in IMAGE_EXTENSIONS:
            paths.append(entry)
        else:
            logger.debug(f"Skipping non-image input: {entry}")
    return paths


def load_sprite_images(inputs: Iterable[Union[str, Path]]) -> List[SpriteImage]:
    """
    Load every image found in the given files and folders.

    Files sharing a file name with one already loaded are skipped.

    Args:
        inputs: Image files and/or folders

    Returns:
        Loaded sprites in input order
    """
    sprites: List[SpriteImage] = []
    seen = set()
    duplicates = 0

    for path in collect_image_paths(inputs):
        if path.name in seen:
            duplicates += 1
            continue

        try:
            sprite = load_sprite_image(path)
        except (OSError, UnidentifiedImageError) as e:
            logger.warning(f"Could not load image {path}: {e}")
            continue

        seen.add(sprite.fullname)
        sprites.append(sprite)

    if duplicates:
        logger.info(f"Skipped {duplicates} duplicate file(s)")

    logger.info(f"Loaded {len(sprites)} sprite(s)")
    return sprites

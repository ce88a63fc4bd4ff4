"""
Sprite Atlas Core Package
Core functionality for packing sprites into texture atlases.
"""

from .free_space import FreeSpaceKind, Rect
from .packer import PackingEngine, PackItem, PlacedItem
from .auto_size import AutoSizeController, AutoSizeResult
from .settings import AtlasSettings
from .sprite_image import SpriteImage, load_sprite_images
from .trimmer import trim_transparent
from .builder import AtlasBuilder, AtlasPlacement, AtlasResult
from .renderer import AtlasRenderer

__all__ = [
    'FreeSpaceKind',
    'Rect',
    'PackingEngine',
    'PackItem',
    'PlacedItem',
    'AutoSizeController',
    'AutoSizeResult',
    'AtlasSettings',
    'SpriteImage',
    'load_sprite_images',
    'trim_transparent',
    'AtlasBuilder',
    'AtlasPlacement',
    'AtlasResult',
    'AtlasRenderer'
]

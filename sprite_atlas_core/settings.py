"""
Atlas build settings for Sprite Atlas Prep.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping

from PIL import ImageColor

from .free_space import FreeSpaceKind


@dataclass
class AtlasSettings:
    """Atlas build settings."""
    width: int = 1024  # Fixed atlas width when auto_size is off
    height: int = 1024  # Fixed atlas height when auto_size is off
    auto_size: bool = False  # Search for the smallest square atlas
    trimming: bool = False  # Crop transparent borders before packing
    padding: int = 0  # Pixels added to each sprite's width and height while packing
    circular: bool = False  # Clip sprites to a circle when rendering
    border: bool = False  # Outline each sprite when rendering
    border_width: int = 2
    border_color: str = "#000000"
    free_space: FreeSpaceKind = FreeSpaceKind.SPLIT_PRUNE

    def __post_init__(self):
        """Validate and normalize settings."""
        self.free_space = FreeSpaceKind(self.free_space)

        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Atlas size must be positive, got {self.width}x{self.height}")
        if self.padding < 0:
            raise ValueError(f"Padding cannot be negative: {self.padding}")
        if self.border_width < 0:
            raise ValueError(f"Border width cannot be negative: {self.border_width}")

        # Raises ValueError for unknown colors
        ImageColor.getrgb(self.border_color)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> 'AtlasSettings':
        """Build settings from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known})

    def to_dict(self) -> dict:
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values["free_space"] = self.free_space.value
        return values

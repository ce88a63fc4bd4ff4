"""
Atlas build pipeline for Sprite Atlas Prep.
Trims, pads and packs sprites, then maps placements back to sprite geometry.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence

from .auto_size import AutoSizeController
from .packer import PackingEngine, PackItem
from .settings import AtlasSettings
from .sprite_image import SpriteImage
from .trimmer import trim_transparent


@dataclass
class AtlasPlacement:
    """Final position of one sprite in the atlas, padding excluded."""
    name: str
    fullname: str
    x: int
    y: int
    width: int
    height: int
    sprite: SpriteImage


@dataclass
class AtlasResult:
    """Result of an atlas build."""
    width: int
    height: int
    placements: List[AtlasPlacement] = field(default_factory=list)
    unplaced: List[str] = field(default_factory=list)
    sprites: List[SpriteImage] = field(default_factory=list)  # Sprites as packed (after trimming)
    exhausted: bool = False

    @property
    def complete(self) -> bool:
        return not self.unplaced


class AtlasBuilder:
    """Runs the packing pipeline for a list of sprites."""

    def __init__(self, settings: Optional[AtlasSettings] = None):
        self.settings = settings or AtlasSettings()
        self.logger = logging.getLogger(__name__)

    def prepare_sprites(self, sprites: Sequence[SpriteImage]) -> List[SpriteImage]:
        """Apply trimming when enabled; sprites are never modified in place."""
        if not self.settings.trimming:
            return list(sprites)

        prepared = []
        for sprite in sprites:
            trimmed = trim_transparent(sprite.image)
            if (trimmed.width, trimmed.height) != (sprite.width, sprite.height):
                self.logger.debug(
                    f"Trimmed {sprite.fullname}: {sprite.width}x{sprite.height} -> "
                    f"{trimmed.width}x{trimmed.height}"
                )
            prepared.append(replace(sprite, image=trimmed.image,
                                    width=trimmed.width, height=trimmed.height))
        return prepared

    def build(self, sprites: Sequence[SpriteImage]) -> AtlasResult:
        """
        Pack sprites according to the settings.

        Args:
            sprites: Sprites to place

        Returns:
            AtlasResult with the atlas size and sprite placements
        """
        settings = self.settings
        prepared = self.prepare_sprites(sprites)

        items = [
            PackItem(sprite.name, sprite.width + settings.padding,
                     sprite.height + settings.padding, payload=index)
            for index, sprite in enumerate(prepared)
        ]

        self.logger.info(
            f"Building atlas from {len(items)} sprites "
            f"({'auto size' if settings.auto_size else f'{settings.width}x{settings.height}'}, "
            f"padding {settings.padding})"
        )

        exhausted = False
        if settings.auto_size:
            sizing = AutoSizeController(free_space=settings.free_space).resolve_size(items)
            width, height, placed = sizing.width, sizing.height, sizing.placed
            exhausted = sizing.exhausted
        else:
            width, height = settings.width, settings.height
            placed = PackingEngine(width, height, settings.free_space).pack(items) if items else []

        placements = []
        for item in placed:
            sprite = prepared[item.payload]
            placements.append(AtlasPlacement(
                name=sprite.name,
                fullname=sprite.fullname,
                x=item.x,
                y=item.y,
                width=item.width - settings.padding,
                height=item.height - settings.padding,
                sprite=sprite,
            ))

        placed_indices = {item.payload for item in placed}
        unplaced = [sprite.name for index, sprite in enumerate(prepared) if index not in placed_indices]

        if unplaced:
            self.logger.warning(f"{len(unplaced)} sprite(s) did not fit in {width}x{height}")
        self.logger.info(f"Atlas {width}x{height}: placed {len(placements)}/{len(prepared)} sprites")

        return AtlasResult(width, height, placements, unplaced, prepared, exhausted)

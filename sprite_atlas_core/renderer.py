"""
Rendering engine for Sprite Atlas Prep.
Composes packed sprites into the atlas PNG and a scaled preview.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, ImageChops, ImageDraw

from .builder import AtlasPlacement, AtlasResult
from .logger import log_project
from .settings import AtlasSettings

CHECKER_SIZE = 10
CHECKER_COLORS = ((255, 255, 255), (238, 238, 238))


class AtlasRenderer:
    """Handles PNG rendering for Sprite Atlas Prep."""

    def __init__(self):
        """Initialize the renderer."""
        self.logger = logging.getLogger(__name__)

    def render(self, result: AtlasResult, settings: AtlasSettings) -> Image.Image:
        """
        Draw every placed sprite onto a transparent RGBA canvas.

        Args:
            result: Atlas build result
            settings: Settings controlling clipping and borders

        Returns:
            Atlas image of result.width x result.height
        """
        canvas = Image.new('RGBA', (result.width, result.height), (0, 0, 0, 0))

        for placement in result.placements:
            sprite_img = self._fit_sprite(placement)
            if settings.circular:
                sprite_img = self._clip_circle(sprite_img)
            # Placements never overlap, so a plain paste keeps the sprite's own alpha
            canvas.paste(sprite_img, (placement.x, placement.y))

        if settings.border and settings.border_width > 0:
            draw = ImageDraw.Draw(canvas)
            for placement in result.placements:
                box = self._bounds(placement, settings.circular)
                if settings.circular:
                    draw.ellipse(box, outline=settings.border_color, width=settings.border_width)
                else:
                    draw.rectangle(box, outline=settings.border_color, width=settings.border_width)

        return canvas

    def generate_atlas(self, result: AtlasResult, settings: AtlasSettings, output_path: Path,
                       log_path: Optional[Path] = None, project_name: str = "atlas") -> Image.Image:
        """
        Render the atlas and save it as PNG.

        Args:
            result: Atlas build result
            settings: Render settings
            output_path: Output path for the atlas PNG
            log_path: Optional path for the project log
            project_name: Project name for logging

        Returns:
            The rendered atlas image
        """
        start_time = datetime.now()
        self.logger.info(f"Generating atlas PNG: {output_path} ({result.width}x{result.height})")

        try:
            canvas = self.render(result, settings)
            canvas.save(output_path, format='PNG')
        except Exception as e:
            self.logger.error(f"Error generating atlas: {e}", exc_info=True)
            if log_path is not None:
                log_project(log_path, project_name, start_time, settings,
                            num_files=len(result.sprites), output_path=Path(output_path),
                            final_size=(result.width, result.height), process_time=0,
                            images_placed=0, error=str(e))
            raise

        if log_path is not None:
            process_time = (datetime.now() - start_time).total_seconds()
            log_project(log_path, project_name, start_time, settings,
                        num_files=len(result.sprites), output_path=Path(output_path),
                        final_size=(result.width, result.height), process_time=process_time,
                        images_placed=len(result.placements), unplaced=result.unplaced)

        self.logger.info(f"Atlas PNG saved: {output_path} ({len(result.placements)} sprites placed)")
        return canvas

    def generate_preview(self, result: AtlasResult, settings: AtlasSettings, output_path: Path,
                         max_dimension: int = 1024) -> Image.Image:
        """
        Generate a preview over a checkerboard with maximum dimension constraint.

        Args:
            result: Atlas build result
            settings: Render settings
            output_path: Output path for the preview
            max_dimension: Maximum pixel dimension for the preview

        Returns:
            The preview image
        """
        atlas = self.render(result, settings)

        max_current = max(result.width, result.height)
        scale_factor = min(1.0, max_dimension / max_current)
        preview_size = (max(1, int(result.width * scale_factor)), max(1, int(result.height * scale_factor)))

        self.logger.info(f"Preview scale factor: {scale_factor:.3f}")
        self.logger.info(f"Preview dimensions: {preview_size[0]}x{preview_size[1]}")

        if scale_factor < 1.0:
            atlas = atlas.resize(preview_size, Image.Resampling.LANCZOS)

        preview = self._checkerboard(preview_size)
        preview.paste(atlas, (0, 0), atlas)

        draw = ImageDraw.Draw(preview)
        for placement in result.placements:
            x0 = int(placement.x * scale_factor)
            y0 = int(placement.y * scale_factor)
            x1 = max(x0, int((placement.x + placement.width) * scale_factor) - 1)
            y1 = max(y0, int((placement.y + placement.height) * scale_factor) - 1)
            draw.rectangle([x0, y0, x1, y1], outline='lightgray', width=1)

        preview.save(output_path)
        self.logger.info(f"Preview saved: {output_path}")
        return preview

    def _fit_sprite(self, placement: AtlasPlacement) -> Image.Image:
        img = placement.sprite.image
        if img.mode != 'RGBA':
            img = img.convert('RGBA')
        if img.size != (placement.width, placement.height):
            img = img.resize((placement.width, placement.height), Image.Resampling.LANCZOS)
        return img

    def _clip_circle(self, img: Image.Image) -> Image.Image:
        """Clear everything outside the circle inscribed in the sprite."""
        mask = Image.new('L', img.size, 0)
        ImageDraw.Draw(mask).ellipse(self._circle_box(img.width, img.height), fill=255)

        clipped = img.copy()
        clipped.putalpha(ImageChops.multiply(img.getchannel('A'), mask))
        return clipped

    @staticmethod
    def _circle_box(width: int, height: int, x: int = 0, y: int = 0) -> Tuple[int, int, int, int]:
        """Bounding box of a circle of radius min(w, h) / 2 centred in the rect."""
        diameter = min(width, height)
        left = x + (width - diameter) // 2
        top = y + (height - diameter) // 2
        return left, top, left + diameter - 1, top + diameter - 1

    def _bounds(self, placement: AtlasPlacement, circular: bool) -> Tuple[int, int, int, int]:
        if circular:
            return self._circle_box(placement.width, placement.height, placement.x, placement.y)
        return (placement.x, placement.y,
                placement.x + placement.width - 1, placement.y + placement.height - 1)

    @staticmethod
    def _checkerboard(size: Tuple[int, int]) -> Image.Image:
        board = Image.new('RGB', size, CHECKER_COLORS[0])
        draw = ImageDraw.Draw(board)
        for row, y in enumerate(range(0, size[1], CHECKER_SIZE)):
            for col, x in enumerate(range(0, size[0], CHECKER_SIZE)):
                if (row + col) % 2:
                    draw.rectangle([x, y, x + CHECKER_SIZE - 1, y + CHECKER_SIZE - 1],
                                   fill=CHECKER_COLORS[1])
        return board

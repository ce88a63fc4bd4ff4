"""
Command line workflow for Sprite Atlas Prep.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .builder import AtlasBuilder
from .free_space import free_space_kinds
from .layout import write_layout
from .logger import generate_log_filename, setup_logging
from .renderer import AtlasRenderer
from .settings import AtlasSettings
from .sprite_image import load_sprite_images

EXIT_OK = 0
EXIT_PARTIAL = 1
EXIT_INVALID = 2

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sprite_atlas_prep",
        description="Pack sprite images into a texture atlas (PNG + JSON layout)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python sprite_atlas_prep.py sprites/ --auto-size --trim\n"
            "  python sprite_atlas_prep.py a.png b.png --width 512 --height 512 --padding 2\n"
        ),
    )
    p.add_argument("inputs", nargs="+", help="Image files and/or folders")
    p.add_argument("-o", "--output", default=".", help="Output directory")
    p.add_argument("--name", default="atlas", help="Base filename for the atlas")
    p.add_argument("--width", type=int, default=1024)
    p.add_argument("--height", type=int, default=1024)
    p.add_argument("--auto-size", action="store_true", help="Find the smallest square atlas")
    p.add_argument("--trim", dest="trimming", action="store_true", help="Crop transparent borders")
    p.add_argument("--padding", type=int, default=0)
    p.add_argument("--circular", action="store_true")
    p.add_argument("--border", action="store_true")
    p.add_argument("--border-width", type=int, default=2)
    p.add_argument("--border-color", default="#000000")
    p.add_argument("--free-space", default="split_prune", choices=free_space_kinds())
    p.add_argument("--preview", action="store_true", help="Also write a scaled preview")
    p.add_argument("--log", action="store_true", help="Write a project log next to the atlas")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for Sprite Atlas Prep."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        settings = AtlasSettings(
            width=args.width,
            height=args.height,
            auto_size=args.auto_size,
            trimming=args.trimming,
            padding=args.padding,
            circular=args.circular,
            border=args.border,
            border_width=args.border_width,
            border_color=args.border_color,
            free_space=args.free_space,
        )
    except ValueError as e:
        logger.error(f"Invalid settings: {e}")
        return EXIT_INVALID

    sprites = load_sprite_images(args.inputs)
    if not sprites:
        logger.error("No images found in the given inputs")
        return EXIT_INVALID

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    result = AtlasBuilder(settings).build(sprites)

    log_path = output_dir / generate_log_filename(args.name) if args.log else None
    renderer = AtlasRenderer()
    renderer.generate_atlas(result, settings, output_dir / f"{args.name}.png",
                            log_path=log_path, project_name=args.name)
    write_layout(result.placements, output_dir / f"{args.name}.json")

    if args.preview:
        renderer.generate_preview(result, settings, output_dir / f"{args.name}_preview.png")

    if not result.complete:
        logger.warning(f"Unplaced sprites: {', '.join(result.unplaced)}")
        return EXIT_PARTIAL
    return EXIT_OK

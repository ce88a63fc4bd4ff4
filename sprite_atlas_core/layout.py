"""
JSON layout export for Sprite Atlas Prep.
"""

import json
from pathlib import Path
from typing import Dict, Iterable, Union

from .builder import AtlasPlacement


def build_layout(placements: Iterable[AtlasPlacement]) -> Dict[str, dict]:
    """
    Map each sprite name to its geometry in the atlas.

    A later placement with the same name replaces an earlier one.
    """
    layout = {}
    for p in placements:
        layout[p.name] = {
            "name": p.name,
            "fullname": p.fullname,
            "x": p.x,
            "y": p.y,
            "width": p.width,
            "height": p.height,
        }
    return layout


def layout_to_json(placements: Iterable[AtlasPlacement]) -> str:
    return json.dumps(build_layout(placements), indent=2, ensure_ascii=False)


def write_layout(placements: Iterable[AtlasPlacement], path: Union[str, Path]) -> Path:
    """Write the layout JSON next to the atlas and return its path."""
    path = Path(path)
    path.write_text(layout_to_json(placements) + "\n", encoding="utf-8")
    return path

"""Shared test fixtures for sprite-atlas-prep."""

import pytest
from PIL import Image

from sprite_atlas_core.sprite_image import SpriteImage


@pytest.fixture
def make_sprite():
    """Factory for solid-colour RGBA sprites."""
    def _make(name, width, height, color=(200, 40, 40, 255)):
        image = Image.new("RGBA", (width, height), color)
        return SpriteImage(name=name, fullname=f"{name}.png", image=image)
    return _make


@pytest.fixture
def sprite_dir(tmp_path):
    """Folder with three small PNG sprites and one non-image file."""
    folder = tmp_path / "sprites"
    folder.mkdir()
    sizes = {"hero": (40, 60), "coin": (16, 16), "tree": (64, 64)}
    for name, size in sizes.items():
        Image.new("RGBA", size, (10, 120, 200, 255)).save(folder / f"{name}.png")
    (folder / "notes.txt").write_text("not an image")
    return folder

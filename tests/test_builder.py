"""Tests for the atlas build pipeline and layout export."""

import json

from PIL import Image

from sprite_atlas_core.builder import AtlasBuilder
from sprite_atlas_core.layout import build_layout, layout_to_json, write_layout
from sprite_atlas_core.settings import AtlasSettings
from sprite_atlas_core.sprite_image import SpriteImage


class TestAtlasBuilder:
    def test_fixed_size(self, make_sprite):
        result = AtlasBuilder(AtlasSettings(width=64, height=64)).build(
            [make_sprite("a", 10, 10), make_sprite("b", 20, 30)]
        )

        assert (result.width, result.height) == (64, 64)
        assert [p.name for p in result.placements] == ["b", "a"]
        assert result.complete
        assert not result.exhausted

    def test_padding_removed_from_placements(self, make_sprite):
        settings = AtlasSettings(width=64, height=64, padding=2)
        result = AtlasBuilder(settings).build([make_sprite("a", 10, 10), make_sprite("b", 10, 10)])

        first, second = result.placements
        assert (first.x, first.y, first.width, first.height) == (0, 0, 10, 10)
        assert (second.x, second.y, second.width, second.height) == (12, 0, 10, 10)

    def test_auto_size(self, make_sprite):
        sprites = [make_sprite(f"tile{i}", 64, 64) for i in range(3)]
        result = AtlasBuilder(AtlasSettings(auto_size=True)).build(sprites)
        assert (result.width, result.height) == (256, 256)
        assert len(result.placements) == 3

    def test_unplaced_reported(self, make_sprite):
        result = AtlasBuilder(AtlasSettings(width=16, height=16)).build(
            [make_sprite("big", 32, 32), make_sprite("small", 8, 8)]
        )
        assert result.unplaced == ["big"]
        assert not result.complete
        assert [p.name for p in result.placements] == ["small"]

    def test_trimming_shrinks_sprite(self):
        img = Image.new("RGBA", (20, 20), (0, 0, 0, 0))
        img.paste((0, 255, 0, 255), (5, 5, 9, 11))
        original = SpriteImage("leaf", "leaf.png", img)

        result = AtlasBuilder(AtlasSettings(width=32, height=32, trimming=True)).build([original])

        placement = result.placements[0]
        assert (placement.width, placement.height) == (4, 6)
        assert placement.sprite.image.size == (4, 6)
        assert (original.width, original.height) == (20, 20)

    def test_empty(self):
        result = AtlasBuilder(AtlasSettings(width=128, height=64)).build([])
        assert (result.width, result.height) == (128, 64)
        assert result.placements == []
        assert result.complete

    def test_guillotine_strategy(self, make_sprite):
        settings = AtlasSettings(width=64, height=64, free_space="guillotine")
        result = AtlasBuilder(settings).build([make_sprite(f"s{i}", 16, 16) for i in range(16)])
        assert len(result.placements) == 16
        positions = {(p.x, p.y) for p in result.placements}
        assert len(positions) == 16


class TestLayout:
    def test_build_layout(self, make_sprite):
        result = AtlasBuilder(AtlasSettings(width=64, height=64)).build([make_sprite("hero", 10, 20)])
        layout = build_layout(result.placements)
        assert layout == {
            "hero": {"name": "hero", "fullname": "hero.png", "x": 0, "y": 0, "width": 10, "height": 20}
        }

    def test_json_and_file(self, make_sprite, tmp_path):
        result = AtlasBuilder(AtlasSettings(width=64, height=64)).build(
            [make_sprite("a", 5, 5), make_sprite("b", 6, 6)]
        )
        assert set(json.loads(layout_to_json(result.placements))) == {"a", "b"}

        path = write_layout(result.placements, tmp_path / "atlas.json")
        assert json.loads(path.read_text(encoding="utf-8"))["b"]["width"] == 6

    def test_later_duplicate_name_wins(self, make_sprite):
        result = AtlasBuilder(AtlasSettings(width=64, height=64)).build(
            [make_sprite("dup", 10, 10), make_sprite("dup", 5, 5)]
        )
        layout = build_layout(result.placements)
        assert layout["dup"]["width"] == 5

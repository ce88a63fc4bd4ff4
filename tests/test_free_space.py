"""Tests for free-space strategies."""

import pytest

from sprite_atlas_core.free_space import (
    FreeSpaceKind,
    GuillotineFreeSpace,
    Rect,
    SplitPruneFreeSpace,
    create_free_space,
    free_space_kinds,
)


class TestRect:
    def test_edges(self):
        r = Rect(10, 20, 30, 40)
        assert r.right == 40
        assert r.bottom == 60
        assert r.area == 1200

    def test_intersects_excludes_touching(self):
        a = Rect(0, 0, 10, 10)
        assert a.intersects(Rect(5, 5, 10, 10))
        assert not a.intersects(Rect(10, 0, 5, 5))
        assert not a.intersects(Rect(0, 10, 5, 5))

    def test_contains(self):
        outer = Rect(0, 0, 10, 10)
        assert outer.contains(Rect(2, 2, 3, 3))
        assert outer.contains(outer)
        assert not outer.contains(Rect(8, 8, 3, 3))

    def test_to_dict(self):
        assert Rect(1, 2, 3, 4).to_dict() == {"x": 1, "y": 2, "width": 3, "height": 4}


class TestSplitPrune:
    def test_starts_with_whole_container(self):
        assert SplitPruneFreeSpace(64, 32).regions == [Rect(0, 0, 64, 32)]

    def test_centre_placement_yields_four_bands(self):
        space = SplitPruneFreeSpace(20, 20)
        space.occupy(Rect(5, 5, 10, 10))
        assert space.regions == [
            Rect(0, 0, 20, 5),
            Rect(0, 15, 20, 5),
            Rect(0, 0, 5, 20),
            Rect(15, 0, 5, 20),
        ]

    def test_corner_placement_yields_two_bands(self):
        space = SplitPruneFreeSpace(20, 20)
        space.occupy(Rect(0, 0, 10, 10))
        assert space.regions == [Rect(0, 10, 20, 10), Rect(10, 0, 10, 20)]

    def test_full_cover_removes_region(self):
        space = SplitPruneFreeSpace(20, 20)
        space.occupy(Rect(0, 0, 20, 20))
        assert space.regions == []

    def test_non_intersecting_regions_untouched(self):
        space = SplitPruneFreeSpace(20, 20)
        space.regions = [Rect(0, 0, 10, 10), Rect(10, 10, 10, 10)]
        space.occupy(Rect(0, 0, 5, 10))
        assert Rect(10, 10, 10, 10) in space.regions
        assert Rect(5, 0, 5, 10) in space.regions

    def test_prune_drops_contained_and_duplicates(self):
        regions = [Rect(0, 0, 5, 5), Rect(0, 0, 5, 5), Rect(0, 0, 10, 10), Rect(20, 20, 2, 2)]
        assert SplitPruneFreeSpace._prune(regions) == [Rect(0, 0, 10, 10), Rect(20, 20, 2, 2)]

    def test_prune_keeps_one_of_identical(self):
        assert SplitPruneFreeSpace._prune([Rect(1, 1, 4, 4), Rect(1, 1, 4, 4)]) == [Rect(1, 1, 4, 4)]

    def test_candidates_filter_by_size(self):
        space = SplitPruneFreeSpace(20, 20)
        space.occupy(Rect(0, 0, 10, 10))
        assert space.candidates(15, 10) == [Rect(0, 10, 20, 10)]
        assert space.candidates(10, 15) == [Rect(10, 0, 10, 20)]
        assert space.candidates(15, 15) == []


class TestGuillotine:
    def test_cut_down_and_right(self):
        space = GuillotineFreeSpace(20, 20)
        space.occupy(Rect(0, 0, 5, 8))
        assert space.regions == [Rect(0, 8, 20, 12), Rect(5, 0, 15, 8)]

    def test_exact_fit_leaves_nothing(self):
        space = GuillotineFreeSpace(8, 8)
        space.occupy(Rect(0, 0, 8, 8))
        assert space.regions == []

    def test_unanchored_footprint_rejected(self):
        space = GuillotineFreeSpace(20, 20)
        with pytest.raises(ValueError):
            space.occupy(Rect(3, 3, 2, 2))


class TestFactory:
    def test_accepts_enum_and_value(self):
        assert isinstance(create_free_space(FreeSpaceKind.SPLIT_PRUNE, 4, 4), SplitPruneFreeSpace)
        assert isinstance(create_free_space("guillotine", 4, 4), GuillotineFreeSpace)

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            create_free_space("skyline", 4, 4)

    def test_kind_names(self):
        assert free_space_kinds() == ("split_prune", "guillotine")

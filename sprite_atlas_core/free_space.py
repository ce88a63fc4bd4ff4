"""
Free-space bookkeeping for the atlas packer.
Tracks the unused regions of a container as placements are carved out of it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union


@dataclass(frozen=True)
class Rect:
    """Axis-aligned integer rectangle in pixel units."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def intersects(self, other: 'Rect') -> bool:
        """Check if the two rectangles share a non-empty area."""
        return (self.x < other.right and self.right > other.x and
                self.y < other.bottom and self.bottom > other.y)

    def contains(self, other: 'Rect') -> bool:
        """Check if other lies completely within this rectangle."""
        return (other.x >= self.x and other.y >= self.y and
                other.right <= self.right and other.bottom <= self.bottom)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


class FreeSpaceKind(Enum):
    """Supported free-space strategies."""
    SPLIT_PRUNE = "split_prune"
    GUILLOTINE = "guillotine"


class SplitPruneFreeSpace:
    """
    Free-region list maintained by splitting and pruning.

    Every region intersecting a new placement is replaced by the bands left
    around it, then regions contained in another region are dropped.
    Regions may overlap each other.
    """

    kind = FreeSpaceKind.SPLIT_PRUNE

    def __init__(self, width: int, height: int):
        self.regions: List[Rect] = [Rect(0, 0, width, height)]

    def candidates(self, width: int, height: int) -> List[Rect]:
        """Return the free regions large enough for a width x height item."""
        return [r for r in self.regions if r.width >= width and r.height >= height]

    def occupy(self, footprint: Rect) -> None:
        """
        Remove a placed footprint from the free space.

        Args:
            footprint: Rectangle now covered by a placed item
        """
        updated = []
        for region in self.regions:
            if region.intersects(footprint):
                updated.extend(self._split(region, footprint))
            else:
                updated.append(region)
        self.regions = self._prune(updated)

    @staticmethod
    def _split(region: Rect, footprint: Rect) -> List[Rect]:
        bands = []

        # Top
        if region.y < footprint.y < region.bottom:
            bands.append(Rect(region.x, region.y, region.width, footprint.y - region.y))
        # Bottom
        if footprint.bottom < region.bottom:
            bands.append(Rect(region.x, footprint.bottom, region.width, region.bottom - footprint.bottom))
        # Left
        if region.x < footprint.x < region.right:
            bands.append(Rect(region.x, region.y, footprint.x - region.x, region.height))
        # Right
        if footprint.right < region.right:
            bands.append(Rect(footprint.right, region.y, region.right - footprint.right, region.height))

        return bands

    @staticmethod
    def _prune(regions: List[Rect]) -> List[Rect]:
        kept = []
        for i, region in enumerate(regions):
            redundant = any(
                j != i and other.contains(region) and (other != region or j < i)
                for j, other in enumerate(regions)
            )
            if not redundant:
                kept.append(region)
        return kept


class GuillotineFreeSpace:
    """
    Disjoint free-region list maintained by guillotine cuts.

    The region hosting a placement is cut into the strip below the item
    (full region width) and the strip to its right (item height).
    """

    kind = FreeSpaceKind.GUILLOTINE

    def __init__(self, width: int, height: int):
        self.regions: List[Rect] = [Rect(0, 0, width, height)]

    def candidates(self, width: int, height: int) -> List[Rect]:
        """Return the free regions large enough for a width x height item."""
        return [r for r in self.regions if r.width >= width and r.height >= height]

    def occupy(self, footprint: Rect) -> None:
        """
        Cut the region whose top-left corner hosts the footprint.

        Args:
            footprint: Rectangle now covered by a placed item
        """
        for index, node in enumerate(self.regions):
            if node.x == footprint.x and node.y == footprint.y and node.contains(footprint):
                break
        else:
            raise ValueError(f"No free region anchored at ({footprint.x}, {footprint.y})")

        down = Rect(node.x, footprint.bottom, node.width, node.height - footprint.height)
        right = Rect(footprint.right, node.y, node.width - footprint.width, footprint.height)
        self.regions[index:index + 1] = [r for r in (down, right) if r.area > 0]


FreeSpace = Union[SplitPruneFreeSpace, GuillotineFreeSpace]

_STRATEGIES = {
    FreeSpaceKind.SPLIT_PRUNE: SplitPruneFreeSpace,
    FreeSpaceKind.GUILLOTINE: GuillotineFreeSpace,
}


def create_free_space(kind: FreeSpaceKind, width: int, height: int) -> FreeSpace:
    """
    Create the free-space tracker for a container.

    Args:
        kind: Strategy to use (enum member or its string value)
        width: Container width in pixels
        height: Container height in pixels

    Returns:
        Fresh free-space tracker covering the whole container
    """
    kind = FreeSpaceKind(kind)
    return _STRATEGIES[kind](width, height)


def free_space_kinds() -> Tuple[str, ...]:
    """Names accepted on the command line and in settings."""
    return tuple(kind.value for kind in FreeSpaceKind)
